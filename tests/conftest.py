"""Shared pytest fixtures for post-loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest

HELLO = "---\ntitle: Hello\ndate: 2025-01-01\n---\nBody text"


def write_post(posts_dir: Path, name: str, text: str) -> Path:
    """Write a post document, creating parent directories."""
    path = posts_dir / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a small Jekyll-style site.

    Returns:
        Site root with a _config.yml, three valid posts, one post missing
        its title and one ignored non-markdown file.
    """
    (tmp_path / "_config.yml").write_text("title: Test blog\ntimezone: UTC\n", encoding="utf-8")
    posts = tmp_path / "_posts"
    write_post(posts, "2025-01-01-hello.md", HELLO)
    write_post(
        posts,
        "2025-06-01-pulumi-stacks.md",
        "---\ntitle: Pulumi stacks\ndate: 2025-06-01 09:30:00 +0200\n"
        "categories: [infra, dotnet]\ntags: pulumi\nlayout: post\n---\nStacks.\n",
    )
    write_post(
        posts,
        "drafts/2024-12-31-row-level-security.markdown",
        "---\ntitle: Row level security\ndate: 2024-12-31\ntags: [sql, security]\n---\nRLS.\n",
    )
    write_post(posts, "2025-02-01-untitled.md", "---\ndate: 2025-02-01\n---\nBody")
    write_post(posts, "notes.txt", "not a post")
    return tmp_path

"""Slug derivation from source document names."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from slugify import slugify

# Jekyll post filenames look like 2025-01-01-hello-world.md
DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}-")


def slug_from_name(name: str) -> str:
    """Derive a URL-safe slug from a document name.

    The directory part and extension are dropped, as is a leading
    ``YYYY-MM-DD-`` date prefix.

    Examples:
        _posts/2025-01-01-Hello-World.md -> hello-world
        notes/Row Level Security.markdown -> row-level-security
    """
    stem = PurePosixPath(name.replace("\\", "/")).name
    if "." in stem.lstrip("."):
        stem = stem.rsplit(".", 1)[0]
    stem = DATE_PREFIX.sub("", stem)
    return slugify(stem)

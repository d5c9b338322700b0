"""Data models for loaded posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Iterator, Mapping

from post_loader.exceptions import ParseError, ValidationError
from post_loader.frontmatter import MetadataValue


@dataclass(frozen=True)
class Post:
    """A single validated blog post."""

    slug: str
    title: str
    published_at: datetime
    categories: frozenset[str]
    tags: tuple[str, ...]
    body: str
    extra: Mapping[str, MetadataValue] = field(default_factory=lambda: MappingProxyType({}))
    source_name: str | None = None

    def has_tag(self, tag: str) -> bool:
        """Check if post has a specific tag."""
        return tag in self.tags

    def in_category(self, category: str) -> bool:
        """Check if post belongs to a category."""
        return category in self.categories


@dataclass(frozen=True)
class RejectedDocument:
    """A source document that did not make it into the published collection."""

    name: str
    error: ParseError | ValidationError


@dataclass(frozen=True)
class PostWarning:
    """A non-fatal issue found on a published post."""

    name: str
    message: str


@dataclass(frozen=True)
class PostCollection:
    """Published posts, newest first, plus everything that was rejected."""

    published: tuple[Post, ...] = ()
    rejected: tuple[RejectedDocument, ...] = ()
    warnings: tuple[PostWarning, ...] = ()

    def __len__(self) -> int:
        return len(self.published)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.published)

    @property
    def is_clean(self) -> bool:
        """True when no document was rejected."""
        return not self.rejected

    def find_by_slug(self, slug: str) -> Post | None:
        """Return the published post with this slug, or None."""
        for post in self.published:
            if post.slug == slug:
                return post
        return None

    def by_category(self) -> dict[str, list[Post]]:
        """Group published posts by category, newest first within each."""
        groups: dict[str, list[Post]] = {}
        for post in self.published:
            for category in sorted(post.categories):
                groups.setdefault(category, []).append(post)
        return dict(sorted(groups.items()))

    def by_tag(self) -> dict[str, list[Post]]:
        """Group published posts by tag, newest first within each."""
        groups: dict[str, list[Post]] = {}
        for post in self.published:
            for tag in post.tags:
                groups.setdefault(tag, []).append(post)
        return dict(sorted(groups.items()))

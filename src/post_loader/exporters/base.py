"""Base exporter interface for post manifests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from post_loader.exceptions import ValidationError
from post_loader.frontmatter import to_plain

if TYPE_CHECKING:
    from post_loader.posts import Post, PostCollection, RejectedDocument


class Exporter(ABC):
    """Base class for collection exporters."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without dot (e.g., 'json', 'yaml')."""
        ...

    @abstractmethod
    def export(self, collection: PostCollection, output_path: Path) -> int:
        """Export a collection manifest to file.

        Args:
            collection: The loaded post collection.
            output_path: Path to output file.

        Returns:
            Number of published posts exported.
        """
        ...

    @staticmethod
    def post_to_dict(post: Post) -> dict:
        """Convert a post to an exportable dictionary (body excluded).

        Args:
            post: The post to convert.

        Returns:
            Dictionary with the post's metadata.
        """
        extra = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in to_plain(post.extra).items()
        }
        return {
            "slug": post.slug,
            "title": post.title,
            "published_at": post.published_at.isoformat(),
            "categories": sorted(post.categories),
            "tags": list(post.tags),
            "source": post.source_name,
            "extra": extra,
        }

    @staticmethod
    def rejected_to_dict(rejected: RejectedDocument) -> dict:
        """Convert a rejected document to an exportable dictionary."""
        error = rejected.error
        data: dict = {"name": rejected.name, "error": str(error)}
        if isinstance(error, ValidationError):
            data["kind"] = error.kind.value
            data["field"] = error.field
        else:
            data["kind"] = "parse_error"
            data["line"] = error.line
        return data

    def manifest(self, collection: PostCollection) -> dict:
        """Build the full manifest payload for a collection."""
        posts = [self.post_to_dict(post) for post in collection.published]
        return {
            "posts": posts,
            "count": len(posts),
            "rejected": [self.rejected_to_dict(r) for r in collection.rejected],
        }

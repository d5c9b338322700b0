"""JSON exporter for post manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from post_loader.exporters.base import Exporter

if TYPE_CHECKING:
    from post_loader.posts import PostCollection


class JsonExporter(Exporter):
    """Export a post manifest to JSON format."""

    @property
    def extension(self) -> str:
        """Return json extension."""
        return "json"

    def export(self, collection: PostCollection, output_path: Path) -> int:
        """Export the manifest to a JSON file.

        Args:
            collection: The loaded post collection.
            output_path: Path to output JSON file.

        Returns:
            Number of published posts exported.
        """
        output = self.manifest(collection)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        return output["count"]

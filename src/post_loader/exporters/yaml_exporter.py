"""YAML exporter for post manifests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from post_loader.exporters.base import Exporter

if TYPE_CHECKING:
    from post_loader.posts import PostCollection


class YamlExporter(Exporter):
    """Export a post manifest to YAML format."""

    @property
    def extension(self) -> str:
        """Return yaml extension."""
        return "yaml"

    def export(self, collection: PostCollection, output_path: Path) -> int:
        """Export the manifest to a YAML file.

        Args:
            collection: The loaded post collection.
            output_path: Path to output YAML file.

        Returns:
            Number of published posts exported.
        """
        output = self.manifest(collection)
        with open(output_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(output, f, allow_unicode=True, sort_keys=False)
        return output["count"]

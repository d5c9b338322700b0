"""Post manifest exporters for JSON and YAML formats."""

from post_loader.exporters.base import Exporter
from post_loader.exporters.json_exporter import JsonExporter
from post_loader.exporters.yaml_exporter import YamlExporter

EXPORTERS = {
    "json": JsonExporter,
    "yaml": YamlExporter,
}

__all__ = [
    "EXPORTERS",
    "Exporter",
    "JsonExporter",
    "YamlExporter",
]

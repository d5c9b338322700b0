"""Typed values decoded from a front matter block."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Union

ScalarType = Union[str, int, float, bool, date, datetime, None]


@dataclass(frozen=True)
class Scalar:
    """A single scalar value (string, number, boolean, date or null)."""

    value: ScalarType

    @property
    def is_null(self) -> bool:
        return self.value is None

    def as_text(self) -> str:
        """Render the value as a string; null renders as an empty string."""
        if self.value is None:
            return ""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, (date, datetime)):
            return self.value.isoformat()
        return str(self.value)


@dataclass(frozen=True)
class ListValue:
    """An ordered list of strings."""

    items: tuple[str, ...]

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


MetadataValue = Union[Scalar, ListValue]
Metadata = Mapping[str, MetadataValue]


def to_plain(metadata: Metadata) -> dict[str, object]:
    """Convert decoded metadata back into plain Python values."""
    plain: dict[str, object] = {}
    for key, value in metadata.items():
        if isinstance(value, ListValue):
            plain[key] = list(value.items)
        else:
            plain[key] = value.value
    return plain


def from_plain(data: Mapping[str, object]) -> dict[str, MetadataValue]:
    """Wrap plain Python values as metadata values.

    Raises:
        TypeError: If a value is neither a supported scalar nor a list of
            scalars.
    """
    metadata: dict[str, MetadataValue] = {}
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            items = []
            for item in value:
                if isinstance(item, (list, tuple, dict)):
                    raise TypeError(f"Nested collection under '{key}' is not supported")
                items.append(Scalar(item).as_text())
            metadata[key] = ListValue(tuple(items))
        elif value is None or isinstance(value, (str, int, float, bool, date, datetime)):
            metadata[key] = Scalar(value)
        else:
            raise TypeError(f"Unsupported value for '{key}': {type(value).__name__}")
    return metadata

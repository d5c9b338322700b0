"""Exceptions raised while loading posts."""

from __future__ import annotations

from enum import Enum


class PostError(Exception):
    """Base exception for post loading."""


class ParseError(PostError):
    """Front matter block is not well-formed."""

    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"line {line}: {reason}")


class ErrorKind(str, Enum):
    """Kinds of post validation failure."""

    MISSING_FIELD = "missing_field"
    MALFORMED_FIELD = "malformed_field"
    DUPLICATE_SLUG = "duplicate_slug"


class ValidationError(PostError):
    """Front matter parsed but does not describe a valid post."""

    def __init__(
        self,
        kind: ErrorKind,
        field: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.field = field
        self.detail = detail
        message = kind.value
        if field is not None:
            message += f" ({field})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class SourceError(PostError):
    """Post documents could not be read from their source."""


class ConfigError(PostError):
    """Site configuration is invalid."""

"""Read post documents from a directory on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, NamedTuple

from post_loader.exceptions import SourceError

LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md", ".markdown")


class SourceDocument(NamedTuple):
    """A candidate post: its name and raw text."""

    name: str
    text: str


class DirectorySource:
    """Read-only access to a directory of post documents (e.g. ``_posts``)."""

    def __init__(
        self,
        path: Path | str,
        *,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        recursive: bool = True,
    ) -> None:
        """
        Point the source at a directory.

        Args:
            path: Directory holding post documents
            extensions: File suffixes treated as posts (case-insensitive)
            recursive: Also descend into subdirectories
        """
        self.path = Path(path)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.recursive = recursive

    def iter_paths(self) -> Iterator[Path]:
        """Yield matching files ordered by relative path."""
        if not self.path.is_dir():
            raise SourceError(f"Post directory not found: {self.path}")

        pattern = "**/*" if self.recursive else "*"
        paths = [
            p
            for p in self.path.glob(pattern)
            if p.is_file()
            and p.suffix.lower() in self.extensions
            and not any(part.startswith(".") for part in p.relative_to(self.path).parts)
        ]
        yield from sorted(paths, key=lambda p: p.relative_to(self.path).as_posix())

    def iter_documents(self) -> Iterator[SourceDocument]:
        """Yield each post document with its path relative to the source root."""
        for path in self.iter_paths():
            name = path.relative_to(self.path).as_posix()
            try:
                text = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise SourceError(f"{path} is not valid UTF-8: {e}") from e
            except OSError as e:
                raise SourceError(f"Failed to read {path}: {e}") from e
            LOGGER.debug("Read %s (%d chars)", name, len(text))
            yield SourceDocument(name=name, text=text)

    def read_all(self) -> list[SourceDocument]:
        """Read every document up front."""
        return list(self.iter_documents())

"""Parse cache keyed by document name and content hash."""

from __future__ import annotations

import hashlib

from post_loader.exceptions import ParseError
from post_loader.frontmatter import FrontMatter, parse_front_matter


def content_hash(text: str) -> str:
    """SHA-256 hex digest of the document text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class ParseCache:
    """Remembers parse results so unchanged documents are not re-parsed.

    Entries are keyed by ``(name, content hash)``; editing a document
    produces a new key. Parse errors are cached too.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], FrontMatter | ParseError] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def parse(self, name: str, text: str) -> FrontMatter:
        """Parse a document, reusing a previous result for identical input.

        Raises:
            ParseError: If the document (now or previously) failed to parse.
        """
        key = (name, content_hash(text))
        if key in self._entries:
            self.hits += 1
            cached = self._entries[key]
        else:
            self.misses += 1
            try:
                cached = parse_front_matter(text)
            except ParseError as exc:
                cached = exc
            self._entries[key] = cached

        if isinstance(cached, ParseError):
            raise cached
        return cached

    def prune(self, live_keys: set[tuple[str, str]]) -> int:
        """Drop entries not in ``live_keys``; returns how many were removed."""
        stale = [key for key in self._entries if key not in live_keys]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

"""High-level entry point: read a site's posts and build the collection."""

from __future__ import annotations

import logging
from typing import Optional

from .config import LoaderConfig
from .posts import DirectorySource, ParseCache, PostCollection, build_collection, content_hash

LOGGER = logging.getLogger(__name__)


def load_posts(config: LoaderConfig, cache: Optional[ParseCache] = None) -> PostCollection:
    """Load every post under the configured posts directory.

    Rejections and warnings are logged; the returned collection is always
    usable even when some documents were rejected.
    """
    source = DirectorySource(config.posts_path, extensions=config.extensions)
    LOGGER.info("Loading posts from %s", source.path)

    documents = source.read_all()
    collection = build_collection(documents, cache=cache, default_tz=config.tzinfo())

    for rejected in collection.rejected:
        LOGGER.warning("Rejected %s: %s", rejected.name, rejected.error)
    for warning in collection.warnings:
        LOGGER.info("%s: %s", warning.name, warning.message)

    if cache is not None:
        removed = cache.prune({(doc.name, content_hash(doc.text)) for doc in documents})
        LOGGER.debug("Parse cache: %s hits, %s misses, %s pruned", cache.hits, cache.misses, removed)
    LOGGER.info(
        "Loaded %s documents: %s published, %s rejected",
        len(documents),
        len(collection.published),
        len(collection.rejected),
    )
    return collection

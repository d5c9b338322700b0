"""Assemble validated posts into an ordered collection."""

from __future__ import annotations

import logging
from datetime import timezone, tzinfo
from typing import Iterable, Tuple, Union

from post_loader.exceptions import ErrorKind, ParseError, ValidationError
from post_loader.frontmatter import parse_front_matter
from post_loader.posts.cache import ParseCache
from post_loader.posts.models import Post, PostCollection, PostWarning, RejectedDocument
from post_loader.posts.slugs import slug_from_name
from post_loader.posts.source import SourceDocument
from post_loader.posts.validator import validate_post

LOGGER = logging.getLogger(__name__)

DocumentInput = Union[SourceDocument, Tuple[str, str]]


def _sort_key(post: Post) -> tuple[float, str]:
    return (-post.published_at.timestamp(), post.slug)


def build_collection(
    documents: Iterable[DocumentInput],
    *,
    cache: ParseCache | None = None,
    default_tz: tzinfo = timezone.utc,
) -> PostCollection:
    """Parse and validate a batch of documents.

    Every document ends up either in ``published`` or in ``rejected``; one
    bad document never stops the rest of the batch.

    Args:
        documents: ``SourceDocument`` objects or ``(name, text)`` pairs.
        cache: Optional parse cache shared between builds by the caller.
        default_tz: Zone applied to dates that carry no offset.

    Returns:
        A new collection with posts ordered newest first, ties by slug.
    """
    valid: list[Post] = []
    rejected: list[RejectedDocument] = []
    warnings: list[PostWarning] = []

    for document in documents:
        name, text = document
        try:
            if cache is not None:
                front_matter = cache.parse(name, text)
            else:
                front_matter = parse_front_matter(text)
            post = validate_post(
                front_matter.metadata,
                slug_from_name(name),
                front_matter.body,
                source_name=name,
                default_tz=default_tz,
            )
        except (ParseError, ValidationError) as exc:
            LOGGER.debug("Rejected %s: %s", name, exc)
            rejected.append(RejectedDocument(name=name, error=exc))
            continue

        if not post.body.strip():
            warnings.append(PostWarning(name=name, message="post body is empty"))
        valid.append(post)

    valid.sort(key=_sort_key)

    published: list[Post] = []
    seen: dict[str, Post] = {}
    for post in valid:
        winner = seen.get(post.slug)
        if winner is not None:
            error = ValidationError(
                ErrorKind.DUPLICATE_SLUG,
                "slug",
                f"'{post.slug}' already used by {winner.source_name}",
            )
            rejected.append(RejectedDocument(name=post.source_name or post.slug, error=error))
            continue
        seen[post.slug] = post
        published.append(post)

    published_names = {post.source_name for post in published}
    warnings = [warning for warning in warnings if warning.name in published_names]

    return PostCollection(
        published=tuple(published),
        rejected=tuple(rejected),
        warnings=tuple(warnings),
    )

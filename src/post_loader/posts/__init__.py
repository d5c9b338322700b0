"""Post validation and collection building."""

from post_loader.posts.builder import build_collection
from post_loader.posts.cache import ParseCache, content_hash
from post_loader.posts.models import Post, PostCollection, PostWarning, RejectedDocument
from post_loader.posts.slugs import slug_from_name
from post_loader.posts.source import DirectorySource, SourceDocument
from post_loader.posts.validator import parse_date, validate_post

__all__ = [
    "DirectorySource",
    "ParseCache",
    "Post",
    "PostCollection",
    "PostWarning",
    "RejectedDocument",
    "SourceDocument",
    "build_collection",
    "content_hash",
    "parse_date",
    "slug_from_name",
    "validate_post",
]

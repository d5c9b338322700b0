"""Load, validate and order Jekyll-style blog posts."""

from post_loader.config import LoaderConfig
from post_loader.exceptions import (
    ConfigError,
    ErrorKind,
    ParseError,
    PostError,
    SourceError,
    ValidationError,
)
from post_loader.frontmatter import FrontMatter, dump_front_matter, parse_front_matter
from post_loader.loader import load_posts
from post_loader.posts import (
    DirectorySource,
    ParseCache,
    Post,
    PostCollection,
    RejectedDocument,
    SourceDocument,
    build_collection,
    validate_post,
)

__all__ = [
    "ConfigError",
    "DirectorySource",
    "ErrorKind",
    "FrontMatter",
    "LoaderConfig",
    "ParseCache",
    "ParseError",
    "Post",
    "PostCollection",
    "PostError",
    "RejectedDocument",
    "SourceDocument",
    "SourceError",
    "ValidationError",
    "build_collection",
    "dump_front_matter",
    "load_posts",
    "parse_front_matter",
    "validate_post",
]

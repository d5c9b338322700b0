"""YAML front matter parsing for markdown documents."""

from post_loader.frontmatter.parser import (
    DELIMITER,
    FrontMatter,
    decode_block,
    dump_front_matter,
    parse_front_matter,
    split_front_matter,
)
from post_loader.frontmatter.values import (
    ListValue,
    Metadata,
    MetadataValue,
    Scalar,
    from_plain,
    to_plain,
)

__all__ = [
    "DELIMITER",
    "FrontMatter",
    "ListValue",
    "Metadata",
    "MetadataValue",
    "Scalar",
    "decode_block",
    "dump_front_matter",
    "from_plain",
    "parse_front_matter",
    "split_front_matter",
    "to_plain",
]

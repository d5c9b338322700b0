"""Split documents into a YAML front matter block and a body."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from post_loader.exceptions import ParseError
from post_loader.frontmatter.values import (
    Metadata,
    MetadataValue,
    from_plain,
    to_plain,
)

DELIMITER = "---"

_STR_TAG = "tag:yaml.org,2002:str"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


@dataclass(frozen=True)
class FrontMatter:
    """Decoded front matter and the untouched body that follows it."""

    metadata: Mapping[str, MetadataValue] = field(default_factory=lambda: MappingProxyType({}))
    body: str = ""
    # 1-based line of the document where the body starts
    body_line: int = 1

    @property
    def has_metadata(self) -> bool:
        return bool(self.metadata)


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def split_front_matter(text: str) -> tuple[str | None, str, int]:
    """Locate the front matter block at the start of a document.

    Args:
        text: Raw document text.

    Returns:
        Tuple of (block text or None, body text, body start line). When the
        first line is not a delimiter the whole document is body.

    Raises:
        ParseError: If the opening delimiter has no closing delimiter.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return None, text, 1

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return block, body, index + 2

    raise ParseError(1, "unterminated front matter block")


def _node_line(node: yaml.Node, offset: int) -> int:
    return offset + node.start_mark.line + 1


def _check_flat_mapping(node: yaml.Node, offset: int) -> None:
    """Reject anything beyond a flat mapping of scalars and scalar lists."""
    if not isinstance(node, yaml.MappingNode):
        raise ParseError(_node_line(node, offset), "front matter must be a mapping")

    seen: set[str] = set()
    for key_node, value_node in node.value:
        if not isinstance(key_node, yaml.ScalarNode) or key_node.tag != _STR_TAG:
            raise ParseError(_node_line(key_node, offset), "front matter keys must be strings")
        key = key_node.value
        if key in seen:
            raise ParseError(_node_line(key_node, offset), f"duplicate key '{key}'")
        seen.add(key)

        if isinstance(value_node, yaml.MappingNode):
            raise ParseError(_node_line(value_node, offset), f"nested mapping under '{key}'")
        if isinstance(value_node, yaml.SequenceNode):
            for item in value_node.value:
                if not isinstance(item, yaml.ScalarNode):
                    raise ParseError(
                        _node_line(item, offset),
                        f"list under '{key}' may only hold scalars",
                    )


def _construct_scalar(loader: yaml.SafeLoader, node: yaml.Node, offset: int) -> Any:
    """Construct one scalar; impossible calendar dates stay as plain strings."""
    try:
        return loader.construct_object(node, deep=True)
    except ValueError as exc:
        if node.tag == _TIMESTAMP_TAG:
            return node.value
        raise ParseError(_node_line(node, offset), str(exc)) from exc


def decode_block(block: str, offset: int = 1) -> dict[str, MetadataValue]:
    """Decode a front matter block into an ordered flat mapping.

    Args:
        block: YAML text between the delimiters.
        offset: Number of document lines preceding the block, used to
            report line numbers relative to the whole document.

    Raises:
        ParseError: If the YAML is malformed or not a flat mapping.
    """
    if not block.strip():
        return {}

    loader = yaml.SafeLoader(block)
    metadata: dict[str, MetadataValue] = {}
    try:
        node = loader.get_single_node()
        if node is None:
            return {}
        _check_flat_mapping(node, offset)

        for key_node, value_node in node.value:
            key = key_node.value
            if isinstance(value_node, yaml.SequenceNode):
                value = [_construct_scalar(loader, item, offset) for item in value_node.value]
            else:
                value = _construct_scalar(loader, value_node, offset)
            try:
                metadata.update(from_plain({key: value}))
            except TypeError as exc:
                raise ParseError(_node_line(key_node, offset), str(exc)) from exc
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark or exc.context_mark
        line = offset + mark.line + 1 if mark is not None else offset + 1
        raise ParseError(line, exc.problem or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ParseError(offset + 1, str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(offset + 1, "front matter nested too deeply") from exc
    finally:
        loader.dispose()
    return metadata


def parse_front_matter(text: str) -> FrontMatter:
    """Parse a document into metadata and body.

    Documents that do not open with ``---`` are returned as body only with
    empty metadata.

    Raises:
        ParseError: On malformed or unterminated front matter.
    """
    block, body, body_line = split_front_matter(text)
    if block is None:
        return FrontMatter(metadata=MappingProxyType({}), body=body, body_line=body_line)
    metadata = decode_block(block)
    return FrontMatter(metadata=MappingProxyType(metadata), body=body, body_line=body_line)


def dump_front_matter(metadata: Metadata, body: str = "") -> str:
    """Encode metadata and body as a document readable by parse_front_matter.

    Decoding the result gives back an equal mapping for every supported
    value except float NaN, which decodes to NaN but never compares equal.
    """
    plain = to_plain(metadata)
    block = ""
    if plain:
        block = yaml.safe_dump(
            plain,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )
    return f"{DELIMITER}\n{block}{DELIMITER}\n{body}"


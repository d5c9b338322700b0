"""Turn decoded front matter into validated posts."""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from types import MappingProxyType

from post_loader.exceptions import ErrorKind, ValidationError
from post_loader.frontmatter import ListValue, Metadata, MetadataValue, Scalar
from post_loader.posts.models import Post

TITLE_KEY = "title"
DATE_KEY = "date"
CATEGORIES_KEY = "categories"
CATEGORY_KEY = "category"
TAGS_KEY = "tags"

RESERVED_KEYS = frozenset({TITLE_KEY, DATE_KEY, CATEGORIES_KEY, CATEGORY_KEY, TAGS_KEY})

# Accepted string layouts for the date key, tried in order.
DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)


def parse_date(value: MetadataValue, default_tz: tzinfo = timezone.utc) -> datetime:
    """Parse a date value into a timezone-aware datetime.

    Values without an offset are placed in ``default_tz``.

    Raises:
        ValidationError: MALFORMED_FIELD if the value is not a date.
    """
    if not isinstance(value, Scalar):
        raise ValidationError(ErrorKind.MALFORMED_FIELD, DATE_KEY, "expected a single date")

    raw = value.value
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, date):
        parsed = datetime.combine(raw, time())
    elif isinstance(raw, str):
        parsed = _parse_date_string(raw.strip())
    else:
        raise ValidationError(ErrorKind.MALFORMED_FIELD, DATE_KEY, f"unsupported value {raw!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed


def _parse_date_string(text: str) -> datetime:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValidationError(ErrorKind.MALFORMED_FIELD, DATE_KEY, f"unrecognized date {text!r}")


def _parse_title(value: MetadataValue) -> str:
    if isinstance(value, ListValue):
        raise ValidationError(ErrorKind.MALFORMED_FIELD, TITLE_KEY, "expected a single value")
    title = value.as_text().strip()
    if not title:
        raise ValidationError(ErrorKind.MISSING_FIELD, TITLE_KEY)
    return title


def _as_sequence(value: MetadataValue | None) -> list[str]:
    """Normalize a scalar or list value to a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, ListValue):
        items = list(value.items)
    elif value.is_null:
        items = []
    else:
        items = [value.as_text()]
    return [item.strip() for item in items if item.strip()]


def _required(metadata: Metadata, key: str) -> MetadataValue:
    value = metadata.get(key)
    if value is None or (isinstance(value, Scalar) and value.is_null):
        raise ValidationError(ErrorKind.MISSING_FIELD, key)
    return value


def validate_post(
    metadata: Metadata,
    slug: str,
    body: str = "",
    *,
    source_name: str | None = None,
    default_tz: tzinfo = timezone.utc,
) -> Post:
    """Build a Post from decoded front matter.

    Args:
        metadata: Decoded front matter mapping.
        slug: Slug derived from the document name.
        body: Document body following the front matter.
        source_name: Name of the source document, kept for reporting.
        default_tz: Zone applied to dates that carry no offset.

    Returns:
        The validated post.

    Raises:
        ValidationError: If a required key is missing or malformed.
    """
    if not slug:
        raise ValidationError(ErrorKind.MALFORMED_FIELD, "slug", "document name yields an empty slug")

    title = _parse_title(_required(metadata, TITLE_KEY))
    published_at = parse_date(_required(metadata, DATE_KEY), default_tz)

    categories = _as_sequence(metadata.get(CATEGORIES_KEY)) + _as_sequence(metadata.get(CATEGORY_KEY))
    tags = tuple(dict.fromkeys(_as_sequence(metadata.get(TAGS_KEY))))
    extra = {key: value for key, value in metadata.items() if key not in RESERVED_KEYS}

    return Post(
        slug=slug,
        title=title,
        published_at=published_at,
        categories=frozenset(categories),
        tags=tags,
        body=body,
        extra=MappingProxyType(extra),
        source_name=source_name,
    )

"""Tests for front matter splitting, decoding and encoding."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from post_loader.exceptions import ParseError
from post_loader.frontmatter import (
    FrontMatter,
    ListValue,
    Scalar,
    dump_front_matter,
    from_plain,
    parse_front_matter,
    split_front_matter,
    to_plain,
)


class TestSplitFrontMatter:
    def test_document_without_delimiter_is_body_only(self):
        text = "Just prose.\n---\nMore prose."
        block, body, body_line = split_front_matter(text)
        assert block is None
        assert body == text
        assert body_line == 1

    def test_delimiter_must_be_on_first_line(self):
        text = "\n---\ntitle: Hello\n---\nBody"
        block, body, _ = split_front_matter(text)
        assert block is None
        assert body == text

    def test_splits_block_and_body(self):
        block, body, body_line = split_front_matter("---\ntitle: Hello\n---\nBody text")
        assert block == "title: Hello\n"
        assert body == "Body text"
        assert body_line == 4

    def test_trailing_whitespace_after_delimiter(self):
        block, body, _ = split_front_matter("---  \ntitle: Hello\n---\t\nBody")
        assert block == "title: Hello\n"
        assert body == "Body"

    def test_byte_order_mark_is_ignored(self):
        block, body, _ = split_front_matter("\ufeff---\ntitle: Hello\n---\nBody")
        assert block == "title: Hello\n"
        assert body == "Body"

    def test_unterminated_block(self):
        with pytest.raises(ParseError) as excinfo:
            split_front_matter("---\ntitle: Hello\nBody without closing delimiter\n")
        assert excinfo.value.line == 1
        assert "unterminated" in excinfo.value.reason


class TestParseFrontMatter:
    def test_hello_document(self):
        result = parse_front_matter("---\ntitle: Hello\ndate: 2025-01-01\n---\nBody text")
        assert isinstance(result, FrontMatter)
        assert result.metadata == {
            "title": Scalar("Hello"),
            "date": Scalar(date(2025, 1, 1)),
        }
        assert result.body == "Body text"

    def test_keys_keep_source_order(self):
        result = parse_front_matter("---\nzeta: 1\nalpha: 2\nmid: 3\n---\n")
        assert list(result.metadata) == ["zeta", "alpha", "mid"]

    def test_body_only_document_has_empty_metadata(self):
        result = parse_front_matter("# Heading\n\nText")
        assert result.metadata == {}
        assert result.has_metadata is False
        assert result.body == "# Heading\n\nText"

    def test_empty_block(self):
        result = parse_front_matter("---\n---\nBody")
        assert result.metadata == {}
        assert result.body == "Body"

    def test_comment_only_block(self):
        result = parse_front_matter("---\n# nothing here\n---\nBody")
        assert result.metadata == {}

    def test_windows_line_endings(self):
        result = parse_front_matter("---\r\ntitle: Hi\r\n---\r\nBody")
        assert result.metadata == {"title": Scalar("Hi")}
        assert result.body == "Body"

    def test_scalar_types(self):
        text = "---\ncount: 3\nratio: 0.5\ndraft: false\nempty:\nwhen: 2025-01-01 10:00:00 +02:00\n---\n"
        metadata = parse_front_matter(text).metadata
        assert metadata["count"] == Scalar(3)
        assert metadata["ratio"] == Scalar(0.5)
        assert metadata["draft"] == Scalar(False)
        assert metadata["empty"] == Scalar(None)
        assert metadata["when"] == Scalar(datetime(2025, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2))))

    def test_list_items_become_strings(self):
        metadata = parse_front_matter("---\ntags: [2024, python, true]\n---\n").metadata
        assert metadata["tags"] == ListValue(("2024", "python", "true"))

    def test_block_list(self):
        metadata = parse_front_matter("---\ntags:\n  - csharp\n  - results\n---\n").metadata
        assert list(metadata["tags"]) == ["csharp", "results"]

    def test_malformed_yaml_reports_document_line(self):
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter("---\ntitle: Hello\nsummary: a: b\n---\nBody")
        assert excinfo.value.line == 3

    def test_nested_mapping_rejected(self):
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter("---\ntitle: Hello\nauthor:\n  name: Ann\n---\n")
        assert excinfo.value.line == 4
        assert "nested mapping" in excinfo.value.reason

    def test_nested_list_rejected(self):
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter("---\ntags:\n  - [a, b]\n---\n")
        assert excinfo.value.line == 3

    def test_duplicate_key_rejected(self):
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter("---\ntitle: A\ntitle: B\n---\n")
        assert excinfo.value.line == 3
        assert "duplicate" in excinfo.value.reason

    def test_non_mapping_block_rejected(self):
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter("---\n- a\n- b\n---\n")
        assert excinfo.value.line == 2

    def test_non_string_key_rejected(self):
        with pytest.raises(ParseError):
            parse_front_matter("---\n1: one\n---\n")

    def test_multiple_documents_in_block_rejected(self):
        with pytest.raises(ParseError):
            parse_front_matter("---\ntitle: A\n--- other\n---\n")

    @pytest.mark.parametrize("raw", ["2025-02-30", "2025-13-01", "2025-02-30 10:00:00"])
    def test_impossible_calendar_date_stays_a_string(self, raw):
        metadata = parse_front_matter(f"---\ntitle: A\ndate: {raw}\n---\n").metadata
        assert metadata["date"] == Scalar(raw)

    def test_impossible_calendar_date_inside_list(self):
        metadata = parse_front_matter("---\ntags: [python, 2025-02-30]\n---\n").metadata
        assert metadata["tags"] == ListValue(("python", "2025-02-30"))

    def test_deeply_nested_value_rejected(self):
        text = "---\ntitle: " + "[" * 5000 + "]" * 5000 + "\n---\nBody"
        with pytest.raises(ParseError) as excinfo:
            parse_front_matter(text)
        assert excinfo.value.line == 2
        assert "nested too deeply" in excinfo.value.reason

    def test_metadata_is_read_only(self):
        result = parse_front_matter("---\ntitle: Hello\n---\n")
        with pytest.raises(TypeError):
            result.metadata["title"] = Scalar("Changed")
        with pytest.raises(TypeError):
            parse_front_matter("Body only").metadata["title"] = Scalar("x")


class TestRoundTrip:
    def test_supported_values_survive_encoding(self):
        metadata = {
            "title": Scalar("Hello: world"),
            "date": Scalar(date(2025, 1, 1)),
            "updated": Scalar(datetime(2025, 1, 2, 10, 30, tzinfo=timezone(timedelta(hours=2)))),
            "count": Scalar(3),
            "ratio": Scalar(1.5),
            "draft": Scalar(False),
            "summary": Scalar(None),
            "looks_like_date": Scalar("2025-01-01"),
            "tags": ListValue(("minimal api", "routing")),
            "categories": ListValue(()),
        }
        text = dump_front_matter(metadata, "Body\n")
        result = parse_front_matter(text)
        assert result.metadata == metadata
        assert result.body == "Body\n"

    def test_nan_decodes_as_nan(self):
        result = parse_front_matter(dump_front_matter({"ratio": Scalar(float("nan"))}))
        value = result.metadata["ratio"].value
        assert isinstance(value, float)
        assert math.isnan(value)

    def test_empty_mapping(self):
        result = parse_front_matter(dump_front_matter({}, "Body"))
        assert result.metadata == {}
        assert result.body == "Body"


class TestPlainConversion:
    def test_to_plain(self):
        plain = to_plain({"title": Scalar("A"), "tags": ListValue(("x",))})
        assert plain == {"title": "A", "tags": ["x"]}

    def test_from_plain_rejects_nested(self):
        with pytest.raises(TypeError):
            from_plain({"author": {"name": "Ann"}})
        with pytest.raises(TypeError):
            from_plain({"tags": [["a"]]})

    def test_scalar_as_text(self):
        assert Scalar(None).as_text() == ""
        assert Scalar(True).as_text() == "true"
        assert Scalar(date(2025, 1, 1)).as_text() == "2025-01-01"
        assert Scalar(42).as_text() == "42"

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the public conversion API."""

import json

import pytest

import mdxtree
from mdxtree import (
    Document,
    InvalidOptionsError,
    MdxParserOptions,
    MdxRendererOptions,
    check_round_trip,
    json_to_mdx,
    mdx_to_json,
    parse,
    serialize,
)
from mdxtree.api import RoundTripReport
from mdxtree.ast import BulletList, Heading, ListItem, Paragraph, Text
from mdxtree.exceptions import DocumentStructureError


@pytest.mark.unit
class TestParseAndSerialize:
    """Test parse and serialize with options handling."""

    def test_parse_returns_document(self):
        """Test the basic parse call."""
        doc = parse("# Title")
        assert isinstance(doc, Document)
        assert doc.children == [Heading(level=1, content=[Text("Title")])]

    def test_serialize(self):
        """Test the basic serialize call."""
        doc = Document(children=[BulletList(items=[ListItem(children=[Paragraph(content=[Text("a")])])])])
        assert serialize(doc) == "- a"

    def test_parse_keyword_overrides(self):
        """Test keyword overrides on top of an options object."""
        base = MdxParserOptions(image_width_min=100)
        doc = parse(
            '<ImageFigure src="https://example.com/a.png" width={5000} />',
            parser_options=base,
            image_width_max=300,
        )
        assert doc.children[0].width == 300

    def test_serialize_keyword_overrides(self):
        """Test renderer keyword overrides."""
        doc = parse("- a\n  - b")
        assert serialize(doc, list_indent_width=3) == "- a\n   - b"
        assert serialize(doc, renderer_options=MdxRendererOptions(list_indent_width=4)) == "- a\n    - b"

    def test_unknown_keyword(self):
        """Test that unknown option keywords are rejected."""
        with pytest.raises(InvalidOptionsError, match="list_indent"):
            parse("x", list_indent_width=4)

    def test_wrong_options_object(self):
        """Test that options of the other kind are rejected."""
        with pytest.raises(InvalidOptionsError):
            parse("x", parser_options=MdxRendererOptions())
        with pytest.raises(InvalidOptionsError):
            serialize(Document(), renderer_options=MdxParserOptions())

    def test_invalid_override_value(self):
        """Test that option validation still applies to keyword overrides."""
        with pytest.raises(ValueError):
            serialize(Document(), list_indent_width=0)

    def test_image_schemes_cannot_widen(self):
        """Test that image schemes outside http and https are refused."""
        with pytest.raises(ValueError):
            parse('<ImageFigure src="ftp://example.com/a.png" />', allowed_image_schemes=("ftp",))


@pytest.mark.unit
class TestJsonConversions:
    """Test the JSON convenience functions."""

    def test_mdx_to_json(self):
        """Test the editor JSON produced from markup."""
        data = json.loads(mdx_to_json("Hello *world*"))
        assert data == {
            "type": "doc",
            "content": [
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "Hello "},
                        {"type": "text", "text": "world", "marks": [{"type": "italic"}]},
                    ],
                }
            ],
        }

    def test_indent(self):
        """Test pretty-printed JSON."""
        assert mdx_to_json("x", indent=2).startswith('{\n  "type": "doc"')

    def test_json_to_mdx(self, sample_mdx):
        """Test that JSON renders to the same markup as the tree."""
        assert json_to_mdx(mdx_to_json(sample_mdx)) == serialize(parse(sample_mdx))

    def test_json_to_mdx_invalid(self):
        """Test malformed JSON input."""
        with pytest.raises(DocumentStructureError):
            json_to_mdx("{")


@pytest.mark.unit
class TestCheckRoundTrip:
    """Test the round-trip stability check."""

    def test_stable(self, sample_mdx):
        """Test a stable document."""
        report = check_round_trip(sample_mdx)
        assert isinstance(report, RoundTripReport)
        assert report.stable
        assert report.first_difference is None
        assert report.first_tree == report.second_tree
        assert report.serialized == serialize(report.first_tree)

    def test_unstable(self):
        """Test soft-wrapped text that re-parses as a heading."""
        report = check_round_trip("#\nTitle")
        assert not report.stable
        assert report.first_difference == 0
        assert report.serialized == "# Title"
        assert isinstance(report.second_tree.children[0], Heading)

    def test_empty(self):
        """Test an empty document."""
        report = check_round_trip("")
        assert report.stable
        assert report.serialized == ""


@pytest.mark.unit
class TestPackageExports:
    """Test the top-level package."""

    def test_version(self):
        """Test the version string."""
        assert mdxtree.__version__ == "1.0.0"

    def test_all_exports_resolve(self):
        """Test that every name in __all__ exists."""
        for name in mdxtree.__all__:
            assert hasattr(mdxtree, name), name

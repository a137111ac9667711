#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_mdx_round_trip.py
"""Integration tests for parse, serialize and the editor JSON boundary.

These tests run whole documents through the public API and check the
documented conversion properties end to end.
"""

import pytest

from mdxtree import check_round_trip, json_to_mdx, mdx_to_json, parse, serialize
from mdxtree.ast import (
    BulletList,
    CodeBlock,
    Heading,
    ImageFigure,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
    VideoEmbed,
)

MIXED_DOCUMENT = """- first
- second
<ImageFigure src="https://example.com/a.png" alt="A" caption="Figure 1" width={800} />
Some paragraph between embeds.
<VideoEmbed src="https://vimeo.com/76979871" title="Talk" aspectRatio={1.5} />
- third
  - nested"""


def assert_stable(text, **renderer_options):
    first = parse(text)
    second = parse(serialize(first, **renderer_options))
    assert second == first
    return first


@pytest.mark.integration
class TestDocumentedProperties:
    """Test the conversion properties end to end."""

    def test_list_before_paragraph(self):
        """Test that a paragraph may follow a list without a blank line."""
        doc = parse("- item\nNext paragraph")
        assert doc.children == [
            BulletList(items=[ListItem(children=[Paragraph(content=[Text("item")])])]),
            Paragraph(content=[Text("Next paragraph")]),
        ]

    def test_nested_list_closed_before_trailing_content(self):
        """Test that trailing text closes every open list."""
        doc = parse("- parent\n  - child\nTail")
        child = BulletList(items=[ListItem(children=[Paragraph(content=[Text("child")])])])
        assert doc.children == [
            BulletList(items=[ListItem(children=[Paragraph(content=[Text("parent")]), child])]),
            Paragraph(content=[Text("Tail")]),
        ]

    def test_heading_level_bound(self):
        """Test that five hashes stay paragraph text."""
        assert parse("##### Too Deep").children == [Paragraph(content=[Text("##### Too Deep")])]

    def test_rejected_media_stays_visible(self):
        """Test that a rejected embed becomes a paragraph."""
        doc = parse('<ImageFigure src="ftp://x/y.png" />')
        assert doc.children == [Paragraph(content=[Text('<ImageFigure src="ftp://x/y.png" />')])]

    def test_video_canonicalization(self):
        """Test that a short link resolves to the embed URL."""
        (video,) = parse('<VideoEmbed src="https://youtu.be/abc123" />').children
        assert isinstance(video, VideoEmbed)
        assert (video.src, video.provider) == ("https://www.youtube.com/embed/abc123", "youtube")

    def test_mixed_interleaving_preserves_order(self):
        """Test lists, embeds and a paragraph in alternation."""
        doc = assert_stable(MIXED_DOCUMENT)
        assert [type(block) for block in doc.children] == [
            BulletList,
            ImageFigure,
            Paragraph,
            VideoEmbed,
            BulletList,
        ]


@pytest.mark.integration
class TestRoundTrips:
    """Test round trips over realistic documents."""

    def test_sample_document(self, sample_mdx):
        """Test the shared sample document."""
        doc = assert_stable(sample_mdx)
        assert [type(block) for block in doc.children] == [
            Heading,
            Paragraph,
            Heading,
            BulletList,
            OrderedList,
            CodeBlock,
            ImageFigure,
            VideoEmbed,
            Heading,
            Paragraph,
        ]

    def test_serialization_is_idempotent(self, sample_mdx):
        """Test that serializing a re-parsed document gives the same text."""
        once = serialize(parse(sample_mdx))
        assert serialize(parse(once)) == once

    def test_canonical_output(self):
        """Test the normalized form of a small document."""
        text = "#  Title  \n\n3. one\n9. two\n   - sub\n\n\n<VideoEmbed src='https://youtu.be/abc' />"
        assert serialize(parse(text)) == (
            "# Title\n\n1. one\n2. two\n  - sub\n\n"
            '<VideoEmbed src={"https://www.youtube.com/embed/abc"} title={""} provider={"youtube"} '
            "aspectRatio={1.7777777777777777} />"
        )

    @pytest.mark.parametrize("width", [1, 3, 4, 8])
    def test_any_indent_width(self, sample_mdx, width):
        """Test that every list indent width re-parses to the same tree."""
        assert_stable(sample_mdx, list_indent_width=width)

    def test_empty_items_and_code(self):
        """Test marker-only items and empty code blocks."""
        assert_stable("-\n  - child\n-\n\n1.\n\n```\n```\n\n```sh\n  indented\n\n```")

    def test_attribute_escaping(self):
        """Test quotes, braces, backslashes and newlines in attributes."""
        text = (
            '<ImageFigure src="https://example.com/a.png" '
            'alt={"she said \\"hi\\" {ok}"} caption=\'back\\\\slash\' />'
        )
        doc = assert_stable(text)
        assert doc.children[0].alt == 'she said "hi" {ok}'
        assert doc.children[0].caption == "back\\slash"

    def test_check_round_trip_report(self, sample_mdx):
        """Test the report on a stable document."""
        report = check_round_trip(sample_mdx)
        assert report.stable
        assert len(report.first_tree.children) == 10


@pytest.mark.integration
class TestEditorBoundary:
    """Test the MDX to JSON to MDX path."""

    def test_json_round_trip(self, sample_mdx):
        """Test that markup survives a trip through editor JSON."""
        assert parse(json_to_mdx(mdx_to_json(sample_mdx))) == parse(sample_mdx)

    def test_editor_document_rendered(self):
        """Test rendering a document built by the editor."""
        editor_json = (
            '{"type": "doc", "content": ['
            '{"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Notes"}]},'
            '{"type": "bulletList", "content": [{"type": "listItem", "content": ['
            '{"type": "paragraph", "content": [{"type": "text", "text": "bold", "marks": [{"type": "bold"}]}]}'
            "]}]},"
            '{"type": "imageFigure", "attrs": {"src": "https://example.com/a.png", "alt": "", "caption": "", '
            '"width": null}},'
            '{"type": "callout", "content": []}'
            "]}"
        )
        assert json_to_mdx(editor_json) == (
            '## Notes\n\n- **bold**\n\n<ImageFigure src={"https://example.com/a.png"} alt={""} caption={""} />'
        )

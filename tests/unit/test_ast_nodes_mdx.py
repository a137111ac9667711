#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes_mdx.py
"""Unit tests for AST node classes and traversal."""

import pytest

from mdxtree.ast import (
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    ImageFigure,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
    VideoEmbed,
    iter_nodes,
)


@pytest.mark.unit
class TestNodeValidation:
    """Test construction-time checks."""

    @pytest.mark.parametrize("level", [0, 5, -1, True])
    def test_heading_level_range(self, level):
        """Test that heading levels outside 1-4 are rejected."""
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level)

    def test_text_marks_coerced_to_frozenset(self):
        """Test that marks given as a set or list become a frozenset."""
        text = Text("x", marks={"bold"})
        assert text.marks == frozenset({"bold"})
        assert isinstance(text.marks, frozenset)
        assert Text("x", marks=["code", "code"]).marks == frozenset({"code"})

    def test_unknown_mark_rejected(self):
        """Test that only the three marks are accepted."""
        with pytest.raises(ValueError, match="Unknown marks"):
            Text("x", marks=frozenset({"underline"}))

    def test_ordered_marks(self):
        """Test the fixed mark order."""
        assert Text("x", marks=frozenset({"code", "bold", "italic"})).ordered_marks() == ["bold", "italic", "code"]

    def test_list_orderedness(self):
        """Test the orderedness flag on list classes."""
        assert BulletList.ordered is False
        assert OrderedList.ordered is True


@pytest.mark.unit
class TestNodeEquality:
    """Test structural equality."""

    def test_equal_trees(self):
        """Test that separately built trees compare equal."""

        def build():
            return Document(
                children=[
                    Heading(level=1, content=[Text("T")]),
                    BulletList(items=[ListItem(children=[Paragraph(content=[Text("a", marks={"bold"})])])]),
                ]
            )

        assert build() == build()

    def test_mark_order_irrelevant_for_equality(self):
        """Test that marks compare as sets."""
        assert Text("x", marks=["bold", "italic"]) == Text("x", marks=["italic", "bold"])

    def test_list_kinds_differ(self):
        """Test that bullet and ordered lists with the same items differ."""
        items = [ListItem(children=[Paragraph(content=[Text("a")])])]
        assert BulletList(items=items) != OrderedList(items=items)

    def test_defaults(self):
        """Test default field values."""
        assert CodeBlock(content="x").language is None
        image = ImageFigure(src="https://example.com/a.png")
        assert (image.alt, image.caption, image.width) == ("", "", None)
        assert VideoEmbed(src="https://youtu.be/x", provider="youtube").aspect_ratio == pytest.approx(16 / 9)


@pytest.mark.unit
class TestIterNodes:
    """Test depth-first traversal."""

    def test_document_order(self):
        """Test that parents come before children in document order."""
        bold = Text("b", marks={"bold"})
        nested_item = ListItem(children=[Paragraph(content=[Text("inner")])])
        doc = Document(
            children=[
                Heading(level=2, content=[Text("h"), HardBreak()]),
                BulletList(
                    items=[ListItem(children=[Paragraph(content=[bold]), OrderedList(items=[nested_item])])]
                ),
                CodeBlock(content="code"),
            ]
        )

        kinds = [type(node).__name__ for node in iter_nodes(doc)]
        assert kinds == [
            "Document",
            "Heading",
            "Text",
            "HardBreak",
            "BulletList",
            "ListItem",
            "Paragraph",
            "Text",
            "OrderedList",
            "ListItem",
            "Paragraph",
            "Text",
            "CodeBlock",
        ]

    def test_leaf(self):
        """Test that a leaf yields only itself."""
        leaf = ImageFigure(src="https://example.com/a.png")
        assert list(iter_nodes(leaf)) == [leaf]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline_tokenizer.py
"""Unit tests for the inline mark tokenizer.

Tests cover:
- Plain text and the three single-mark spans
- Unterminated and empty delimiters degrading to literal text
- Spans never nesting or combining marks

"""

import pytest

from mdxtree.ast import Text
from mdxtree.parsers.inline import tokenize


def bold(content):
    return Text(content, marks=frozenset({"bold"}))


def italic(content):
    return Text(content, marks=frozenset({"italic"}))


def code(content):
    return Text(content, marks=frozenset({"code"}))


@pytest.mark.unit
class TestTokenizeBasics:
    """Test tokenizing plain and marked text."""

    def test_plain_text(self):
        """Test that text without delimiters is one unmarked run."""
        assert tokenize("just words") == [Text("just words")]

    def test_empty_line(self):
        """Test that an empty line yields no nodes."""
        assert tokenize("") == []

    def test_bold_span(self):
        """Test a bold span between plain runs."""
        assert tokenize("a **b** c") == [Text("a "), bold("b"), Text(" c")]

    def test_italic_span(self):
        """Test an italic span."""
        assert tokenize("*lean*") == [italic("lean")]

    def test_code_span(self):
        """Test a code span."""
        assert tokenize("run `make`") == [Text("run "), code("make")]

    def test_all_marks_in_one_line(self):
        """Test several spans keep their left-to-right order."""
        assert tokenize("**a** and *b* and `c`") == [
            bold("a"),
            Text(" and "),
            italic("b"),
            Text(" and "),
            code("c"),
        ]

    def test_adjacent_spans(self):
        """Test spans directly next to each other."""
        assert tokenize("**a***b*") == [bold("a"), italic("b")]


@pytest.mark.unit
class TestTokenizeDegradation:
    """Test that malformed markup is kept as literal text."""

    def test_unterminated_bold(self):
        """Test an opening bold delimiter without a closer."""
        assert tokenize("**unterminated") == [Text("**unterminated")]

    def test_lone_asterisk(self):
        """Test a single asterisk in arithmetic."""
        assert tokenize("2 * 3") == [Text("2 * 3")]

    def test_empty_delimiters(self):
        """Test that empty spans are not recognized."""
        assert tokenize("****") == [Text("****")]
        assert tokenize("``") == [Text("``")]

    def test_unterminated_code(self):
        """Test a backtick without a closer."""
        assert tokenize("a `b") == [Text("a `b")]

    def test_paired_asterisks_are_lexical(self):
        """Test that any asterisk pair on a line forms an italic span."""
        assert tokenize("2 * 3 * 4") == [Text("2 "), italic(" 3 "), Text(" 4")]


@pytest.mark.unit
class TestTokenizeNoNesting:
    """Test that a span carries exactly one mark."""

    def test_bold_inside_code_is_literal(self):
        """Test that code spans swallow other delimiters."""
        assert tokenize("`**not bold**`") == [code("**not bold**")]

    def test_code_inside_bold_is_literal(self):
        """Test that bold spans keep backticks as text."""
        assert tokenize("**use `x`**") == [bold("use `x`")]

    def test_every_run_has_at_most_one_mark(self):
        """Test a line with mixed delimiters."""
        nodes = tokenize("***x*** and **`y`**")
        assert all(len(node.marks) <= 1 for node in nodes)
        assert "".join(node.content for node in nodes if not node.marks) != ""

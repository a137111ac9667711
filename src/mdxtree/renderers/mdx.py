#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/renderers/mdx.py
"""MDX rendering from AST.

This module provides the MdxRenderer class, which converts an AST document
back into MDX markup that :class:`~mdxtree.parsers.mdx.MdxParser` reads into
an equal tree.

Top-level blocks are joined with one blank line. Lists are rendered one
marker line per item with nested lists pre-indented by the recursive call.
Media components are rendered as self-closing tags whose string attributes
are JSON literals, so any character survives the trip through the attribute
grammar.

"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Union

from mdxtree.ast import (
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    ImageFigure,
    ListItem,
    Node,
    NodeVisitor,
    OrderedList,
    Paragraph,
    Text,
    VideoEmbed,
)
from mdxtree.ast.nodes import BLOCK_NODE_TYPES
from mdxtree.constants import (
    CODE_FENCE,
    HARD_BREAK_MARKUP,
    IMAGE_FIGURE_COMPONENT,
    MARK_DELIMITERS,
    VIDEO_EMBED_COMPONENT,
)
from mdxtree.options.mdx import MdxRendererOptions
from mdxtree.renderers.base import BaseRenderer, InlineContentMixin

logger = logging.getLogger(__name__)


def _jsx_string(value: Any) -> str:
    """Render a string attribute value as a JSON literal in braces.

    Examples
    --------
    >>> _jsx_string('say "hi"')
    '{"say \\\\"hi\\\\""}'
    >>> _jsx_string(None)
    '{""}'

    """
    return "{" + json.dumps(value if isinstance(value, str) else "", ensure_ascii=False) + "}"


def _jsx_number(value: Union[int, float]) -> str:
    return "{" + json.dumps(value) + "}"


def _wrap_marks(text: str, node: Text) -> str:
    for mark in node.ordered_marks():
        delimiter = MARK_DELIMITERS[mark]
        text = f"{delimiter}{text}{delimiter}"
    return text


class MdxRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to MDX markup.

    Parameters
    ----------
    options : MdxRendererOptions or None, default = None
        Indentation and video defaults

    Examples
    --------
        >>> from mdxtree.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=2, content=[Text("Title")])])
        >>> MdxRenderer().render_to_string(doc)
        '## Title'

    """

    def __init__(self, options: MdxRendererOptions | None = None):
        """Initialize the MDX renderer with options."""
        BaseRenderer._validate_options_type(options, MdxRendererOptions, "mdx")
        options = options or MdxRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MdxRendererOptions = options
        self._output: list[str] = []
        self._list_depth = 0

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an MDX string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            MDX text with blocks separated by blank lines and no leading or
            trailing whitespace

        """
        self._output = []
        self._list_depth = 0
        doc.accept(self)
        result = "".join(self._output)
        logger.debug("Rendered %d top-level blocks to %d characters", len(doc.children), len(result))
        return result

    def _render_block(self, node: Node) -> str:
        """Render one block node to a string, or "" for unknown node kinds."""
        if not isinstance(node, BLOCK_NODE_TYPES):
            logger.debug("Skipping unsupported block node: %s", type(node).__name__)
            return ""

        saved_output = self._output
        self._output = []
        node.accept(self)
        result = "".join(self._output)
        self._output = saved_output
        return result

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        rendered = [self._render_block(child) for child in node.children]
        self._output.append("\n\n".join(block for block in rendered if block).strip())

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        self._output.append(f"{'#' * node.level} {self._render_inline_content(node.content)}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced block with a verbatim body."""
        language = node.language or ""
        self._output.append(f"{CODE_FENCE}{language}\n{node.content}\n{CODE_FENCE}")

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render a BulletList node."""
        self._output.append(self._render_list(node.items, lambda index: "- "))

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node, numbering items from 1."""
        self._output.append(self._render_list(node.items, lambda index: f"{index + 1}. "))

    def _render_list(self, items: list[ListItem], marker_for: Any) -> str:
        lines = [self._render_list_item(item, marker_for(index)) for index, item in enumerate(items)]
        return "\n".join(line for line in lines if line)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem outside of a list, using a bullet marker."""
        self._output.append(self._render_list_item(node, "- "))

    def _render_list_item(self, item: ListItem, marker: str) -> str:
        """Render one list item.

        The first emitted content shares the marker line and its later lines
        get the continuation indent. Nested lists come back already indented
        from the recursive call and are appended as-is, after a marker-only
        line when the item has no leading content. An item with no content
        renders as a bare marker.
        """
        indent = " " * (self.options.list_indent_width * self._list_depth)
        continuation = indent + " " * self.options.list_indent_width
        lines: list[str] = []
        has_marker_line = False

        def ensure_marker_line() -> None:
            nonlocal has_marker_line
            if not has_marker_line:
                lines.append(f"{indent}{marker}".rstrip())
                has_marker_line = True

        def append_content(content_lines: list[str]) -> None:
            nonlocal has_marker_line
            if not has_marker_line:
                first, *rest = content_lines
                lines.append(f"{indent}{marker}{first}")
                lines.extend(f"{continuation}{line}" for line in rest)
                has_marker_line = True
                return
            lines.extend(f"{continuation}{line}" for line in content_lines)

        for child in item.children:
            if isinstance(child, (BulletList, OrderedList)):
                self._list_depth += 1
                try:
                    nested = self._render_block(child)
                finally:
                    self._list_depth -= 1
                if nested:
                    ensure_marker_line()
                    lines.extend(nested.split("\n"))
                continue

            rendered = self._render_block(child)
            if not rendered.strip():
                continue
            append_content(rendered.split("\n"))

        ensure_marker_line()
        return "\n".join(lines)

    def visit_image_figure(self, node: ImageFigure) -> None:
        """Render an ImageFigure node as a self-closing component tag."""
        parts = [
            f"<{IMAGE_FIGURE_COMPONENT}",
            f"src={_jsx_string(node.src)}",
            f"alt={_jsx_string(node.alt)}",
            f"caption={_jsx_string(node.caption)}",
        ]
        if isinstance(node.width, (int, float)) and not isinstance(node.width, bool) and math.isfinite(node.width):
            parts.append(f"width={_jsx_number(node.width)}")
        parts.append("/>")
        self._output.append(" ".join(parts))

    def visit_video_embed(self, node: VideoEmbed) -> None:
        """Render a VideoEmbed node as a self-closing component tag."""
        aspect_ratio = node.aspect_ratio
        if (
            isinstance(aspect_ratio, bool)
            or not isinstance(aspect_ratio, (int, float))
            or not math.isfinite(aspect_ratio)
            or aspect_ratio <= 0
        ):
            aspect_ratio = self.options.default_aspect_ratio

        parts = [
            f"<{VIDEO_EMBED_COMPONENT}",
            f"src={_jsx_string(node.src)}",
            f"title={_jsx_string(node.title)}",
            f"provider={_jsx_string(node.provider)}",
            f"aspectRatio={_jsx_number(aspect_ratio)}",
            "/>",
        ]
        self._output.append(" ".join(parts))

    # ------------------------------------------------------------------
    # Inline
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node, wrapping marks innermost-first."""
        self._output.append(_wrap_marks(node.content, node))

    def visit_hard_break(self, node: HardBreak) -> None:
        """Render a HardBreak node."""
        self._output.append(HARD_BREAK_MARKUP)

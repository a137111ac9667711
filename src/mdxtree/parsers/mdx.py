#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/parsers/mdx.py
"""MDX to AST parser.

This module converts MDX markup (a small Markdown dialect plus the
``<ImageFigure />`` and ``<VideoEmbed />`` components) into the mdxtree AST.

Parsing is a single pass over physical lines. Each line is classified, in
priority order, as a code fence, code body, blank line, media tag, heading,
list marker, or paragraph text. Open lists are tracked on an explicit stack of
frames keyed by indentation and orderedness, so nesting follows the line order
rather than recursion.

Parsing never raises on content: anything unrecognized, including media tags
that fail validation, becomes paragraph text.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from mdxtree.ast import (
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ImageFigure,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    VideoEmbed,
)
from mdxtree.constants import (
    BULLET_MARKER_PATTERN,
    CODE_FENCE,
    HEADING_PATTERN,
    IMAGE_FIGURE_COMPONENT,
    ORDERED_MARKER_PATTERN,
    VIDEO_EMBED_COMPONENT,
)
from mdxtree.options.mdx import MdxParserOptions
from mdxtree.parsers.attributes import parse_tag
from mdxtree.parsers.base import BaseParser
from mdxtree.parsers.inline import tokenize
from mdxtree.utils.media import normalize_image, normalize_video

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(HEADING_PATTERN)
_BULLET_RE = re.compile(BULLET_MARKER_PATTERN)
_ORDERED_RE = re.compile(ORDERED_MARKER_PATTERN)


@dataclass
class _ListItemBuffer:
    """Pending list item: its marker-line text plus completed child blocks."""

    lines: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)


@dataclass
class _ListFrame:
    """One open list at a given indentation."""

    ordered: bool
    indent: int
    items: list[_ListItemBuffer] = field(default_factory=list)


def _paragraph_from_text(text: str) -> Paragraph:
    return Paragraph(content=tokenize(text))


class _BlockBuilder:
    """Line-by-line state machine for a single parse call.

    All buffers live on the instance, so concurrent parses never share state.
    """

    def __init__(self, options: MdxParserOptions):
        self.options = options
        self.blocks: list[Node] = []
        self.paragraph_lines: list[str] = []
        self.list_stack: list[_ListFrame] = []
        self.in_code_block = False
        self.code_language = ""
        self.code_lines: list[str] = []

    # ------------------------------------------------------------------
    # Flushing
    # ------------------------------------------------------------------

    def flush_paragraph(self) -> None:
        if not self.paragraph_lines:
            return
        text = " ".join(self.paragraph_lines).strip()
        if text:
            self.blocks.append(_paragraph_from_text(text))
        self.paragraph_lines = []

    def _build_list(self, frame: _ListFrame) -> Union[BulletList, OrderedList]:
        items = []
        for buffer in frame.items:
            children: list[Node] = []
            text = " ".join(buffer.lines).strip()
            if text:
                children.append(_paragraph_from_text(text))
            children.extend(buffer.children)
            items.append(ListItem(children=children or [Paragraph(content=[])]))
        return OrderedList(items=items) if frame.ordered else BulletList(items=items)

    def _attach_list(self, node: Union[BulletList, OrderedList]) -> None:
        if not self.list_stack:
            self.blocks.append(node)
            return
        parent = self.list_stack[-1]
        if not parent.items:
            parent.items.append(_ListItemBuffer())
        parent.items[-1].children.append(node)

    def flush_lists(self) -> None:
        while self.list_stack:
            self._attach_list(self._build_list(self.list_stack.pop()))

    def flush_code(self) -> None:
        self.blocks.append(CodeBlock(content="\n".join(self.code_lines), language=self.code_language or None))
        self.in_code_block = False
        self.code_language = ""
        self.code_lines = []

    def push_block(self, node: Node) -> None:
        self.flush_paragraph()
        self.flush_lists()
        self.blocks.append(node)

    # ------------------------------------------------------------------
    # Line handlers
    # ------------------------------------------------------------------

    def _resolve_list_frame(self, indent: int, ordered: bool) -> _ListFrame:
        """Find or open the list frame that a marker line belongs to."""
        while self.list_stack:
            top = self.list_stack[-1]
            if top.indent > indent or (top.indent == indent and top.ordered != ordered):
                self._attach_list(self._build_list(self.list_stack.pop()))
                continue
            break

        if not self.list_stack or self.list_stack[-1].indent < indent:
            if self.list_stack and not self.list_stack[-1].items:
                self.list_stack[-1].items.append(_ListItemBuffer())
            self.list_stack.append(_ListFrame(ordered=ordered, indent=indent))

        return self.list_stack[-1]

    def _accepts_marker(self, text: Optional[str]) -> bool:
        # A bare "-" or "N." continues an open paragraph as text
        return text is not None or not self.paragraph_lines

    def handle_list_line(self, ordered: bool, text: str, indent: int) -> None:
        self.flush_paragraph()
        frame = self._resolve_list_frame(indent, ordered)
        frame.items.append(_ListItemBuffer(lines=[text]))

    def _parse_media(self, line: str) -> Optional[Union[ImageFigure, VideoEmbed]]:
        attrs = parse_tag(line, IMAGE_FIGURE_COMPONENT)
        if attrs is not None:
            image = normalize_image(attrs, self.options)
            if image is not None:
                return image

        attrs = parse_tag(line, VIDEO_EMBED_COMPONENT)
        if attrs is not None:
            return normalize_video(attrs, self.options)

        return None

    def feed(self, raw_line: str) -> None:
        stripped_left = raw_line.lstrip()
        indent = len(raw_line) - len(stripped_left)
        line = stripped_left.rstrip()

        if line.startswith(CODE_FENCE):
            self.flush_paragraph()
            self.flush_lists()
            if self.in_code_block:
                self.flush_code()
            else:
                self.in_code_block = True
                self.code_language = line[len(CODE_FENCE) :].strip()
            return

        if self.in_code_block:
            self.code_lines.append(raw_line)
            return

        if not line:
            self.flush_paragraph()
            self.flush_lists()
            return

        media = self._parse_media(line)
        if media is not None:
            self.push_block(media)
            return

        heading_match = _HEADING_RE.match(line)
        if heading_match:
            hashes, text = heading_match.groups()
            self.push_block(Heading(level=len(hashes), content=tokenize(text)))
            return

        bullet_match = _BULLET_RE.match(line)
        if bullet_match and self._accepts_marker(bullet_match.group(1)):
            self.handle_list_line(False, bullet_match.group(1) or "", indent)
            return

        ordered_match = _ORDERED_RE.match(line)
        if ordered_match and self._accepts_marker(ordered_match.group(2)):
            self.handle_list_line(True, ordered_match.group(2) or "", indent)
            return

        if self.list_stack:
            self.flush_lists()
        self.paragraph_lines.append(line)

    def finish(self) -> list[Node]:
        self.flush_paragraph()
        self.flush_lists()
        if self.in_code_block:
            self.flush_code()
        return self.blocks


class MdxParser(BaseParser):
    """Convert MDX markup to AST representation.

    Parameters
    ----------
    options : MdxParserOptions or None, default = None
        Media normalization settings

    Examples
    --------
    Basic parsing:

        >>> parser = MdxParser()
        >>> doc = parser.parse("# Title\\n\\n- one\\n- two")
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'BulletList']

    Nested lists close before trailing content:

        >>> doc = parser.parse("- parent\\n  - child\\nTail")
        >>> [type(block).__name__ for block in doc.children]
        ['BulletList', 'Paragraph']

    """

    def __init__(self, options: MdxParserOptions | None = None):
        """Initialize the MDX parser with options."""
        BaseParser._validate_options_type(options, MdxParserOptions, "mdx")
        options = options or MdxParserOptions()
        super().__init__(options)
        self.options: MdxParserOptions = options

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse MDX markup into an AST Document.

        Parameters
        ----------
        input_data : str or bytes
            MDX markup. CRLF line endings are normalized to LF.

        Returns
        -------
        Document
            AST document node. Never raises on content; unrecognized lines
            become paragraph text.

        """
        text = self._load_text_content(input_data)
        if not text:
            return Document(children=[])

        lines = text.replace("\r\n", "\n").split("\n")
        builder = _BlockBuilder(self.options)
        for raw_line in lines:
            builder.feed(raw_line)
        blocks = builder.finish()

        logger.debug("Parsed %d lines into %d top-level blocks", len(lines), len(blocks))
        return Document(children=blocks)

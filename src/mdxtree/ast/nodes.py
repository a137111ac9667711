#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/ast/nodes.py
"""AST node classes for the editor document tree.

This module defines the closed set of nodes produced by the MDX parser and
consumed by the MDX renderer. The tree mirrors the block/inline model of the
rich-text editor that hosts the converter.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document (root)
    - Paragraph, Heading, CodeBlock
    - BulletList, OrderedList, ListItem
    - ImageFigure, VideoEmbed

Inline nodes:
    - Text (carrying a set of marks)
    - HardBreak

Trees are built fresh on every parse and are never mutated by the library;
structural equality is plain dataclass equality.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from mdxtree.constants import (
    DEFAULT_ASPECT_RATIO,
    MARK_ORDER,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    Mark,
    VideoProvider,
)


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing the ordered block sequence.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in document order
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (levels 1-4).

    Parameters
    ----------
    level : int
        Heading level, 1 through 4
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 4."""
        if isinstance(self.level, bool) or not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be {MIN_HEADING_LEVEL}-{MAX_HEADING_LEVEL}, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content. An empty list is the
        placeholder paragraph used for empty list items.
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block with optional language.

    The content is raw text: it is never tokenized for inline marks and is
    emitted verbatim by the renderer.

    Parameters
    ----------
    content : str
        Code body, lines joined with ``\\n``
    language : str or None, default = None
        Language tag following the opening fence
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class ListItem(Node):
    """List item holding an ordered sequence of child blocks.

    A list item may contain several paragraphs and nested lists. Items built
    by the parser always hold at least one child.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level children of the item
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class BulletList(Node):
    """Unordered list rendered with ``-`` markers.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        Items in the list
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: ClassVar[bool] = False

    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bullet list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered list rendered with ``N.`` markers.

    Item numbers in the source are not preserved; items are renumbered from 1
    when rendering.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        Items in the list
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: ClassVar[bool] = True

    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this ordered list."""
        return visitor.visit_ordered_list(self)


@dataclass
class ImageFigure(Node):
    """Image embed with caption.

    Instances created by the parser always carry an ``http``/``https`` source
    and, when present, a width clamped to the configured range.

    Parameters
    ----------
    src : str
        Image URL
    alt : str, default = ""
        Alternative text
    caption : str, default = ""
        Figure caption
    width : int or None, default = None
        Display width in pixels; omitted from markup when None
    metadata : dict, default = empty dict
        Image metadata

    """

    src: str
    alt: str = ""
    caption: str = ""
    width: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image figure."""
        return visitor.visit_image_figure(self)


@dataclass
class VideoEmbed(Node):
    """Video embed from an allowlisted provider.

    ``src`` is always a canonical embed URL (never a watch page) and
    ``provider`` is derived from it, never taken from user input.

    Parameters
    ----------
    src : str
        Canonical embeddable URL
    provider : {"youtube", "vimeo"}
        Provider derived from the URL
    title : str, default = ""
        Accessible title for the embedded frame
    aspect_ratio : float, default = 16/9
        Width divided by height
    metadata : dict, default = empty dict
        Video metadata

    """

    src: str
    provider: VideoProvider
    title: str = ""
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this video embed."""
        return visitor.visit_video_embed(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run carrying zero or more marks.

    Parameters
    ----------
    content : str
        The literal text
    marks : frozenset of str, default = empty
        Marks applied to the run (``bold``, ``italic``, ``code``)
    metadata : dict, default = empty dict
        Text metadata

    Examples
    --------
    >>> Text("hello", marks=frozenset({"bold"})).ordered_marks()
    ['bold']

    """

    content: str
    marks: frozenset[Mark] = field(default_factory=frozenset)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Coerce marks to a frozenset and reject unknown marks."""
        self.marks = frozenset(self.marks)
        unknown = self.marks.difference(MARK_ORDER)
        if unknown:
            raise ValueError(f"Unknown marks: {sorted(unknown)}")

    def ordered_marks(self) -> list[Mark]:
        """Return the marks in their fixed application order."""
        return [mark for mark in MARK_ORDER if mark in self.marks]

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run."""
        return visitor.visit_text(self)


@dataclass
class HardBreak(Node):
    """Hard line break inside a paragraph or heading.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Line break metadata

    """

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_hard_break(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Paragraph,
    Heading,
    CodeBlock,
    BulletList,
    OrderedList,
    ImageFigure,
    VideoEmbed,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (Text, HardBreak)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors keep algorithms (rendering, JSON export, inspection) separate from
the node classes. Every node kind in :mod:`mdxtree.ast.nodes` has a matching
``visit_*`` method here, so a concrete visitor that implements them all
handles the complete tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdxtree.ast.nodes import (
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    ImageFigure,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
    VideoEmbed,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for each node kind.

    Examples
    --------
    Counting text runs:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_image_figure(self, node: ImageFigure) -> Any:
        """Visit an ImageFigure node."""
        pass

    @abstractmethod
    def visit_video_embed(self, node: VideoEmbed) -> Any:
        """Visit a VideoEmbed node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        pass


def iter_nodes(node: Node):
    """Yield ``node`` and all of its descendants in document order.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk

    Yields
    ------
    Node
        Each node, parents before children

    """
    yield node
    if isinstance(node, Document):
        children: list[Node] = node.children
    elif isinstance(node, (Paragraph, Heading)):
        children = node.content
    elif isinstance(node, (BulletList, OrderedList)):
        children = list(node.items)
    elif isinstance(node, ListItem):
        children = node.children
    else:
        children = []
    for child in children:
        yield from iter_nodes(child)

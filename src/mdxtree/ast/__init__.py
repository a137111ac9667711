#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/ast/__init__.py
"""Document tree for the MDX converter.

The tree is the boundary contract with the hosting editor: the parser
produces it, the editor consumes and rebuilds it, and the renderer turns it
back into markup.

Examples
--------
    >>> from mdxtree.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text("Title")]),
    ...     Paragraph(content=[Text("Body", marks=frozenset({"bold"}))]),
    ... ])

"""

from mdxtree.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
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
from mdxtree.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mdxtree.ast.visitors import NodeVisitor, iter_nodes

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "BulletList",
    "CodeBlock",
    "Document",
    "HardBreak",
    "Heading",
    "ImageFigure",
    "ListItem",
    "Node",
    "NodeVisitor",
    "OrderedList",
    "Paragraph",
    "Text",
    "VideoEmbed",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "iter_nodes",
    "json_to_ast",
]

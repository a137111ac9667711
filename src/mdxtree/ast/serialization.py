#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/ast/serialization.py
"""Editor JSON serialization and deserialization for AST nodes.

The hosting editor exchanges documents as a JSON node graph of the form
``{"type": "doc", "content": [...]}``. This module converts between that
graph and the mdxtree node classes.

The JSON boundary is the second entry point for untrusted media sources, so
``imageFigure`` and ``videoEmbed`` nodes are re-normalized on the way in and
dropped (with a warning) when normalization rejects them. Unknown node types
are skipped with a warning so newer editors can talk to older converters.

Examples
--------
Serialize a tree to editor JSON:

    >>> from mdxtree.ast import Document, Heading, Text
    >>> from mdxtree.ast.serialization import ast_to_json
    >>> doc = Document(children=[Heading(level=1, content=[Text("Title")])])
    >>> ast_to_json(doc)
    '{"type": "doc", "content": [{"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Title"}]}]}'

Deserialize it again:

    >>> from mdxtree.ast.serialization import json_to_ast
    >>> json_to_ast(ast_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Sequence, cast

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
from mdxtree.constants import MARK_ORDER, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from mdxtree.exceptions import DocumentStructureError
from mdxtree.options.mdx import MdxParserOptions
from mdxtree.utils import media

logger = logging.getLogger(__name__)


# ============================================================================
# Serialization
# ============================================================================


def _serialize_content(nodes: Sequence[Node]) -> list[dict[str, Any]]:
    result = []
    for child in nodes:
        serializer = _SERIALIZATION_DISPATCH.get(type(child))
        if serializer is None:
            logger.debug("Skipping unknown node type during serialization: %s", type(child).__name__)
            continue
        result.append(serializer(child))
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    return {"type": "doc", "content": _serialize_content(node.children)}


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {"type": "heading", "attrs": {"level": node.level}, "content": _serialize_content(node.content)}


def _serialize_paragraph(node: Paragraph) -> dict[str, Any]:
    return {"type": "paragraph", "content": _serialize_content(node.content)}


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"type": "codeBlock", "attrs": {"language": node.language}}
    if node.content:
        result["content"] = [{"type": "text", "text": node.content}]
    return result


def _serialize_list(node: BulletList | OrderedList, node_type: str) -> dict[str, Any]:
    return {"type": node_type, "content": _serialize_content(node.items)}


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    return {"type": "listItem", "content": _serialize_content(node.children)}


def _serialize_image_figure(node: ImageFigure) -> dict[str, Any]:
    return {
        "type": "imageFigure",
        "attrs": {"src": node.src, "alt": node.alt, "caption": node.caption, "width": node.width},
    }


def _serialize_video_embed(node: VideoEmbed) -> dict[str, Any]:
    return {
        "type": "videoEmbed",
        "attrs": {
            "src": node.src,
            "title": node.title,
            "provider": node.provider,
            "aspectRatio": node.aspect_ratio,
        },
    }


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"type": "text", "text": node.content}
    if node.marks:
        result["marks"] = [{"type": mark} for mark in node.ordered_marks()]
    return result


def _serialize_hard_break(node: HardBreak) -> dict[str, Any]:
    return {"type": "hardBreak"}


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Heading: _serialize_heading,
    Paragraph: _serialize_paragraph,
    CodeBlock: _serialize_code_block,
    BulletList: lambda n: _serialize_list(n, "bulletList"),
    OrderedList: lambda n: _serialize_list(n, "orderedList"),
    ListItem: _serialize_list_item,
    ImageFigure: _serialize_image_figure,
    VideoEmbed: _serialize_video_embed,
    Text: _serialize_text,
    HardBreak: _serialize_hard_break,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to its editor JSON representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Editor JSON node. Children of unknown types are omitted.

    Raises
    ------
    DocumentStructureError
        If ``node`` itself is not a known node type

    Examples
    --------
    >>> ast_to_dict(Text("Hi", marks=frozenset({"italic", "bold"})))
    {'type': 'text', 'text': 'Hi', 'marks': [{'type': 'bold'}, {'type': 'italic'}]}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise DocumentStructureError(
            f"Unknown node type for serialization: {type(node).__name__}", node_type=type(node).__name__
        )
    return serializer(node)


def ast_to_json(node: Node, indent: Optional[int] = None) -> str:
    """Serialize an AST node to an editor JSON string.

    Parameters
    ----------
    node : Node
        Usually a Document
    indent : int or None, default None
        Indentation for pretty printing; compact output when None

    Returns
    -------
    str
        JSON text with non-ASCII characters preserved

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _require_mapping(data: Any, context: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DocumentStructureError(f"Expected a JSON object for {context}, got {type(data).__name__}")
    return data


def _attrs(data: dict[str, Any]) -> dict[str, Any]:
    attrs = data.get("attrs", {})
    if attrs is None:
        return {}
    if not isinstance(attrs, dict):
        raise DocumentStructureError("Node 'attrs' must be a JSON object", node_type=data.get("type"))
    return attrs


def _content_list(data: dict[str, Any]) -> list[Any]:
    content = data.get("content", [])
    if content is None:
        return []
    if not isinstance(content, list):
        raise DocumentStructureError("Node 'content' must be a JSON array", node_type=data.get("type"))
    return content


def _deserialize_sequence(
    items: list[Any], allowed: tuple[type[Node], ...], parent_type: str, options: MdxParserOptions
) -> list[Node]:
    """Deserialize a content array, keeping only nodes valid in this position."""
    nodes: list[Node] = []
    for item in items:
        node = _deserialize_node(item, options)
        if node is None:
            continue
        if not isinstance(node, allowed):
            logger.warning("Skipping %s node inside %s", type(node).__name__, parent_type)
            continue
        nodes.append(node)
    return nodes


def _deserialize_document(data: dict[str, Any], options: MdxParserOptions) -> Document:
    return Document(children=_deserialize_sequence(_content_list(data), BLOCK_NODE_TYPES, "doc", options))


def _deserialize_heading(data: dict[str, Any], options: MdxParserOptions) -> Heading:
    level = _attrs(data).get("level")
    if isinstance(level, bool) or not isinstance(level, int) or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
        raise DocumentStructureError(
            f"Heading level must be an integer between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}, got {level!r}",
            node_type="heading",
        )
    content = _deserialize_sequence(_content_list(data), INLINE_NODE_TYPES, "heading", options)
    return Heading(level=level, content=content)


def _deserialize_paragraph(data: dict[str, Any], options: MdxParserOptions) -> Paragraph:
    return Paragraph(content=_deserialize_sequence(_content_list(data), INLINE_NODE_TYPES, "paragraph", options))


def _deserialize_code_block(data: dict[str, Any], options: MdxParserOptions) -> CodeBlock:
    language = _attrs(data).get("language")
    if not isinstance(language, str) or not language:
        language = None

    parts = []
    for item in _content_list(data):
        item = _require_mapping(item, "codeBlock content")
        text = item.get("text", "")
        if not isinstance(text, str):
            raise DocumentStructureError("codeBlock text must be a string", node_type="codeBlock")
        parts.append(text)

    return CodeBlock(content="".join(parts), language=language)


def _deserialize_list_items(data: dict[str, Any], node_type: str, options: MdxParserOptions) -> list[ListItem]:
    items = _deserialize_sequence(_content_list(data), (ListItem,), node_type, options)
    return [item for item in items if isinstance(item, ListItem)]


def _deserialize_bullet_list(data: dict[str, Any], options: MdxParserOptions) -> BulletList:
    return BulletList(items=_deserialize_list_items(data, "bulletList", options))


def _deserialize_ordered_list(data: dict[str, Any], options: MdxParserOptions) -> OrderedList:
    return OrderedList(items=_deserialize_list_items(data, "orderedList", options))


def _deserialize_list_item(data: dict[str, Any], options: MdxParserOptions) -> ListItem:
    return ListItem(children=_deserialize_sequence(_content_list(data), BLOCK_NODE_TYPES, "listItem", options))


def _deserialize_image_figure(data: dict[str, Any], options: MdxParserOptions) -> Optional[ImageFigure]:
    node = media.normalize_image(_attrs(data), options)
    if node is None:
        logger.warning("Dropping imageFigure with rejected src: %r", str(_attrs(data).get("src"))[:80])
    return node


def _deserialize_video_embed(data: dict[str, Any], options: MdxParserOptions) -> Optional[VideoEmbed]:
    node = media.normalize_video(_attrs(data), options)
    if node is None:
        logger.warning("Dropping videoEmbed with rejected src: %r", str(_attrs(data).get("src"))[:80])
    return node


def _deserialize_text(data: dict[str, Any], options: MdxParserOptions) -> Text:
    text = data.get("text", "")
    if not isinstance(text, str):
        raise DocumentStructureError("text node 'text' must be a string", node_type="text")

    raw_marks = data.get("marks", [])
    if raw_marks is None:
        raw_marks = []
    if not isinstance(raw_marks, list):
        raise DocumentStructureError("text node 'marks' must be a JSON array", node_type="text")

    marks = set()
    for raw_mark in raw_marks:
        mark_type = raw_mark.get("type") if isinstance(raw_mark, dict) else raw_mark
        if mark_type in MARK_ORDER:
            marks.add(mark_type)
        else:
            logger.warning("Skipping unsupported mark: %r", mark_type)

    return Text(content=text, marks=frozenset(marks))


def _deserialize_hard_break(data: dict[str, Any], options: MdxParserOptions) -> HardBreak:
    return HardBreak()


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], MdxParserOptions], Optional[Node]]] = {
    "doc": _deserialize_document,
    "heading": _deserialize_heading,
    "paragraph": _deserialize_paragraph,
    "codeBlock": _deserialize_code_block,
    "bulletList": _deserialize_bullet_list,
    "orderedList": _deserialize_ordered_list,
    "listItem": _deserialize_list_item,
    "imageFigure": _deserialize_image_figure,
    "videoEmbed": _deserialize_video_embed,
    "text": _deserialize_text,
    "hardBreak": _deserialize_hard_break,
}


def _deserialize_node(data: Any, options: MdxParserOptions) -> Optional[Node]:
    data = _require_mapping(data, "node")
    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise DocumentStructureError("Node is missing a 'type' field")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        logger.warning("Unknown node type '%s', skipping", node_type)
        return None

    return deserializer(data, options)


def dict_to_ast(data: dict[str, Any], options: Optional[MdxParserOptions] = None) -> Node:
    """Convert an editor JSON node back to an AST node.

    Parameters
    ----------
    data : dict
        Editor JSON node, usually the ``doc`` root
    options : MdxParserOptions or None, default None
        Media normalization settings applied to incoming embeds

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    DocumentStructureError
        If the data is structurally malformed, the root type is unknown, or
        the root is a media node that normalization rejects

    Examples
    --------
    >>> dict_to_ast({"type": "text", "text": "Hello"})
    Text(content='Hello', marks=frozenset(), metadata={})

    """
    options = options or MdxParserOptions()
    root = _require_mapping(data, "root node")
    node_type = root.get("type")

    if node_type not in _DESERIALIZATION_DISPATCH:
        raise DocumentStructureError(f"Unknown root node type: {node_type!r}", node_type=str(node_type))

    node = _deserialize_node(root, options)
    if node is None:
        raise DocumentStructureError(f"Root node of type {node_type!r} was rejected", node_type=str(node_type))
    return node


def json_to_ast(json_str: str, options: Optional[MdxParserOptions] = None) -> Document:
    """Deserialize editor JSON text into a Document.

    Parameters
    ----------
    json_str : str
        JSON text whose root is a ``doc`` node
    options : MdxParserOptions or None, default None
        Media normalization settings applied to incoming embeds

    Returns
    -------
    Document
        Reconstructed document

    Raises
    ------
    DocumentStructureError
        If the text is not valid JSON, the root is not a ``doc`` node, or the
        structure is malformed

    """
    try:
        data = json.loads(json_str)
    except ValueError as e:
        raise DocumentStructureError(f"Invalid JSON: {e}", original_error=e) from e

    if not isinstance(data, dict) or data.get("type") != "doc":
        raise DocumentStructureError("Root node must be of type 'doc'", node_type="doc")

    return cast(Document, dict_to_ast(data, options))

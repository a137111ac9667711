#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/api.py
"""Public conversion API.

The two core operations are pure functions over immutable input:

- :func:`parse` turns MDX markup into a :class:`~mdxtree.ast.Document`.
- :func:`serialize` turns a Document back into MDX markup.

:func:`mdx_to_json` and :func:`json_to_mdx` compose these with the editor
JSON boundary, and :func:`check_round_trip` verifies that
``parse(serialize(parse(text))) == parse(text)`` for a given input.

Keyword arguments override fields of the supplied options object, as in::

    >>> doc = parse("<ImageFigure src=\\"https://example.com/a.png\\" width={90} />", image_width_min=80)
    >>> doc.children[0].width
    90

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, TypeVar, Union

from mdxtree.ast import Document, ast_to_json, json_to_ast
from mdxtree.exceptions import InvalidOptionsError
from mdxtree.options.base import CloneFrozenMixin
from mdxtree.options.mdx import MdxParserOptions, MdxRendererOptions
from mdxtree.parsers.mdx import MdxParser
from mdxtree.renderers.mdx import MdxRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _merge_options(options: Optional[OptionsT], options_class: type[OptionsT], **kwargs: Any) -> OptionsT:
    """Apply keyword overrides to an options object (or the class defaults).

    Raises
    ------
    InvalidOptionsError
        If a keyword does not name a field of ``options_class``

    """
    if options is not None and not isinstance(options, options_class):
        raise InvalidOptionsError(converter_name="mdx", expected_type=options_class, received_type=type(options))

    unknown = set(kwargs) - options_class.field_names()
    if unknown:
        raise InvalidOptionsError(
            converter_name="mdx",
            expected_type=options_class,
            received_type=dict,
            message=f"Unknown option(s) for {options_class.__name__}: {', '.join(sorted(unknown))}",
        )

    if options is None:
        return options_class(**kwargs)
    if kwargs:
        return options.create_updated(**kwargs)
    return options


def parse(text: Union[str, bytes], *, parser_options: Optional[MdxParserOptions] = None, **kwargs: Any) -> Document:
    """Parse MDX markup into a document tree.

    Parameters
    ----------
    text : str or bytes
        MDX markup; bytes are decoded as UTF-8
    parser_options : MdxParserOptions, optional
        Media normalization settings
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        The parsed tree. Parsing never fails on content.

    Raises
    ------
    InvalidOptionsError
        If options of the wrong type or unknown option keywords are given

    Examples
    --------
    >>> [type(block).__name__ for block in parse("- item\\nNext paragraph").children]
    ['BulletList', 'Paragraph']

    """
    options = _merge_options(parser_options, MdxParserOptions, **kwargs)
    return MdxParser(options).parse(text)


def serialize(
    doc: Document, *, renderer_options: Optional[MdxRendererOptions] = None, **kwargs: Any
) -> str:
    """Serialize a document tree to MDX markup.

    Parameters
    ----------
    doc : Document
        Tree to serialize
    renderer_options : MdxRendererOptions, optional
        Layout settings
    kwargs : Any
        Individual renderer options that override settings in renderer_options

    Returns
    -------
    str
        MDX text. Unknown node kinds are skipped.

    """
    options = _merge_options(renderer_options, MdxRendererOptions, **kwargs)
    return MdxRenderer(options).render_to_string(doc)


def mdx_to_json(
    text: Union[str, bytes], *, parser_options: Optional[MdxParserOptions] = None, indent: Optional[int] = None
) -> str:
    """Parse MDX markup and return the editor JSON document."""
    return ast_to_json(parse(text, parser_options=parser_options), indent=indent)


def json_to_mdx(
    json_str: str,
    *,
    parser_options: Optional[MdxParserOptions] = None,
    renderer_options: Optional[MdxRendererOptions] = None,
) -> str:
    """Render an editor JSON document as MDX markup.

    Media nodes in the JSON are re-validated with ``parser_options`` before
    rendering.

    Raises
    ------
    DocumentStructureError
        If the JSON is invalid or structurally malformed

    """
    doc = json_to_ast(json_str, options=parser_options)
    return serialize(doc, renderer_options=renderer_options)


@dataclass(frozen=True)
class RoundTripReport:
    """Result of a parse/serialize/parse stability check.

    Parameters
    ----------
    stable : bool
        True when the second parse equals the first
    first_tree : Document
        ``parse(text)``
    serialized : str
        ``serialize(first_tree)``
    second_tree : Document
        ``parse(serialized)``
    first_difference : int or None
        Index of the first top-level block that differs, or None when stable.
        Equals the shorter block count when one tree is a prefix of the other.

    """

    stable: bool
    first_tree: Document
    serialized: str
    second_tree: Document
    first_difference: Optional[int] = None


def _first_difference(first: Document, second: Document) -> Optional[int]:
    for index, (left, right) in enumerate(zip(first.children, second.children)):
        if left != right:
            return index
    if len(first.children) != len(second.children):
        return min(len(first.children), len(second.children))
    return None


def check_round_trip(
    text: Union[str, bytes],
    *,
    parser_options: Optional[MdxParserOptions] = None,
    renderer_options: Optional[MdxRendererOptions] = None,
) -> RoundTripReport:
    """Check that serializing a parsed document re-parses to the same tree.

    Parameters
    ----------
    text : str or bytes
        MDX markup
    parser_options : MdxParserOptions, optional
        Settings for both parses
    renderer_options : MdxRendererOptions, optional
        Settings for the serialization

    Returns
    -------
    RoundTripReport
        Both trees, the intermediate markup and the first differing block

    Examples
    --------
    >>> check_round_trip("# Title\\n\\n- a\\n  - b").stable
    True

    """
    first_tree = parse(text, parser_options=parser_options)
    serialized = serialize(first_tree, renderer_options=renderer_options)
    second_tree = parse(serialized, parser_options=parser_options)

    difference = _first_difference(first_tree, second_tree)
    if difference is not None:
        logger.debug("Round trip diverged at top-level block %d", difference)

    return RoundTripReport(
        stable=difference is None,
        first_tree=first_tree,
        serialized=serialized,
        second_tree=second_tree,
        first_difference=difference,
    )

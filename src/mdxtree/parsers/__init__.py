#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/parsers/__init__.py
"""Parsers that convert MDX markup into the mdxtree AST."""

from mdxtree.parsers.attributes import parse_tag, unescape_attribute_value
from mdxtree.parsers.base import BaseParser
from mdxtree.parsers.inline import tokenize
from mdxtree.parsers.mdx import MdxParser

__all__ = [
    "BaseParser",
    "MdxParser",
    "parse_tag",
    "tokenize",
    "unescape_attribute_value",
]

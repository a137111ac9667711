#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/renderers/__init__.py
"""Renderers that convert the mdxtree AST back into markup."""

from mdxtree.renderers.base import BaseRenderer, InlineContentMixin
from mdxtree.renderers.mdx import MdxRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "MdxRenderer",
]

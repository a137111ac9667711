"""Configuration options for the MDX converter.

Options are frozen dataclasses; use ``create_updated`` to derive variants.
"""

from mdxtree.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdxtree.options.mdx import MdxParserOptions, MdxRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MdxParserOptions",
    "MdxRendererOptions",
]

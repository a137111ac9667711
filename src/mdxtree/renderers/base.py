#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that AST renderers inherit from,
plus the mixin text renderers use to capture inline output.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdxtree.ast import Document
from mdxtree.ast.nodes import INLINE_NODE_TYPES, Node
from mdxtree.exceptions import InvalidOptionsError
from mdxtree.options.base import BaseRendererOptions
from mdxtree.utils.io_utils import write_text

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a path or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination; ``"-"`` writes to stdout

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a path or stream as UTF-8."""
        write_text(text, output)


class InlineContentMixin:
    """Mixin providing inline content capture for text renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Nodes that are not inline kinds are skipped.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content

        """
        saved_output = self._output
        self._output = []

        for node in content:
            if not isinstance(node, INLINE_NODE_TYPES):
                logger.debug("Skipping non-inline node in inline content: %s", type(node).__name__)
                continue
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result

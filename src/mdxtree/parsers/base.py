#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/parsers/base.py
"""Base class for markup parsers.

This module defines the abstract base class that parsers inherit from. The
BaseParser provides a consistent interface for converting markup text into the
mdxtree AST.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from mdxtree.ast import Document
from mdxtree.exceptions import InvalidOptionsError
from mdxtree.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from mdxtree.parsers.base import BaseParser
        >>> from mdxtree.ast import Document
        >>>
        >>> class NullParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Return markup text, decoding bytes as UTF-8.

        Undecodable bytes are replaced rather than rejected; parsing is total.
        """
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8", errors="replace")
        return input_data

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse markup into an AST.

        Parameters
        ----------
        input_data : str or bytes
            Markup text; bytes are decoded as UTF-8

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        """
        raise NotImplementedError

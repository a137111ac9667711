#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdxtree library.

The converter itself is total: parsing and serializing never raise on
content. Malformed embeds degrade to paragraph text and invalid attribute
values are dropped. The exceptions below are reserved for API misuse and for
the boundaries where structured data enters the library (editor JSON,
configuration files).

Exception Hierarchy
-------------------
- MdxTreeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - DocumentStructureError (malformed editor JSON document)

  - ConfigError (configuration file problems)

"""

from __future__ import annotations

from typing import Any


class MdxTreeError(Exception):
    """Base exception class for all mdxtree-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdxTreeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing ``MdxRendererOptions`` to ``MdxParser``.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class DocumentStructureError(MdxTreeError):
    """Exception raised when an editor JSON document is structurally malformed.

    Unknown node types are not an error (they are skipped); this exception
    covers values that cannot be interpreted at all, such as a node that is
    not a mapping or a heading whose level is not an integer in range.

    Parameters
    ----------
    message : str
        Description of the structural problem
    node_type : str, optional
        The ``type`` of the offending node, when known
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the structure error with the offending node type."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class ConfigError(MdxTreeError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file involved
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for MDX parsing and rendering.

This module defines the options controlling media normalization during
parsing and layout during rendering.
"""
# src/mdxtree/options/mdx.py


from __future__ import annotations

import math
from dataclasses import dataclass, field

from mdxtree.constants import (
    DEFAULT_ALLOWED_URL_SCHEMES,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_WIDTH_MAX,
    DEFAULT_IMAGE_WIDTH_MIN,
    DEFAULT_LIST_INDENT_WIDTH,
)
from mdxtree.options.base import BaseParserOptions, BaseRendererOptions


def _validate_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def _validate_aspect_ratio(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value}")


@dataclass(frozen=True)
class MdxParserOptions(BaseParserOptions):
    """Configuration options for MDX-to-tree parsing.

    Parameters
    ----------
    image_width_min : int, default 240
        Lower bound of the clamp range applied to ``ImageFigure`` widths.
    image_width_max : int, default 1200
        Upper bound of the clamp range applied to ``ImageFigure`` widths.
    default_aspect_ratio : float, default 16/9
        Aspect ratio given to videos whose ``aspectRatio`` is absent or not positive.
    allowed_image_schemes : tuple of str, default ("http", "https")
        URL schemes accepted for image sources, a non-empty subset of http and https.
        Anything else rejects the embed.

    Examples
    --------
    Narrow the image width range:
        >>> options = MdxParserOptions(image_width_min=320, image_width_max=960)

    """

    image_width_min: int = field(
        default=DEFAULT_IMAGE_WIDTH_MIN,
        metadata={"help": "Minimum image width in pixels (widths are clamped)", "type": int},
    )
    image_width_max: int = field(
        default=DEFAULT_IMAGE_WIDTH_MAX,
        metadata={"help": "Maximum image width in pixels (widths are clamped)", "type": int},
    )
    default_aspect_ratio: float = field(
        default=DEFAULT_ASPECT_RATIO,
        metadata={"help": "Aspect ratio for videos without a valid aspectRatio", "type": float},
    )
    allowed_image_schemes: tuple[str, ...] = field(
        default=DEFAULT_ALLOWED_URL_SCHEMES,
        metadata={"help": "URL schemes allowed for image sources"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and normalize scheme names.

        Raises
        ------
        TypeError
            If a field has the wrong type.
        ValueError
            If any field value is outside its valid range.

        """
        _validate_int(self.image_width_min, "image_width_min")
        _validate_int(self.image_width_max, "image_width_max")
        if self.image_width_min <= 0:
            raise ValueError(f"image_width_min must be positive, got {self.image_width_min}")
        if self.image_width_max < self.image_width_min:
            raise ValueError(
                f"image_width_max ({self.image_width_max}) must be >= image_width_min ({self.image_width_min})"
            )
        _validate_aspect_ratio(self.default_aspect_ratio, "default_aspect_ratio")

        if isinstance(self.allowed_image_schemes, str):
            raise TypeError("allowed_image_schemes must be a sequence of scheme names, not a string")
        schemes = tuple(str(scheme).lower().rstrip(":") for scheme in self.allowed_image_schemes)
        if not schemes:
            raise ValueError("allowed_image_schemes must contain at least one scheme")
        unsupported = [scheme for scheme in schemes if scheme not in DEFAULT_ALLOWED_URL_SCHEMES]
        if unsupported:
            raise ValueError(
                f"allowed_image_schemes may only narrow {DEFAULT_ALLOWED_URL_SCHEMES}, got unsupported {unsupported}"
            )
        object.__setattr__(self, "allowed_image_schemes", schemes)


@dataclass(frozen=True)
class MdxRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-MDX rendering.

    Parameters
    ----------
    list_indent_width : int, default 2
        Spaces per list nesting level and for list item continuation lines.
        The parser compares indentation relatively, so any width re-parses
        to the same tree.
    default_aspect_ratio : float, default 16/9
        Aspect ratio emitted for videos whose ratio is missing or invalid.

    """

    list_indent_width: int = field(
        default=DEFAULT_LIST_INDENT_WIDTH,
        metadata={"help": "Spaces per list nesting level", "type": int},
    )
    default_aspect_ratio: float = field(
        default=DEFAULT_ASPECT_RATIO,
        metadata={"help": "Aspect ratio emitted for videos without a valid ratio", "type": float},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for renderer options.

        Raises
        ------
        TypeError
            If a field has the wrong type.
        ValueError
            If any field value is outside its valid range.

        """
        _validate_int(self.list_indent_width, "list_indent_width")
        if self.list_indent_width < 1:
            raise ValueError(f"list_indent_width must be at least 1, got {self.list_indent_width}")
        _validate_aspect_ratio(self.default_aspect_ratio, "default_aspect_ratio")

"""Base classes for parser and renderer options.

This module defines the foundation classes for the converter's frozen
configuration objects.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all configurable fields."""
        return frozenset(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a plain mapping such as a config file table.

        Parameters
        ----------
        values : Mapping[str, Any]
            Field names and values

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        KeyError
            If ``values`` contains a key that is not an option field

        """
        unknown = set(values) - cls.field_names()
        if unknown:
            raise KeyError(f"Unknown option(s) for {cls.__name__}: {', '.join(sorted(unknown))}")
        return cls(**dict(values))


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert document trees into markup text.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert markup text into document trees.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

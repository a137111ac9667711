#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/parsers/attributes.py
"""Attribute grammar for self-closing component tags.

Recognizes single lines of the form::

    <ComponentName key="value" key='value' key={json} />

Quoted values support ``\\"``, ``\\'`` and ``\\\\`` escapes. Brace values are
parsed as JSON; a value that fails to parse is dropped on its own without
affecting the other attributes. Attribute order is irrelevant and the last
occurrence of a duplicated key wins.

"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from mdxtree.constants import ATTRIBUTE_ESCAPE_PATTERN, ATTRIBUTE_PATTERN
from mdxtree.utils.media import AttributeValue

logger = logging.getLogger(__name__)

_ATTRIBUTE_RE = re.compile(ATTRIBUTE_PATTERN)
_ESCAPE_RE = re.compile(ATTRIBUTE_ESCAPE_PATTERN)

_SCALAR_TYPES = (str, int, float, bool, type(None))


def unescape_attribute_value(value: str) -> str:
    r"""Remove backslash escapes from a quoted attribute value.

    Examples
    --------
    >>> unescape_attribute_value(r'say \"hi\"')
    'say "hi"'

    """
    return _ESCAPE_RE.sub(r"\1", value)


def parse_tag(line: str, component_name: str) -> Optional[dict[str, AttributeValue]]:
    """Parse a self-closing component tag into an attribute map.

    Parameters
    ----------
    line : str
        Candidate line; surrounding whitespace is ignored
    component_name : str
        Expected component, e.g. ``"ImageFigure"``

    Returns
    -------
    dict or None
        Attribute map, or None when the line is not a ``<component_name ... />``
        tag. A tag without attributes yields an empty dict.

    Examples
    --------
    >>> parse_tag('<ImageFigure src="a.png" width={320} />', "ImageFigure")
    {'src': 'a.png', 'width': 320}
    >>> parse_tag('<VideoEmbed src="x" />', "ImageFigure") is None
    True

    """
    stripped = line.strip()
    prefix = f"<{component_name}"
    if not stripped.startswith(prefix) or not stripped.endswith("/>"):
        return None

    body = stripped[len(prefix) : -2]
    # "<ImageFigures />" names a different component
    if body and not (body[0].isspace() or body[0] == "/"):
        return None

    attrs: dict[str, AttributeValue] = {}
    for match in _ATTRIBUTE_RE.finditer(body):
        key, double_quoted, single_quoted, braced = match.groups()
        if braced is not None:
            try:
                value = json.loads(braced)
            except ValueError:
                logger.debug("Dropping attribute %r on <%s>: invalid JSON %r", key, component_name, braced)
                continue
            if not isinstance(value, _SCALAR_TYPES):
                logger.debug("Dropping attribute %r on <%s>: non-scalar JSON value", key, component_name)
                continue
            attrs[key] = value
        elif double_quoted is not None:
            attrs[key] = unescape_attribute_value(double_quoted)
        else:
            attrs[key] = unescape_attribute_value(single_quoted or "")

    return attrs

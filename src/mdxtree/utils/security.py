#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/utils/security.py
"""Security utilities for URLs that reach rendered markup.

Media embed sources are the only attacker-controlled strings that end up in
rendered output, so every ``src`` passes through :func:`sanitize_url` before a
media node is built. The check is an allowlist: only the listed schemes with
a network location are accepted.

"""

from __future__ import annotations

import logging
from typing import Any, Iterable
from urllib.parse import urlparse

from mdxtree.constants import DEFAULT_ALLOWED_URL_SCHEMES

logger = logging.getLogger(__name__)


def has_control_characters(value: str) -> bool:
    """Check whether a string contains ASCII control characters.

    Parameters
    ----------
    value : str
        String to inspect

    Returns
    -------
    bool
        True if any character is below 0x20 or is DEL (0x7f)

    Examples
    --------
    >>> has_control_characters("https://example.com")
    False
    >>> has_control_characters("https://exa\\nmple.com")
    True

    """
    return any(ord(char) < 0x20 or ord(char) == 0x7F for char in value)


def sanitize_url(url: Any, allowed_schemes: Iterable[str] = DEFAULT_ALLOWED_URL_SCHEMES) -> str | None:
    r"""Validate a URL against a scheme allowlist.

    Parameters
    ----------
    url : Any
        Candidate URL. Non-string values are rejected.
    allowed_schemes : iterable of str, default ("http", "https")
        Accepted schemes, compared case-insensitively

    Returns
    -------
    str or None
        The stripped URL when it is acceptable, otherwise None

    Examples
    --------
    >>> sanitize_url("https://example.com/a.png")
    'https://example.com/a.png'
    >>> sanitize_url("ftp://example.com/a.png") is None
    True
    >>> sanitize_url("javascript:alert(1)") is None
    True
    >>> sanitize_url("/relative/path.png") is None
    True

    Notes
    -----
    Relative URLs are rejected because the embed is rendered outside the
    document's origin context. The URL is returned as given (only
    surrounding whitespace is removed) so that a parse/render round trip
    does not rewrite it.

    """
    if not isinstance(url, str) or not url.strip():
        return None

    candidate = url.strip()
    if has_control_characters(candidate):
        logger.debug("Rejected URL containing control characters: %r", candidate[:50])
        return None

    try:
        parsed = urlparse(candidate)
    except ValueError:
        logger.debug("Rejected unparseable URL: %r", candidate[:50])
        return None

    allowed = {scheme.lower() for scheme in allowed_schemes}
    if parsed.scheme.lower() not in allowed:
        logger.debug("Rejected URL with scheme %r: %s", parsed.scheme, candidate[:50])
        return None

    if not parsed.netloc:
        logger.debug("Rejected URL without host: %s", candidate[:50])
        return None

    return candidate

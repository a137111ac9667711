#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/utils/media.py
"""Normalization of the two embeddable media kinds.

Both the MDX parser and the editor JSON boundary build media nodes through
this module, so validation lives in one place:

- :func:`normalize_image` accepts only ``http``/``https`` sources and clamps
  the width into the configured range.
- :func:`normalize_video` maps every accepted URL shape to the provider's
  canonical embed URL. Hosts outside the provider table are rejected.

A return value of None means "reject this embed"; callers must not emit a
node in that case.

"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Optional, Union
from urllib.parse import parse_qs, urlparse

from mdxtree.ast.nodes import ImageFigure, VideoEmbed
from mdxtree.constants import (
    DEFAULT_ALLOWED_URL_SCHEMES,
    VIMEO_EMBED_TEMPLATE,
    VIMEO_HOSTS,
    VIMEO_PLAYER_HOSTS,
    VIMEO_VIDEO_ID_PATTERN,
    YOUTUBE_EMBED_TEMPLATE,
    YOUTUBE_HOSTS,
    YOUTUBE_SHORT_HOSTS,
    YOUTUBE_VIDEO_ID_PATTERN,
    VideoProvider,
)
from mdxtree.options.mdx import MdxParserOptions
from mdxtree.utils.security import sanitize_url

logger = logging.getLogger(__name__)

AttributeValue = Union[str, int, float, bool, None]

_YOUTUBE_ID_RE = re.compile(YOUTUBE_VIDEO_ID_PATTERN)
_VIMEO_ID_RE = re.compile(VIMEO_VIDEO_ID_PATTERN)


def is_number(value: Any) -> bool:
    """Return True for finite ints and floats, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def clamp_number(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``.

    Examples
    --------
    >>> clamp_number(5000, 240, 1200)
    1200
    >>> clamp_number(100, 240, 1200)
    240

    """
    return min(maximum, max(minimum, value))


def _string_attr(attrs: Mapping[str, AttributeValue], key: str) -> str:
    value = attrs.get(key)
    return value if isinstance(value, str) else ""


def normalize_image(
    attrs: Mapping[str, AttributeValue], options: Optional[MdxParserOptions] = None
) -> Optional[ImageFigure]:
    """Build an ImageFigure from raw tag attributes.

    Parameters
    ----------
    attrs : Mapping[str, AttributeValue]
        Attributes parsed from an ``<ImageFigure />`` tag
    options : MdxParserOptions or None, default None
        Width range and allowed schemes; defaults are used when None

    Returns
    -------
    ImageFigure or None
        The normalized node, or None when the source is missing or uses a
        scheme outside the allowlist

    Examples
    --------
    >>> normalize_image({"src": "https://example.com/a.png", "width": 5000}).width
    1200
    >>> normalize_image({"src": "ftp://example.com/a.png"}) is None
    True

    """
    options = options or MdxParserOptions()

    src = sanitize_url(attrs.get("src"), options.allowed_image_schemes)
    if src is None:
        logger.debug("Rejected ImageFigure with src %r", attrs.get("src"))
        return None

    width: Optional[int] = None
    raw_width = attrs.get("width")
    if is_number(raw_width):
        width = int(round(clamp_number(float(raw_width), options.image_width_min, options.image_width_max)))  # type: ignore[arg-type]

    return ImageFigure(
        src=src,
        alt=_string_attr(attrs, "alt"),
        caption=_string_attr(attrs, "caption"),
        width=width,
    )


def to_embed_url(url: str) -> Optional[tuple[str, VideoProvider]]:
    """Resolve a video page URL to its canonical embed URL.

    Supported shapes:

    - ``youtube.com/watch?v=ID``, ``youtube.com/embed/ID``, ``youtu.be/ID``
      map to ``https://www.youtube.com/embed/ID``
    - ``vimeo.com/ID``, ``player.vimeo.com/video/ID`` map to
      ``https://player.vimeo.com/video/ID``

    Parameters
    ----------
    url : str
        Absolute ``http``/``https`` URL

    Returns
    -------
    tuple of (str, str) or None
        Canonical embed URL and provider, or None for any other host or an
        invalid video ID

    Examples
    --------
    >>> to_embed_url("https://youtu.be/abc123")
    ('https://www.youtube.com/embed/abc123', 'youtube')
    >>> to_embed_url("https://vimeo.com/76979871")
    ('https://player.vimeo.com/video/76979871', 'vimeo')
    >>> to_embed_url("https://example.com/watch?v=abc") is None
    True

    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    host = (parsed.hostname or "").lower()
    segments = [segment for segment in parsed.path.split("/") if segment]

    video_id: Optional[str] = None
    if host in YOUTUBE_SHORT_HOSTS:
        video_id = segments[0] if segments else None
        return _build_embed(video_id, _YOUTUBE_ID_RE, YOUTUBE_EMBED_TEMPLATE, "youtube")

    if host in YOUTUBE_HOSTS:
        if len(segments) >= 2 and segments[0] == "embed":
            video_id = segments[1]
        elif segments == ["watch"]:
            video_id = parse_qs(parsed.query).get("v", [None])[0]
        return _build_embed(video_id, _YOUTUBE_ID_RE, YOUTUBE_EMBED_TEMPLATE, "youtube")

    if host in VIMEO_PLAYER_HOSTS:
        if len(segments) >= 2 and segments[0] == "video":
            video_id = segments[1]
        return _build_embed(video_id, _VIMEO_ID_RE, VIMEO_EMBED_TEMPLATE, "vimeo")

    if host in VIMEO_HOSTS:
        video_id = segments[0] if segments else None
        return _build_embed(video_id, _VIMEO_ID_RE, VIMEO_EMBED_TEMPLATE, "vimeo")

    return None


def _build_embed(
    video_id: Optional[str], id_pattern: re.Pattern[str], template: str, provider: VideoProvider
) -> Optional[tuple[str, VideoProvider]]:
    if not video_id or not id_pattern.match(video_id):
        return None
    return template.format(video_id=video_id), provider


def normalize_video(
    attrs: Mapping[str, AttributeValue], options: Optional[MdxParserOptions] = None
) -> Optional[VideoEmbed]:
    """Build a VideoEmbed from raw tag attributes.

    Any ``provider`` attribute in ``attrs`` is ignored; the provider is
    derived from the resolved URL.

    Parameters
    ----------
    attrs : Mapping[str, AttributeValue]
        Attributes parsed from a ``<VideoEmbed />`` tag
    options : MdxParserOptions or None, default None
        Supplies the default aspect ratio; defaults are used when None

    Returns
    -------
    VideoEmbed or None
        The normalized node, or None when the URL is not ``http(s)`` or is
        not from an allowlisted provider

    """
    options = options or MdxParserOptions()

    src = sanitize_url(attrs.get("src"), DEFAULT_ALLOWED_URL_SCHEMES)
    if src is None:
        logger.debug("Rejected VideoEmbed with src %r", attrs.get("src"))
        return None

    resolved = to_embed_url(src)
    if resolved is None:
        logger.debug("Rejected VideoEmbed from unsupported host: %s", src[:80])
        return None
    embed_url, provider = resolved

    raw_ratio = attrs.get("aspectRatio")
    if is_number(raw_ratio) and raw_ratio > 0:  # type: ignore[operator]
        aspect_ratio = float(raw_ratio)  # type: ignore[arg-type]
    else:
        aspect_ratio = options.default_aspect_ratio

    return VideoEmbed(
        src=embed_url,
        provider=provider,
        title=_string_attr(attrs, "title").strip(),
        aspect_ratio=aspect_ratio,
    )

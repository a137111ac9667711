#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdxtree library.

This module centralizes the hardcoded values, patterns and default
configuration constants used across the converter. Constants are organized
by category:

1. Type Definitions - Literal types and type aliases
2. Document Structure - Heading levels, list indentation, marks
3. Media Embeds - Component names, clamping ranges, provider allowlist
4. Markup Patterns - Regular expressions shared by parser and tests
5. Configuration Discovery - Config file names and environment variable
6. Logging - Package logger name and log formats
"""

from __future__ import annotations

import logging
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Mark = Literal["bold", "italic", "code"]
VideoProvider = Literal["youtube", "vimeo"]

# =============================================================================
# Document Structure
# =============================================================================

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 4

# Marks are wrapped innermost-first in this order when serializing
MARK_ORDER: tuple[Mark, ...] = ("bold", "italic", "code")

MARK_DELIMITERS: dict[str, str] = {
    "bold": "**",
    "italic": "*",
    "code": "`",
}

DEFAULT_LIST_INDENT_WIDTH = 2
CODE_FENCE = "```"
HARD_BREAK_MARKUP = "  \n"

# =============================================================================
# Media Embeds
# =============================================================================

IMAGE_FIGURE_COMPONENT = "ImageFigure"
VIDEO_EMBED_COMPONENT = "VideoEmbed"

DEFAULT_IMAGE_WIDTH_MIN = 240
DEFAULT_IMAGE_WIDTH_MAX = 1200

DEFAULT_ASPECT_RATIO = 16 / 9

DEFAULT_ALLOWED_URL_SCHEMES: tuple[str, ...] = ("http", "https")

YOUTUBE_HOSTS = frozenset({"youtube.com", "www.youtube.com", "m.youtube.com"})
YOUTUBE_SHORT_HOSTS = frozenset({"youtu.be"})
VIMEO_HOSTS = frozenset({"vimeo.com", "www.vimeo.com"})
VIMEO_PLAYER_HOSTS = frozenset({"player.vimeo.com"})

YOUTUBE_EMBED_TEMPLATE = "https://www.youtube.com/embed/{video_id}"
VIMEO_EMBED_TEMPLATE = "https://player.vimeo.com/video/{video_id}"

YOUTUBE_VIDEO_ID_PATTERN = r"^[A-Za-z0-9_-]+$"
VIMEO_VIDEO_ID_PATTERN = r"^\d+$"

# =============================================================================
# Markup Patterns
# =============================================================================

# Bold is tried before italic so "**x**" never becomes two italic spans
INLINE_TOKEN_PATTERN = r"\*\*[^*]+\*\*|\*[^*]+\*|`[^`]+`"

HEADING_PATTERN = r"^(#{1,4})\s+(.*)$"
BULLET_MARKER_PATTERN = r"^-(?:\s+(.*))?$"
ORDERED_MARKER_PATTERN = r"^(\d+)\.(?:\s+(.*))?$"

# key="..." | key='...' | key={json}; JSON string literals may contain braces
ATTRIBUTE_PATTERN = (
    r"(\w+)="
    r"(?:\"((?:\\.|[^\"\\])*)\""
    r"|'((?:\\.|[^'\\])*)'"
    r"|\{((?:\"(?:\\.|[^\"\\])*\"|[^{}\"])+)\})"
)
ATTRIBUTE_ESCAPE_PATTERN = r"\\(['\"\\])"

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_ENV_VAR = "MDXTREE_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".mdxtree.toml", ".mdxtree.yaml", ".mdxtree.yml", ".mdxtree.json")
PYPROJECT_TOOL_SECTION = "mdxtree"

# =============================================================================
# Logging
# =============================================================================

PACKAGE_LOGGER_NAME = "mdxtree"
# Loggers outside the package never go below this level
THIRD_PARTY_LOG_LEVEL = logging.WARNING
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

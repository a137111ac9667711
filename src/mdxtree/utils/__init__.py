#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/utils/__init__.py
"""Utility modules for the mdxtree package.

This package contains URL security checks, media embed normalization and
text I/O helpers shared by the converter and the command-line interface.
"""

from mdxtree.utils.security import has_control_characters, sanitize_url

__all__ = [
    "has_control_characters",
    "sanitize_url",
]

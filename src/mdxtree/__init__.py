"""mdxtree - bidirectional converter between MDX markup and an editor document tree.

mdxtree reads a small Markdown dialect (ATX headings up to level 4, bullet
and ordered lists, fenced code blocks, bold/italic/code marks) plus two
self-closing components, ``<ImageFigure />`` and ``<VideoEmbed />``, into a
typed document tree, and serializes that tree back to markup such that a
second parse yields an equal tree.

Key Features
------------
- Total parser: unrecognized syntax and rejected embeds become paragraph text
- Allowlist-based media validation (http/https images, YouTube and Vimeo
  videos rewritten to canonical embed URLs)
- Editor JSON import/export with the same media validation
- Round-trip checking from Python and from the ``mdxtree`` command line

Requirements
------------
- Python 3.10+

Examples
--------
Parse and serialize:

    >>> from mdxtree import parse, serialize
    >>> doc = parse("# Title\\n\\n- **bold** item")
    >>> serialize(doc)
    '# Title\\n\\n- **bold** item'

Round-trip through the editor JSON:

    >>> from mdxtree import mdx_to_json, json_to_mdx
    >>> json_to_mdx(mdx_to_json("Hello *world*"))
    'Hello *world*'

See Also
--------
mdxtree.ast : Document tree node definitions and editor JSON conversion

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdxtree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdxtree.api import (
    RoundTripReport,
    check_round_trip,
    json_to_mdx,
    mdx_to_json,
    parse,
    serialize,
)
from mdxtree.ast import Document
from mdxtree.exceptions import (
    ConfigError,
    DocumentStructureError,
    InvalidOptionsError,
    MdxTreeError,
    ValidationError,
)
from mdxtree.options import MdxParserOptions, MdxRendererOptions

__all__ = [
    "ConfigError",
    "Document",
    "DocumentStructureError",
    "InvalidOptionsError",
    "MdxParserOptions",
    "MdxRendererOptions",
    "MdxTreeError",
    "RoundTripReport",
    "ValidationError",
    "__version__",
    "check_round_trip",
    "json_to_mdx",
    "mdx_to_json",
    "parse",
    "serialize",
]

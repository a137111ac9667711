#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/parsers/inline.py
"""Inline mark tokenizer.

A single left-to-right regex pass splits a line into plain text runs and
marked spans (``**bold**``, ``*italic*``, `` `code` ``). Each span carries
exactly one mark; spans never nest because a delimiter class is excluded
from its own interior. Unterminated delimiters stay in the output as
literal text, so tokenizing never fails.

"""

from __future__ import annotations

import re

from mdxtree.ast.nodes import Node, Text
from mdxtree.constants import INLINE_TOKEN_PATTERN, MARK_DELIMITERS, Mark

_INLINE_TOKEN_RE = re.compile(INLINE_TOKEN_PATTERN)


def _marked_text(token: str) -> Text:
    mark: Mark
    if token.startswith(MARK_DELIMITERS["bold"]):
        mark = "bold"
    elif token.startswith(MARK_DELIMITERS["italic"]):
        mark = "italic"
    else:
        mark = "code"
    width = len(MARK_DELIMITERS[mark])
    return Text(content=token[width:-width], marks=frozenset({mark}))


def tokenize(line: str) -> list[Node]:
    """Split a line of markup into inline nodes.

    Parameters
    ----------
    line : str
        One logical line of paragraph, heading or list item text

    Returns
    -------
    list of Node
        Flat, ordered list of Text nodes. Empty input yields an empty list.

    Examples
    --------
    >>> [(n.content, sorted(n.marks)) for n in tokenize("a **b** `c`")]
    [('a ', []), ('b', ['bold']), (' ', []), ('c', ['code'])]
    >>> [n.content for n in tokenize("2 * 3")]
    ['2 * 3']

    """
    nodes: list[Node] = []
    last_index = 0
    for match in _INLINE_TOKEN_RE.finditer(line):
        if match.start() > last_index:
            nodes.append(Text(content=line[last_index : match.start()]))
        nodes.append(_marked_text(match.group(0)))
        last_index = match.end()

    if last_index < len(line):
        nodes.append(Text(content=line[last_index:]))

    return nodes

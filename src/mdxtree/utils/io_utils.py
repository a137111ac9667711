"""I/O utilities for reading and writing converter text.

The converter core is pure; these helpers sit at the edges (CLI, renderer
``render`` method) and move text between strings, paths and streams.
"""

from __future__ import annotations

import io
import sys
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

TextSource = Union[str, Path, IO[bytes], IO[str]]


def read_text(source: TextSource) -> str:
    """Read UTF-8 text from a path, a stream, or ``"-"`` for stdin.

    Parameters
    ----------
    source : str, Path, IO[bytes], or IO[str]
        Where to read from. ``"-"`` reads standard input.

    Returns
    -------
    str
        The decoded text

    Raises
    ------
    OSError
        If the path cannot be read
    TypeError
        If the source type is not supported

    """
    if isinstance(source, str) and source == "-":
        return sys.stdin.read()

    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding="utf-8")

    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, bytes):
            return data.decode("utf-8")
        if isinstance(data, str):
            return data
        raise TypeError(f"Stream returned unsupported type: {type(data)}")

    raise TypeError(f"Unsupported input type: {type(source)}")


def write_text(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a path, a stream, or ``"-"`` for stdout.

    Binary streams receive UTF-8 encoded bytes.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
    >>> buffer = BytesIO()
    >>> write_text("# Hello", buffer)
    >>> buffer.getvalue()
    b'# Hello'

    """
    if isinstance(output, str) and output == "-":
        sys.stdout.write(content)
        return

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_text", "write_text"]

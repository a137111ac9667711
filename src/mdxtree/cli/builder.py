#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxtree/cli/builder.py
"""Argument parser construction and exit codes for the mdxtree CLI."""

from __future__ import annotations

import argparse

from mdxtree.constants import CONFIG_ENV_VAR
from mdxtree.exceptions import ConfigError, DocumentStructureError, ValidationError

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

# "check" reports an unstable round trip with the generic error code
EXIT_UNSTABLE = EXIT_ERROR

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_exit_code_for_exception(exception: BaseException) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : BaseException
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, DocumentStructureError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def _add_input_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument("input", nargs="?", default="-", help=f"{help_text} (default: stdin)")


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--out", default="-", help="Output file path (default: stdout)")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdxtree CLI.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``parse``, ``render`` and ``check`` subcommands

    """
    parser = argparse.ArgumentParser(
        prog="mdxtree",
        description="Convert between MDX markup and the editor document tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mdxtree parse article.mdx -o article.json\n"
            "  mdxtree render article.json\n"
            "  mdxtree check article.mdx\n"
        ),
    )

    parser.add_argument(
        "--config",
        help=f"Path to a configuration file (.toml, .yaml, .json or pyproject.toml). "
        f"Defaults to ${CONFIG_ENV_VAR}, then .mdxtree.* in the working directory.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace", action="store_true", help="Enable DEBUG logging with timestamps and module names"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    parse_cmd = subparsers.add_parser("parse", help="Convert MDX markup to editor JSON")
    _add_input_argument(parse_cmd, "MDX input file")
    _add_output_argument(parse_cmd)
    parse_cmd.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")

    render_cmd = subparsers.add_parser("render", help="Convert editor JSON to MDX markup")
    _add_input_argument(render_cmd, "Editor JSON input file")
    _add_output_argument(render_cmd)

    check_cmd = subparsers.add_parser("check", help="Verify that MDX re-parses to the same tree after rendering")
    _add_input_argument(check_cmd, "MDX input file")

    return parser

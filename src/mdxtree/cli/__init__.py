"""Command-line interface for the mdxtree converter.

Subcommands
-----------
``parse``
    Read MDX markup and write the editor JSON document.
``render``
    Read an editor JSON document and write MDX markup.
``check``
    Parse, render and re-parse MDX markup and report whether the two trees
    are equal. Exits with status 1 when they differ.

Examples
--------
Convert a file::

    $ mdxtree parse article.mdx -o article.json --indent 2

Render JSON from stdin::

    $ cat article.json | mdxtree render

Use a configuration file::

    $ mdxtree --config mdxtree.toml check article.mdx

The configuration file may also be given with the ``MDXTREE_CONFIG``
environment variable or discovered as ``.mdxtree.toml`` (or ``.yaml``,
``.yml``, ``.json``) or ``[tool.mdxtree]`` in ``pyproject.toml`` in the working
directory.

"""

import argparse
import logging
import os
import sys

from mdxtree.api import check_round_trip, json_to_mdx, mdx_to_json
from mdxtree.cli.builder import (
    EXIT_SUCCESS,
    EXIT_UNSTABLE,
    create_parser,
    get_exit_code_for_exception,
)
from mdxtree.cli.config import build_options, load_config_with_priority
from mdxtree.constants import CONFIG_ENV_VAR
from mdxtree.exceptions import MdxTreeError
from mdxtree.logging_utils import configure_logging
from mdxtree.options.mdx import MdxParserOptions, MdxRendererOptions
from mdxtree.utils.io_utils import read_text, write_text

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    ``--trace`` takes precedence over ``--log-level``.
    """
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _with_trailing_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def _run_parse(
    parsed_args: argparse.Namespace, parser_options: MdxParserOptions, renderer_options: MdxRendererOptions
) -> int:
    text = read_text(parsed_args.input)
    output = mdx_to_json(text, parser_options=parser_options, indent=parsed_args.indent)
    write_text(_with_trailing_newline(output), parsed_args.out)
    return EXIT_SUCCESS


def _run_render(
    parsed_args: argparse.Namespace, parser_options: MdxParserOptions, renderer_options: MdxRendererOptions
) -> int:
    json_text = read_text(parsed_args.input)
    output = json_to_mdx(json_text, parser_options=parser_options, renderer_options=renderer_options)
    write_text(_with_trailing_newline(output), parsed_args.out)
    return EXIT_SUCCESS


def _run_check(
    parsed_args: argparse.Namespace, parser_options: MdxParserOptions, renderer_options: MdxRendererOptions
) -> int:
    text = read_text(parsed_args.input)
    report = check_round_trip(text, parser_options=parser_options, renderer_options=renderer_options)
    block_count = len(report.first_tree.children)

    if report.stable:
        print(f"Round trip stable ({block_count} top-level blocks)")
        return EXIT_SUCCESS

    print(
        f"Round trip unstable: first difference at top-level block {report.first_difference} "
        f"({block_count} blocks before, {len(report.second_tree.children)} after)"
    )
    return EXIT_UNSTABLE


_COMMANDS = {
    "parse": _run_parse,
    "render": _run_render,
    "check": _run_check,
}


def main(args: list[str] | None = None) -> int:
    """Execute the mdxtree command line.

    Parameters
    ----------
    args : list of str or None, default None
        Arguments to parse; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = load_config_with_priority(
            explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR)
        )
        parser_options, renderer_options = build_options(config)
        return _COMMANDS[parsed_args.command](parsed_args, parser_options, renderer_options)
    except (MdxTreeError, OSError, UnicodeDecodeError) as e:
        logger.debug("Command %s failed", parsed_args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())

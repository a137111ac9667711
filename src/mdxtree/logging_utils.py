"""Centralized logging utilities for mdxtree entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mdxtree.constants import (
    CONSOLE_LOG_FORMAT,
    PACKAGE_LOGGER_NAME,
    THIRD_PARTY_LOG_LEVEL,
    TRACE_DATE_FORMAT,
    TRACE_LOG_FORMAT,
)


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return resolved


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure logging for the command-line interface.

    The ``mdxtree`` package logger receives the requested level. The root
    logger, and with it every third-party logger, stays at WARNING or above,
    so ``--log-level DEBUG`` only surfaces mdxtree's own parse and render
    events. Trace mode forces the package logger to DEBUG and prefixes each
    record with a timestamp, the ``mdxtree.*`` logger name and line number.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Path to a log file that receives the same records as stderr.
    trace_mode : bool, default False
        Emit DEBUG records with timestamps and module locations.

    Returns
    -------
    logging.Logger
        The configured ``mdxtree`` package logger.

    Raises
    ------
    ValueError
        If ``log_level`` is a string that names no logging level.

    """
    package_level = logging.DEBUG if trace_mode else _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(package_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(max(package_level, THIRD_PARTY_LOG_LEVEL))
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(package_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(package_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger

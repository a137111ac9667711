#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest

from mdxtree.logging_utils import configure_logging


def _installed_handlers():
    root_logger = logging.getLogger()
    return [h for h in root_logger.handlers if type(h) in (logging.StreamHandler, logging.FileHandler)]


@pytest.mark.unit
class TestConfigureLogging:
    """Test configure_logging."""

    def test_returns_package_logger(self):
        """Test that the mdxtree logger is configured and returned."""
        package_logger = configure_logging("debug")
        assert package_logger is logging.getLogger("mdxtree")
        assert package_logger.level == logging.DEBUG

    def test_third_party_loggers_stay_quiet(self):
        """Test that the root level never drops below WARNING."""
        configure_logging(logging.DEBUG)
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("mdxtree.parsers.mdx").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("some.library").isEnabledFor(logging.INFO)

    def test_root_follows_stricter_levels(self):
        """Test that ERROR applies to the root logger too."""
        configure_logging("ERROR")
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_name(self):
        """Test that an unknown level name is rejected."""
        with pytest.raises(ValueError, match="verbose"):
            configure_logging("verbose")

    def test_console_handler_only(self):
        """Test that existing handlers are replaced by one console handler."""
        configure_logging(logging.WARNING)
        handlers = _installed_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_trace_mode(self):
        """Test that trace mode enables DEBUG with logger names and line numbers."""
        package_logger = configure_logging(logging.ERROR, trace_mode=True)
        assert package_logger.level == logging.DEBUG
        fmt = _installed_handlers()[0].formatter._fmt
        assert "%(name)s" in fmt
        assert "%(lineno)d" in fmt

    def test_plain_format(self):
        """Test the console format outside trace mode."""
        configure_logging(logging.INFO)
        assert _installed_handlers()[0].formatter._fmt == "%(levelname)s: %(message)s"

    def test_log_file(self, tmp_path):
        """Test that a file handler receives package records."""
        log_file = tmp_path / "run.log"
        configure_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("mdxtree.test").info("written")
        logging.getLogger("some.library").info("ignored")
        assert len(_installed_handlers()) == 2
        contents = log_file.read_text(encoding="utf-8")
        assert "written" in contents
        assert "ignored" not in contents

    def test_unwritable_log_file(self, tmp_path):
        """Test that a bad log path falls back to console only."""
        configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "run.log"))
        assert len(_installed_handlers()) == 1

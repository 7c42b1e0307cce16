"""Tests for sidediff/logging_config.py."""

from __future__ import annotations

import logging

import pytest

from sidediff.logging_config import LOGGER_NAME, get_logger, resolve_level, setup_logging


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestResolveLevel:
    """Tests for resolve_level()."""

    def test_explicit_name(self):
        """Level names are case-insensitive."""
        assert resolve_level("debug") == logging.DEBUG

    def test_number(self):
        """Numeric levels pass through."""
        assert resolve_level(logging.INFO) == logging.INFO

    def test_environment(self, monkeypatch):
        """LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_level() == logging.ERROR

    def test_default(self, monkeypatch):
        """Without LOG_LEVEL the default is WARNING."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_level() == logging.WARNING

    def test_unknown_name(self):
        """Unknown names fall back to WARNING."""
        assert resolve_level("chatty") == logging.WARNING


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_single_handler(self, package_logger):
        """Repeated setup does not stack handlers."""
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_module_loggers_propagate_to_package(self, package_logger, caplog):
        """Records from module loggers reach the package logger's level."""
        setup_logging("DEBUG")
        package_logger.addHandler(caplog.handler)
        get_logger("sidediff.render.delta").debug("hello from delta")
        assert "hello from delta" in caplog.text

"""Tests for logging configuration."""

import json
import logging

import pytest

from node_lifecycle.logging_config import (
    ENV_LOG_FORMAT,
    StructuredFormatter,
    logger,
    set_level,
    set_structured,
    setup_logging,
)


@pytest.fixture
def fresh_logger_name(request):
    """A logger name not yet configured; handlers are removed afterwards."""
    name = f"node_lifecycle.test.{request.node.name}"
    yield name
    logging.getLogger(name).handlers.clear()


class TestSetupLogging:
    """Test setup_logging and set_level."""

    def test_single_handler(self):
        """Test that repeated setup does not add duplicate handlers."""
        again = setup_logging("DEBUG")
        assert again is logger
        assert len(logger.handlers) == 1

    def test_set_level(self):
        original = logger.level
        try:
            set_level("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(original)

    def test_plain_by_default(self, fresh_logger_name, monkeypatch):
        monkeypatch.delenv(ENV_LOG_FORMAT, raising=False)
        configured = setup_logging(name=fresh_logger_name)
        assert not isinstance(configured.handlers[0].formatter, StructuredFormatter)

    def test_json_from_environment(self, fresh_logger_name, monkeypatch):
        monkeypatch.setenv(ENV_LOG_FORMAT, "JSON")
        configured = setup_logging(name=fresh_logger_name)
        assert isinstance(configured.handlers[0].formatter, StructuredFormatter)

    def test_explicit_argument_overrides_environment(self, fresh_logger_name, monkeypatch):
        monkeypatch.setenv(ENV_LOG_FORMAT, "json")
        configured = setup_logging(structured=False, name=fresh_logger_name)
        assert not isinstance(configured.handlers[0].formatter, StructuredFormatter)

    def test_set_structured_switches_formatter(self):
        try:
            set_structured(True)
            assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        finally:
            set_structured(False)
        assert not isinstance(logger.handlers[0].formatter, StructuredFormatter)


class TestStructuredFormatter:
    """Test JSON log formatting."""

    def test_format(self):
        record = logging.LogRecord("node_lifecycle", logging.WARNING, __file__, 1, "feed %s down", ("wg",), None)
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "node_lifecycle"
        assert entry["message"] == "feed wg down"
        assert entry["timestamp"].endswith("+00:00")

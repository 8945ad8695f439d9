"""
Unit tests for the logging module.

Tests for formatters and logger setup.
"""

import io
import json
import logging

import pytest

from amplitude_event.configs.settings import Settings
from amplitude_event.monitoring.logging import (
    LOGGER_NAME,
    JsonFormatter,
    LoggingOptions,
    TextFormatter,
    setup_logger,
)
from amplitude_event.schemas.event import Event


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        name="amplitude_event.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_basic_fields(self):
        """Output is a JSON object with level, logger and message."""
        data = json.loads(JsonFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "amplitude_event.test"
        assert data["msg"] == "hello"
        assert "ts" in data

    def test_extras(self):
        """Field name and payload extras are carried over."""
        data = json.loads(JsonFormatter().format(_record(field="userId", payload={"a": 1})))
        assert data["field"] == "userId"
        assert data["payload"] == {"a": 1}


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_plain(self):
        """Level, logger and message on one line."""
        assert TextFormatter().format(_record()) == "INFO amplitude_event.test hello"

    def test_field_context(self):
        """The field extra is shown in brackets."""
        line = TextFormatter().format(_record(field="my prop"))
        assert line == "INFO amplitude_event.test [field=my prop] hello"


class TestLoggingOptions:
    """Tests for LoggingOptions."""

    def test_defaults(self):
        """INFO text logging by default."""
        options = LoggingOptions()
        assert options.level == "INFO"
        assert options.json_logs is False

    def test_from_settings(self):
        """Options mirror LOG_LEVEL and LOG_JSON."""
        settings = Settings(_env_file=None, LOG_LEVEL="DEBUG", LOG_JSON=True)
        options = LoggingOptions.from_settings(settings)
        assert options == LoggingOptions(level="DEBUG", json_logs=True)

    def test_from_settings_env_default(self):
        """Outside development JSON logs are the default."""
        settings = Settings(_env_file=None, ENV="production", LOG_JSON=None)
        assert LoggingOptions.from_settings(settings).json_logs is True

        settings = Settings(_env_file=None, ENV="development", LOG_JSON=None)
        assert LoggingOptions.from_settings(settings).json_logs is False


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_single_handler(self, package_logger):
        """Repeated setup does not stack handlers."""
        setup_logger(LoggingOptions())
        logger = setup_logger(LoggingOptions())
        assert logger is package_logger
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_json_output(self, package_logger):
        """JSON option selects the JSON formatter."""
        stream = io.StringIO()
        logger = setup_logger(LoggingOptions(json_logs=True), stream=stream)
        logger.info("ready")
        assert json.loads(stream.getvalue())["msg"] == "ready"

    def test_event_debug_logging(self, package_logger):
        """Custom properties are logged at DEBUG with their name."""
        stream = io.StringIO()
        setup_logger(LoggingOptions(level="DEBUG"), stream=stream)
        Event({"my prop": 1})
        assert "[field=my prop] Setting custom property 'my prop'" in stream.getvalue()

    def test_level_filters(self, package_logger):
        """DEBUG records are dropped at INFO level."""
        stream = io.StringIO()
        setup_logger(LoggingOptions(level="INFO"), stream=stream)
        Event({"my prop": 1})
        assert "custom property" not in stream.getvalue()

"""Logging setup for amplitude_event.

Features:
- console handler
- JSON logs optional (easy ingestion)
- structured extras (field name, payload) carried into the output

The library never installs handlers on import; applications call
setup_logger() once if they want the package's records formatted.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from amplitude_event.configs.settings import Settings

LOGGER_NAME = "amplitude_event"

# ---------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------


class JsonFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Render one record as a JSON object."""
        base = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "field"):
            base["field"] = record.field

        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)

        # allow structured payload
        payload = getattr(record, "payload", None)
        if isinstance(payload, dict):
            base["payload"] = payload

        return json.dumps(base, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Format log records as human-readable text."""

    def format(self, record: logging.LogRecord) -> str:
        """Render one record as a single line."""
        parts = [record.levelname, record.name]

        field = getattr(record, "field", None)
        if field is not None:
            parts.append(f"[field={field}]")

        parts.append(record.getMessage())
        s = " ".join(parts)

        if record.exc_info:
            s += "\n" + self.formatException(record.exc_info)

        return s


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingOptions:
    """Configure logging behavior."""

    level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "LoggingOptions":
        """Build options from LOG_LEVEL, LOG_JSON and ENV settings."""
        if settings is None:
            from amplitude_event.configs.settings import get_settings

            settings = get_settings()
        return cls(level=settings.LOG_LEVEL, json_logs=settings.json_logs)


def setup_logger(
    options: LoggingOptions | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger. Safe to call repeatedly."""
    options = options or LoggingOptions.from_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, options.level.upper(), logging.INFO))
    logger.propagate = False

    # Clear old handlers if re-configuring
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = JsonFormatter() if options.json_logs else TextFormatter()

    ch = logging.StreamHandler(stream or sys.stdout)
    ch.setLevel(logger.level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    return logger

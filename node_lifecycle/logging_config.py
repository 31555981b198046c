"""Logging configuration for node-lifecycle.

Log records go to stderr so the status report on stdout stays clean. Set
NODE_LIFECYCLE_LOG_FORMAT=json (or pass --log-json) for one JSON object
per line, e.g. when a CI system collects the logs.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

LOGGER_NAME = "node_lifecycle"
ENV_LOG_FORMAT = "NODE_LIFECYCLE_LOG_FORMAT"

PLAIN_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def _make_formatter(structured: bool) -> logging.Formatter:
    if structured:
        return StructuredFormatter()
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)


def setup_logging(
    level: str = "WARNING", structured: Optional[bool] = None, name: str = LOGGER_NAME
) -> logging.Logger:
    """
    Set up a logger with a single stderr handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Emit JSON lines; None reads NODE_LIFECYCLE_LOG_FORMAT
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    if structured is None:
        structured = os.getenv(ENV_LOG_FORMAT, "").strip().lower() == "json"

    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_make_formatter(structured))
    logger.addHandler(handler)

    return logger


def set_level(level: str) -> None:
    """Change the level of the package logger after setup."""
    logger.setLevel(getattr(logging, level.upper()))


def set_structured(structured: bool) -> None:
    """Switch the package logger between plain and JSON output."""
    for handler in logger.handlers:
        handler.setFormatter(_make_formatter(structured))


# Global logger instance
logger = setup_logging()

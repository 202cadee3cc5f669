"""Logging setup for command-line execution."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

STDERR_HANDLER_NAME = "terminal_weather.stderr"
CONTEXT_FIELDS = ("query", "source", "category", "status_code")


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record.

    Lookup context passed through ``extra=`` (place query, location source,
    failure category, HTTP status) is copied into the object when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                event[field] = value
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, default=str, ensure_ascii=False)


def _has_stderr_handler(logger: logging.Logger) -> bool:
    return any(handler.get_name() == STDERR_HANDLER_NAME for handler in logger.handlers)


def setup_logger(
    name: str = "terminal_weather", level: int | str = logging.WARNING
) -> logging.Logger:
    """Attach the JSON stderr handler once; handlers added by others are left alone."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if _has_stderr_handler(logger):
        return logger

    handler = logging.StreamHandler()
    handler.set_name(STDERR_HANDLER_NAME)
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger

"""Logging setup for command-line execution."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import sanitize_for_logging, sanitize_text

# Extra attributes callers attach via `extra=` that are copied into each event.
CONTEXT_FIELDS = ("city", "days", "mode", "endpoint", "error_type")


class JsonConsoleFormatter(logging.Formatter):
    """JSON formatter for wth console logs.

    Lookup context passed through `extra=` (city, forecast days, report
    mode, endpoint, error type) lands in a `context` object so a failed
    lookup can be traced without parsing the message text.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        context = {
            field: getattr(record, field)
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        }
        if context:
            event["context"] = sanitize_for_logging(context)
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def setup_logger(name: str = "wth", level: int = logging.WARNING) -> logging.Logger:
    """Create and configure a process-wide logger.

    Handlers write to stderr so log records never interleave with the
    report printed on stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger

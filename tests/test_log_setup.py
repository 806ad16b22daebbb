"""Tests for the JSON console log formatter."""

from __future__ import annotations

import json
import logging

from wth.log_setup import JsonConsoleFormatter, setup_logger


def _record(message: str, *args: object, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="wth",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_lookup_context() -> None:
    record = _record(
        "Forecast fetch failed: %s",
        "connection refused",
        city="Paris",
        days=3,
        mode="forecast",
        error_type="NetworkError",
    )

    event = json.loads(JsonConsoleFormatter().format(record))

    assert event["level"] == "WARNING"
    assert event["logger"] == "wth"
    assert event["message"] == "Forecast fetch failed: connection refused"
    assert event["context"] == {
        "city": "Paris",
        "days": 3,
        "mode": "forecast",
        "error_type": "NetworkError",
    }


def test_formatter_omits_empty_context() -> None:
    event = json.loads(JsonConsoleFormatter().format(_record("plain message")))
    assert "context" not in event


def test_formatter_redacts_key_in_message_and_endpoint() -> None:
    url = "https://api.openweathermap.org/data/2.5/weather?q=Paris&appid=abc123"
    record = _record("GET %s", url, endpoint=url)

    line = JsonConsoleFormatter().format(record)

    assert "abc123" not in line
    assert json.loads(line)["context"]["endpoint"].endswith("appid=[REDACTED]")


def test_setup_logger_does_not_duplicate_handlers() -> None:
    first = setup_logger("wth.test_log_setup")
    second = setup_logger("wth.test_log_setup", level=logging.DEBUG)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
    assert second.propagate is False

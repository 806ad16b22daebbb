"""Tests for secret redaction in log and error text."""

from __future__ import annotations

from wth.redaction import REDACTED, sanitize_for_logging, sanitize_text


def test_sanitize_text_strips_appid_query_param() -> None:
    url = "https://api.openweathermap.org/data/2.5/weather?q=Paris&appid=abc123&units=metric"
    sanitized = sanitize_text(url)
    assert "abc123" not in sanitized
    assert f"appid={REDACTED}&units=metric" in sanitized
    assert "q=Paris" in sanitized


def test_sanitize_text_strips_key_value_pairs() -> None:
    assert "abc123" not in sanitize_text("export WEATHER_API_KEY=abc123")
    assert "s3cr3t" not in sanitize_text("token: s3cr3t")


def test_sanitize_for_logging_nested() -> None:
    payload = {"params": {"q": "Paris", "appid": "abc123"}, "urls": ["x?appid=abc123"]}
    sanitized = sanitize_for_logging(payload)
    assert sanitized["params"] == {"q": "Paris", "appid": REDACTED}
    assert sanitized["urls"] == [f"x?appid={REDACTED}"]

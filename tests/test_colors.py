"""Tests for threshold-based value coloring."""

from __future__ import annotations

import pytest

from wth.ui.colors import (
    PALETTE,
    THUNDERSTORM_GLYPH,
    classify_condition,
    classify_precipitation,
    classify_temperature,
    classify_wind,
    format_condition,
    format_precipitation,
    format_temperature,
    format_wind,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (30.1, "hot"),
        (30, "moderate"),
        (7, "moderate"),
        (6.9, "cold"),
        (-4.0, "cold"),
        (18.5, "moderate"),
        ("31.0", "hot"),
        ("7.0", "moderate"),
    ],
)
def test_classify_temperature_thresholds(value: float | str, expected: str) -> None:
    assert classify_temperature(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "calm"), (9.9, "calm"), (10, "plain"), ("10.0", "plain"), (22.4, "plain")],
)
def test_classify_wind_thresholds(value: float | str, expected: str) -> None:
    assert classify_wind(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "none"),
        ("0.0", "none"),
        (0.5, "plain"),
        (1, "plain"),
        (1.1, "moderate"),
        (3, "moderate"),
        (5, "moderate"),
        (6, "heavy"),
    ],
)
def test_classify_precipitation_thresholds(value: float | str, expected: str) -> None:
    assert classify_precipitation(value) == expected


def test_classify_condition_is_case_insensitive() -> None:
    assert classify_condition("Clear Sky") == "clear"
    assert classify_condition("THUNDERSTORM with heavy rain") == "thunderstorm"
    assert classify_condition("overcast clouds") == "plain"


def test_format_temperature_uses_one_decimal_and_style() -> None:
    hot = format_temperature("31")
    assert hot.plain == "31.0°C"
    assert hot.style == PALETTE["hot"]
    assert format_temperature(6.5).style == PALETTE["cold"]
    assert format_temperature(30).style == PALETTE["moderate"]


def test_format_wind_only_colors_calm_values() -> None:
    calm = format_wind(3.24)
    assert calm.plain == "3.2 m/s"
    assert calm.style == PALETTE["calm"]
    windy = format_wind("12.0")
    assert windy.plain == "12.0 m/s"
    assert windy.style == ""


def test_format_precipitation_styles() -> None:
    assert format_precipitation(0).style == PALETTE["none"]
    assert format_precipitation(3).style == PALETTE["moderate_rain"]
    assert format_precipitation(6).style == PALETTE["heavy"]
    light = format_precipitation(0.5)
    assert light.plain == "0.5 mm"
    assert light.style == ""


def test_format_condition_thunderstorm_gets_glyph() -> None:
    storm = format_condition("Thunderstorm with rain")
    assert storm.plain == f"{THUNDERSTORM_GLYPH}thunderstorm with rain"
    assert storm.style == PALETTE["thunderstorm"]
    assert format_condition("clear sky").style == PALETTE["clear"]
    assert format_condition("Mist").plain == "mist"


def test_non_numeric_value_raises() -> None:
    with pytest.raises(ValueError):
        format_temperature("warm")


def test_palette_is_read_only() -> None:
    with pytest.raises(TypeError):
        PALETTE["hot"] = "yellow"  # type: ignore[index]


def test_formatters_round_ties_away_from_zero() -> None:
    assert format_temperature(12.25).plain == "12.3°C"
    assert format_wind(0.25).plain == "0.3 m/s"
    assert format_precipitation("0.25").plain == "0.3 mm"
    assert format_precipitation(0.25).style == ""

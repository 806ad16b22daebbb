"""Threshold-based coloring for weather values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal

from rich.text import Text

from ..numbers import round_one_decimal

TemperatureClass = Literal["hot", "cold", "moderate"]
WindClass = Literal["calm", "plain"]
PrecipitationClass = Literal["heavy", "moderate", "none", "plain"]
ConditionClass = Literal["clear", "thunderstorm", "plain"]

Number = float | int | str

HOT_ABOVE = 30.0
COLD_BELOW = 7.0
CALM_BELOW = 10.0
HEAVY_RAIN_ABOVE = 5.0
MODERATE_RAIN_ABOVE = 1.0
THUNDERSTORM_GLYPH = "⚡ "

PALETTE: MappingProxyType[str, str] = MappingProxyType(
    {
        "hot": "red",
        "cold": "blue",
        "moderate": "green",
        "calm": "green",
        "heavy": "red",
        "moderate_rain": "blue",
        "none": "green",
        "clear": "green",
        "thunderstorm": "magenta",
        "heading": "bold",
        "plain": "",
    }
)


def classify_temperature(value: Number) -> TemperatureClass:
    temp = float(value)
    if temp > HOT_ABOVE:
        return "hot"
    if temp < COLD_BELOW:
        return "cold"
    return "moderate"


def classify_wind(value: Number) -> WindClass:
    return "calm" if float(value) < CALM_BELOW else "plain"


def classify_precipitation(value: Number) -> PrecipitationClass:
    rain = float(value)
    if rain > HEAVY_RAIN_ABOVE:
        return "heavy"
    if rain > MODERATE_RAIN_ABOVE:
        return "moderate"
    if rain == 0:
        return "none"
    return "plain"


def classify_condition(description: str) -> ConditionClass:
    lowered = description.lower()
    if "clear" in lowered:
        return "clear"
    if "thunderstorm" in lowered:
        return "thunderstorm"
    return "plain"


def format_temperature(value: Number) -> Text:
    temp = float(value)
    return Text(f"{round_one_decimal(temp):.1f}°C", style=PALETTE[classify_temperature(temp)])


def format_wind(value: Number) -> Text:
    wind = float(value)
    return Text(f"{round_one_decimal(wind):.1f} m/s", style=PALETTE[classify_wind(wind)])


def format_precipitation(value: Number) -> Text:
    rain = float(value)
    category = classify_precipitation(rain)
    # "moderate" is shared with temperature but rain uses a different color.
    style_key = "moderate_rain" if category == "moderate" else category
    return Text(f"{round_one_decimal(rain):.1f} mm", style=PALETTE[style_key])


def format_condition(description: str) -> Text:
    lowered = description.lower()
    category = classify_condition(lowered)
    if category == "thunderstorm":
        return Text(f"{THUNDERSTORM_GLYPH}{lowered}", style=PALETTE[category])
    return Text(lowered, style=PALETTE[category])

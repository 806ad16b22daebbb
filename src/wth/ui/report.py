"""Render current-weather and forecast reports to a rich console."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from ..weather.models import DailyReport, Forecast, WeatherSnapshot
from .colors import (
    PALETTE,
    format_condition,
    format_precipitation,
    format_temperature,
    format_wind,
)

RULE = "------------------------------------------------------"


def _place(name: str, country: str | None) -> str:
    return f"{name}, {country}" if country else name


def render_current(console: Console, snapshot: WeatherSnapshot) -> None:
    place = _place(snapshot.location_name, snapshot.country)
    console.print(Text(f"📍 Current Weather in {place}"))
    console.print(RULE)
    console.print()
    console.print(Text.assemble("🌡️ Temperature: ", format_temperature(snapshot.temperature)))
    console.print(Text.assemble("💨 Wind: ", format_wind(snapshot.wind_speed)))
    console.print(Text.assemble("🌧️ Rain: ", format_precipitation(snapshot.precipitation)))
    console.print(Text.assemble("☁️ Condition: ", format_condition(snapshot.condition)))


def render_day(console: Console, report: DailyReport) -> None:
    """Print one day block followed by a blank separator line."""
    console.print(Text.assemble((report.weekday, PALETTE["heading"]), f" — {report.date}"))
    console.print(
        Text.assemble(
            "🌡️ Min Temp: ",
            format_temperature(report.min_temperature),
            " | Max Temp: ",
            format_temperature(report.max_temperature),
            " | Avg Temp: ",
            format_temperature(report.mean_temperature),
        )
    )
    console.print(
        Text.assemble(
            "💨 Wind: ",
            format_wind(report.mean_wind_speed),
            " | 🌧️ Rain: ",
            format_precipitation(report.total_precipitation),
            " | ☁️ Condition: ",
            format_condition(report.condition),
        )
    )
    console.print()


def render_forecast(
    console: Console, forecast: Forecast, reports: Sequence[DailyReport]
) -> None:
    console.print(Text(f"📅 Forecast for {_place(forecast.city, forecast.country)}"))
    console.print(RULE)
    console.print()
    for report in reports:
        render_day(console, report)

"""Terminal presentation helpers."""

from .colors import (
    PALETTE,
    classify_condition,
    classify_precipitation,
    classify_temperature,
    classify_wind,
    format_condition,
    format_precipitation,
    format_temperature,
    format_wind,
)
from .report import render_current, render_forecast

__all__ = [
    "PALETTE",
    "classify_condition",
    "classify_precipitation",
    "classify_temperature",
    "classify_wind",
    "format_condition",
    "format_precipitation",
    "format_temperature",
    "format_wind",
    "render_current",
    "render_forecast",
]

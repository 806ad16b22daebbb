"""Weather provider integration and forecast aggregation."""

from .aggregation import build_daily_reports, group_by_day, representative_condition
from .base import WeatherProvider
from .fetcher import JsonFetcher
from .location import resolve_city
from .models import DailyReport, DayAggregate, Forecast, ForecastPoint, WeatherSnapshot
from .openweathermap import OpenWeatherMapProvider

__all__ = [
    "DailyReport",
    "DayAggregate",
    "Forecast",
    "ForecastPoint",
    "JsonFetcher",
    "OpenWeatherMapProvider",
    "WeatherProvider",
    "WeatherSnapshot",
    "build_daily_reports",
    "group_by_day",
    "representative_condition",
    "resolve_city",
]

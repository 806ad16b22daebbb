"""OpenWeatherMap (api.openweathermap.org) weather provider implementation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from ..config import Settings
from ..exceptions import ParseError, ProviderError
from ..numbers import round_one_decimal
from .base import WeatherProvider
from .fetcher import JsonFetcher
from .models import Forecast, ForecastPoint, WeatherSnapshot

DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


class OpenWeatherMapProvider(WeatherProvider):
    """Fetches current conditions and 5-day/3-hour forecasts."""

    provider_name = "openweathermap"

    def __init__(self, settings: Settings, fetcher: JsonFetcher, logger: logging.Logger) -> None:
        self.settings = settings
        self.fetcher = fetcher
        self.logger = logger

    def _params(self, city: str) -> dict[str, str]:
        return {"q": city, "appid": self.settings.api_key, "units": self.settings.units}

    async def fetch_current(self, city: str) -> WeatherSnapshot:
        payload = await self.fetcher.fetch_json(
            self.settings.weather_endpoint, params=self._params(city)
        )
        # The current-weather endpoint reports cod as a number.
        if not isinstance(payload, dict) or payload.get("cod") != 200:
            raise self._provider_error(payload)
        return self._normalize_current(payload)

    async def fetch_forecast(self, city: str) -> Forecast:
        payload = await self.fetcher.fetch_json(
            self.settings.forecast_endpoint, params=self._params(city)
        )
        # The forecast endpoint reports cod as a string.
        if not isinstance(payload, dict) or payload.get("cod") != "200":
            raise self._provider_error(payload)
        return self._normalize_forecast(payload)

    def _provider_error(self, payload: Any) -> ProviderError:
        if isinstance(payload, dict):
            code = payload.get("cod")
            message = payload.get("message")
        else:
            code = None
            message = None
        if not message:
            message = f"unexpected response (cod={code!r})"
        return ProviderError(str(message), code=code)

    def _normalize_current(self, payload: dict[str, Any]) -> WeatherSnapshot:
        try:
            return WeatherSnapshot(
                location_name=payload["name"],
                country=self._country(payload.get("sys")),
                temperature=round_one_decimal(float(payload["main"]["temp"])),
                wind_speed=round_one_decimal(float(payload["wind"]["speed"])),
                precipitation=self._rain(payload, "1h"),
                condition=payload["weather"][0]["description"],
            )
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise ParseError(f"Current weather payload has unexpected shape: {exc!r}") from exc

    def _normalize_forecast(self, payload: dict[str, Any]) -> Forecast:
        try:
            city = payload["city"]
            points = [self._normalize_point(entry) for entry in payload["list"]]
            return Forecast(city=city["name"], country=self._country(city), points=points)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise ParseError(f"Forecast payload has unexpected shape: {exc!r}") from exc

    def _normalize_point(self, entry: dict[str, Any]) -> ForecastPoint:
        return ForecastPoint(
            timestamp=datetime.strptime(entry["dt_txt"], DT_TXT_FORMAT),
            temperature=float(entry["main"]["temp"]),
            wind_speed=float(entry["wind"]["speed"]),
            precipitation=self._rain(entry, "3h"),
            condition=entry["weather"][0]["description"],
        )

    @staticmethod
    def _rain(payload: dict[str, Any], window: str) -> float:
        rain = payload.get("rain")
        if isinstance(rain, dict) and rain.get(window):
            return float(rain[window])
        return 0.0

    @staticmethod
    def _country(section: Any) -> str | None:
        if isinstance(section, dict) and isinstance(section.get("country"), str):
            return section["country"]
        return None

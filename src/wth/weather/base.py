"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import Forecast, WeatherSnapshot


class WeatherProvider(ABC):
    """Base contract for weather providers used by the CLI reporters."""

    @abstractmethod
    async def fetch_current(self, city: str) -> WeatherSnapshot:
        """Fetch and normalize current conditions for a city."""

    @abstractmethod
    async def fetch_forecast(self, city: str) -> Forecast:
        """Fetch and normalize the multi-day forecast series for a city."""

"""Typed models for normalized weather payloads and daily summaries."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WeatherSnapshot(BaseModel):
    """Current conditions for one city."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    country: str | None = None
    temperature: float
    wind_speed: float
    precipitation: float = 0.0
    condition: str


class ForecastPoint(BaseModel):
    """One entry of the provider's 3-hour forecast series."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float
    wind_speed: float
    precipitation: float = 0.0
    condition: str

    @property
    def date_key(self) -> str:
        return self.timestamp.date().isoformat()


class Forecast(BaseModel):
    """Forecast series for one city, in provider order."""

    model_config = ConfigDict(frozen=True)

    city: str
    country: str | None = None
    points: list[ForecastPoint] = Field(default_factory=list)


class DayAggregate(BaseModel):
    """All forecast samples sharing one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: str
    temperatures: list[float] = Field(default_factory=list)
    wind_speeds: list[float] = Field(default_factory=list)
    precipitations: list[float] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)

    @property
    def sample_count(self) -> int:
        return len(self.temperatures)


class DailyReport(BaseModel):
    """Summary statistics for one forecast day."""

    model_config = ConfigDict(frozen=True)

    date: str
    weekday: str
    min_temperature: float
    max_temperature: float
    mean_temperature: float
    mean_wind_speed: float
    total_precipitation: float
    condition: str

"""Typed settings loader for the wth weather CLI."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError, MissingCredentialError

MISSING_API_KEY_MESSAGE = "WEATHER_API_KEY environment variable is not set."


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    weather_api_key: str | None = Field(default=None, alias="WEATHER_API_KEY", repr=False)
    api_base_url: AnyUrl = Field(
        default=AnyUrl("https://api.openweathermap.org/data/2.5"),
        alias="WTH_API_BASE_URL",
    )
    geo_url: AnyUrl = Field(default=AnyUrl("https://ipwhois.app/json/"), alias="WTH_GEO_URL")
    fallback_city: str = Field(default="London", alias="WTH_FALLBACK_CITY")
    units: ClassVar[str] = "metric"
    timeout_seconds: float = Field(default=15.0, alias="WTH_TIMEOUT_SECONDS")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", alias="WTH_LOG_LEVEL"
    )

    @field_validator("weather_api_key", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat blank env-string values as an unset key."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        if self.timeout_seconds <= 0:
            raise ValueError("WTH_TIMEOUT_SECONDS must be > 0.")
        if not self.fallback_city.strip():
            raise ValueError("WTH_FALLBACK_CITY must not be empty.")
        return self

    @property
    def api_key(self) -> str:
        if self.weather_api_key is None:
            raise MissingCredentialError(MISSING_API_KEY_MESSAGE)
        return self.weather_api_key

    @property
    def weather_endpoint(self) -> str:
        return f"{str(self.api_base_url).rstrip('/')}/weather"

    @property
    def forecast_endpoint(self) -> str:
        return f"{str(self.api_base_url).rstrip('/')}/forecast"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "api_base_url": str(self.api_base_url),
            "geo_url": str(self.geo_url),
            "fallback_city": self.fallback_city,
            "units": self.units,
            "timeout_seconds": self.timeout_seconds,
            "log_level": self.log_level,
            "api_key_present": self.weather_api_key is not None,
        }


def load_settings() -> Settings:
    """Load and validate settings.

    Raises MissingCredentialError before anything else touches the network
    when WEATHER_API_KEY is absent, and ConfigError for any other problem.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc

    if settings.weather_api_key is None:
        raise MissingCredentialError(MISSING_API_KEY_MESSAGE)
    return settings

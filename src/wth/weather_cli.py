"""wth CLI: print current weather or a multi-day forecast for a city."""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from .config import Settings, load_settings
from .exceptions import ConfigError, FetchError, MissingCredentialError, ProviderError
from .log_setup import setup_logger
from .redaction import sanitize_text
from .ui.report import render_current, render_forecast
from .weather.aggregation import build_daily_reports
from .weather.fetcher import JsonFetcher
from .weather.location import resolve_city
from .weather.openweathermap import OpenWeatherMapProvider

FAILURE_PREFIX = "❌"
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse `wth [city] [days]`; extra tokens are ignored."""
    parser = argparse.ArgumentParser(
        prog="wth",
        description="Show current weather or a daily forecast.",
        add_help=False,
    )
    parser.add_argument("city", nargs="?", default=None)
    parser.add_argument("days", nargs="?", default=None)
    args, _ = parser.parse_known_args(argv)
    return args


def parse_days(raw: str | None) -> int | None:
    """Return a positive day count from the leading digits of ``raw``, else None.

    Parsing follows parseInt: "3abc" gives 3. Zero and negative counts select
    current-weather mode rather than slicing days off the end of the forecast.
    """
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    days = int(match.group(1))
    return days if days > 0 else None


def _build_fetcher(settings: Settings, logger: logging.Logger) -> JsonFetcher:
    return JsonFetcher(timeout_seconds=settings.timeout_seconds, logger=logger)


async def report_current(
    provider: OpenWeatherMapProvider,
    city: str,
    *,
    console: Console,
    err_console: Console,
    logger: logging.Logger,
) -> None:
    try:
        snapshot = await provider.fetch_current(city)
    except ProviderError as exc:
        logger.warning(
            "Provider rejected current weather request: %s",
            exc,
            extra={"city": city, "mode": "current", "error_type": type(exc).__name__},
        )
        console.print(Text(f"{FAILURE_PREFIX} Error: {exc}"))
        return
    except FetchError as exc:
        logger.warning(
            "Current weather fetch failed: %s",
            exc,
            extra={"city": city, "mode": "current", "error_type": type(exc).__name__},
        )
        reason = sanitize_text(str(exc))
        err_console.print(Text(f"{FAILURE_PREFIX} Failed to fetch current weather data: {reason}"))
        return
    render_current(console, snapshot)


async def report_forecast(
    provider: OpenWeatherMapProvider,
    city: str,
    days: int,
    *,
    console: Console,
    err_console: Console,
    logger: logging.Logger,
) -> None:
    try:
        forecast = await provider.fetch_forecast(city)
    except ProviderError as exc:
        logger.warning(
            "Provider rejected forecast request: %s",
            exc,
            extra={
                "city": city,
                "days": days,
                "mode": "forecast",
                "error_type": type(exc).__name__,
            },
        )
        console.print(Text(f"{FAILURE_PREFIX} Error: {exc}"))
        return
    except FetchError as exc:
        logger.warning(
            "Forecast fetch failed: %s",
            exc,
            extra={
                "city": city,
                "days": days,
                "mode": "forecast",
                "error_type": type(exc).__name__,
            },
        )
        reason = sanitize_text(str(exc))
        err_console.print(Text(f"{FAILURE_PREFIX} Failed to fetch forecast data: {reason}"))
        return
    render_forecast(console, forecast, build_daily_reports(forecast.points, days))


async def _run(
    city_arg: str | None,
    days: int | None,
    *,
    settings: Settings,
    console: Console,
    err_console: Console,
    logger: logging.Logger,
) -> None:
    async with _build_fetcher(settings, logger) as fetcher:
        city = await resolve_city(city_arg, fetcher=fetcher, settings=settings, logger=logger)
        provider = OpenWeatherMapProvider(settings=settings, fetcher=fetcher, logger=logger)
        if days is None:
            await report_current(
                provider, city, console=console, err_console=err_console, logger=logger
            )
        else:
            await report_forecast(
                provider, city, days, console=console, err_console=err_console, logger=logger
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wth lookup flow."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    try:
        settings = load_settings()
    except MissingCredentialError as exc:
        err_console.print(Text(f"{FAILURE_PREFIX} {exc}"))
        return 1
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    logger.setLevel(settings.log_level_number)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    asyncio.run(
        _run(
            args.city,
            parse_days(args.days),
            settings=settings,
            console=console,
            err_console=err_console,
            logger=logger,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Resolve the city to report on, falling back to a fixed default."""

from __future__ import annotations

import logging

from ..config import Settings
from ..exceptions import FetchError
from .fetcher import JsonFetcher


async def resolve_city(
    explicit: str | None,
    *,
    fetcher: JsonFetcher,
    settings: Settings,
    logger: logging.Logger,
) -> str:
    """Return ``explicit`` if given, else the IP-geolocated city.

    Geolocation failures of any kind are logged and replaced by the
    configured fallback city; they never reach the caller.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    try:
        geo = await fetcher.fetch_json(str(settings.geo_url))
    except FetchError as exc:
        logger.info(
            "Geolocation lookup failed (%s); using fallback city",
            exc,
            extra={"city": settings.fallback_city, "error_type": type(exc).__name__},
        )
        return settings.fallback_city

    city = geo.get("city") if isinstance(geo, dict) else None
    if isinstance(city, str) and city.strip():
        logger.info("Geolocated city", extra={"city": city.strip()})
        return city.strip()

    logger.info(
        "Geolocation response had no city; using fallback city",
        extra={"city": settings.fallback_city},
    )
    return settings.fallback_city

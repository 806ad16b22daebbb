"""Single-shot async JSON fetcher over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..exceptions import NetworkError, ParseError
from ..redaction import sanitize_for_logging, sanitize_text


class JsonFetcher:
    """Issues one GET per call and parses the buffered body as JSON.

    HTTP status codes are not inspected: the weather provider reports
    errors inside the JSON body, so a 404 with a JSON payload is returned
    to the caller like any other document.
    """

    def __init__(
        self,
        timeout_seconds: float,
        logger: logging.Logger,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.logger = logger
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"Accept": "application/json", "User-Agent": "wth/0.1"},
            transport=transport,
        )

    async def __aenter__(self) -> JsonFetcher:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch ``url`` once and return the decoded JSON value.

        Raises NetworkError on transport failure and ParseError when the
        body is not valid JSON. Never retries.
        """
        self.logger.debug(
            "GET params=%s", sanitize_for_logging(params or {}), extra={"endpoint": url}
        )
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            reason = sanitize_text(str(exc)) or type(exc).__name__
            raise NetworkError(reason) from exc

        self.logger.debug("HTTP %d", response.status_code, extra={"endpoint": url})
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(
                f"Response from {sanitize_text(str(response.url))} is not valid JSON."
            ) from exc

from __future__ import annotations

import logging
from typing import Any

import httpx

from apod_proxy.domain.exceptions import ApiError, InvalidResponseError, UpstreamUnavailableError
from apod_proxy.infrastructure.headers import make_headers

logger = logging.getLogger(__name__)

APOD_URL = "https://api.nasa.gov/planetary/apod"
DEFAULT_TIMEOUT = 10.0  # seconds


class ApodClient:
    """HTTP client for the NASA APOD API.

    Knows nothing about caching; ApodService decides when a call is needed.
    A single httpx.AsyncClient instance is shared for the process lifetime.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str) -> None:
        self._http = http_client
        self._api_key = api_key

    async def get_today(self) -> dict[str, Any]:
        """GET /planetary/apod with no date, i.e. today's picture."""
        return await self.fetch({})  # type: ignore[return-value]

    async def get_by_date(self, date: str) -> dict[str, Any]:
        """GET /planetary/apod?date=YYYY-MM-DD."""
        return await self.fetch({"date": date})  # type: ignore[return-value]

    async def get_range(self, start: str, end: str) -> list[dict[str, Any]] | dict[str, Any]:
        """GET /planetary/apod?start_date=..&end_date=..

        Usually a list, but a one-day range may come back as a single object.
        """
        return await self.fetch({"start_date": start, "end_date": end})

    async def fetch(self, params: dict[str, Any]) -> Any:
        """Call the APOD endpoint with api_key merged into params.

        Raises ApiError on non-2xx status, UpstreamUnavailableError when
        the request never got a response and InvalidResponseError when the
        body is not JSON.
        """
        query = {"api_key": self._api_key, **params}
        try:
            response = await self._http.get(
                APOD_URL, params=query, headers=make_headers(), timeout=DEFAULT_TIMEOUT
            )
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"Failed to call NASA API: {exc}") from exc
        self._raise_for_status(response)
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidResponseError("NASA API returned an invalid body") from exc

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise ApiError for non-2xx responses."""
        if response.is_success:
            return
        text = response.reason_phrase or response.text
        logger.debug("NASA API error %s", response.status_code)
        raise ApiError(response.status_code, f"NASA API responded {response.status_code}: {text}")

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Any

import httpx

from apod_proxy.config import Settings
from apod_proxy.domain.entities import Apod
from apod_proxy.domain.exceptions import InvalidResponseError
from apod_proxy.domain.services import clamp_recent_count, validate_date
from apod_proxy.infrastructure.apod_client import DEFAULT_TIMEOUT, ApodClient
from apod_proxy.infrastructure.cache import LruTtlCache
from apod_proxy.infrastructure.time_utils import recent_window

logger = logging.getLogger(__name__)

TODAY_KEY = "apod:today"


class ApodService:
    """Cache-aside access to APOD data.

    Every lookup checks the cache first, calls the API on a miss and stores
    the simplified result. Failed calls store nothing. Two concurrent misses
    for the same key both reach the API; the later write wins.
    """

    def __init__(self, client: ApodClient, cache: LruTtlCache) -> None:
        self._client = client
        self._cache = cache

    async def get_today(self) -> Apod:
        cached = self._cache.get(TODAY_KEY)
        if cached is not None:
            return cached  # type: ignore[no-any-return]

        raw = await self._client.get_today()
        apod = self._map_apod(raw)
        self._cache.set(TODAY_KEY, apod)
        return apod

    async def get_by_date(self, date_str: str | None) -> Apod:
        """Return the APOD for a YYYY-MM-DD date. Raises ValidationError on bad input."""
        day = validate_date(date_str)
        key = f"apod:date:{day}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached  # type: ignore[no-any-return]

        raw = await self._client.get_by_date(day)
        apod = self._map_apod(raw)
        self._cache.set(key, apod)
        return apod

    async def get_recent(
        self,
        count: str | int | None = None,
        today: date | None = None,  # None → today in UTC
    ) -> list[Apod]:
        """Return up to 50 consecutive days ending today, newest first.

        Steps:
        1. Validate and clamp count (raises ValidationError)
        2. Compute the [start, end] window
        3. Serve from cache under apod:range:<start>:<end>, or fetch the range
        4. Wrap a single-object response in a list, reverse, simplify
        """
        n = clamp_recent_count(count)
        start, end = recent_window(n, today)
        key = f"apod:range:{start}:{end}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached  # type: ignore[no-any-return]

        raw = await self._client.get_range(start, end)
        entries: list[dict[str, Any]] = raw if isinstance(raw, list) else [raw]
        apods = [self._map_apod(entry) for entry in reversed(entries)]
        self._cache.set(key, apods)
        return apods

    def cache_stats(self) -> dict[str, int]:
        """Entry count (after purging expired entries) plus the cache limits."""
        return {
            "entries": self._cache.size(),
            "ttl_ms": self._cache.ttl_ms,
            "max_items": self._cache.max_items,
        }

    async def close(self) -> None:
        await self._client.close()

    def _map_apod(self, raw: dict[str, Any]) -> Apod:
        """Map a raw APOD API object to the Apod entity.

        Optional fields (hdurl, copyright, service_version) become None when
        missing or empty. Unknown fields such as thumbnail_url are dropped.
        Raises InvalidResponseError when raw is not a JSON object.
        """
        if not isinstance(raw, dict):
            raise InvalidResponseError(
                f"NASA API returned an unexpected payload: {type(raw).__name__}"
            )
        return Apod(
            date=raw.get("date", ""),
            title=raw.get("title", ""),
            media_type=raw.get("media_type", ""),
            url=raw.get("url", ""),
            explanation=raw.get("explanation", ""),
            hdurl=raw.get("hdurl") or None,
            copyright=raw.get("copyright") or None,
            service_version=raw.get("service_version") or None,
        )


def apod_to_dict(apod: Apod) -> dict[str, Any]:
    """JSON-ready dict for an Apod."""
    return dataclasses.asdict(apod)


def build_apod_service(settings: Settings) -> ApodService:
    """Construct the process-wide cache, HTTP client and service."""
    cache = LruTtlCache(max_items=settings.cache_max_items, ttl_ms=settings.cache_ttl_ms)
    http_client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
    client = ApodClient(http_client=http_client, api_key=settings.nasa_api_key)
    logger.info(
        "APOD cache configured: max_items=%d ttl_ms=%d",
        settings.cache_max_items,
        settings.cache_ttl_ms,
    )
    return ApodService(client, cache)

from __future__ import annotations

import json
import logging
from typing import Any

from mcp import types
from mcp.server.fastmcp import FastMCP

from apod_proxy.application.apod_service import ApodService, apod_to_dict
from apod_proxy.domain.exceptions import (
    ApiError,
    InvalidResponseError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_RESULT_URI = "mcp://apod-proxy/result"


def _as_resource(json_str: str) -> list[types.EmbeddedResource]:
    """Wrap a JSON string as an embedded resource so the LLM does not narrate it."""
    return [
        types.EmbeddedResource(
            type="resource",
            resource=types.TextResourceContents(
                uri=_RESULT_URI,  # type: ignore[arg-type]
                mimeType="application/json",
                text=json_str,
            ),
        )
    ]


def _result_json(result: Any) -> str:
    return json.dumps(result, ensure_ascii=False)


def _error_json(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)


def _handle_exception(exc: Exception) -> list[types.EmbeddedResource]:
    if isinstance(exc, ValidationError):
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, ApiError):
        if exc.status_code == 400:
            # NASA answers 400 for dates before 1995-06-16 or in the future
            return _as_resource(_error_json("No picture available for that date."))
        if exc.status_code == 429:
            return _as_resource(_error_json("NASA API rate limit reached. Please try again later."))
        if exc.status_code >= 500:
            return _as_resource(
                _error_json(f"NASA API error ({exc.status_code}). Please try again later.")
            )
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, UpstreamUnavailableError):
        return _as_resource(_error_json("NASA API is unreachable. Please try again."))
    if isinstance(exc, InvalidResponseError):
        return _as_resource(_error_json("NASA API returned unusable data. Please try again later."))
    logger.exception("Unexpected error in MCP tool: %s", exc)
    return _as_resource(_error_json("An unexpected error occurred."))


def register_tools(mcp: FastMCP, apod_svc: ApodService) -> None:
    """Bind all @mcp.tool decorators. Called once during server setup."""

    @mcp.tool()
    async def get_apod_today() -> list[types.EmbeddedResource]:
        """Get today's NASA Astronomy Picture of the Day."""
        try:
            apod = await apod_svc.get_today()
            return _as_resource(_result_json(apod_to_dict(apod)))
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def get_apod_by_date(date: str) -> list[types.EmbeddedResource]:
        """Get the Astronomy Picture of the Day for a specific date.

        Args:
            date: Calendar date as YYYY-MM-DD, e.g. "2024-01-15".
        """
        try:
            apod = await apod_svc.get_by_date(date)
            return _as_resource(_result_json(apod_to_dict(apod)))
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def get_recent_apods(count: int = 10) -> list[types.EmbeddedResource]:
        """Get the most recent Astronomy Pictures of the Day, newest first.

        Args:
            count: Number of days to return (default 10, capped at 50).
        """
        try:
            apods = await apod_svc.get_recent(count)
            result = {"count": len(apods), "items": [apod_to_dict(a) for a in apods]}
            return _as_resource(_result_json(result))
        except Exception as exc:
            return _handle_exception(exc)

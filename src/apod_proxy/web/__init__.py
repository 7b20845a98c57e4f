"""REST API and static frontend for the APOD proxy."""
from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from apod_proxy.application.apod_service import ApodService, apod_to_dict, build_apod_service
from apod_proxy.config import Settings
from apod_proxy.domain.exceptions import ApodProxyError, ValidationError
from apod_proxy.infrastructure.time_utils import now_utc_iso

logger = logging.getLogger(__name__)

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse({"error": error, "message": message}, status_code=status_code)


async def _handle_validation_error(_request: Request, exc: Exception) -> JSONResponse:
    return _error(400, "Bad Request", str(exc))


async def _handle_upstream_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(502, "Bad Gateway", str(exc))


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after responding; the server logs the traceback
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return _error(500, "Internal Server Error", str(exc) or "Unknown error")


async def _api_not_found(_request: Request) -> JSONResponse:
    return _error(404, "Not Found", "API route not found")


def create_web_app(settings: Settings, service: ApodService | None = None) -> Starlette:
    """Build the Starlette app. A service is built from settings unless one is given."""
    svc = service if service is not None else build_apod_service(settings)

    async def health(_request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "timestamp": now_utc_iso(),
                "cache": svc.cache_stats(),
                "using_demo_key": settings.using_demo_key,
            }
        )

    async def apod_today(_request: Request) -> JSONResponse:
        apod = await svc.get_today()
        return JSONResponse(apod_to_dict(apod))

    async def apod_by_date(request: Request) -> JSONResponse:
        apod = await svc.get_by_date(request.query_params.get("date"))
        return JSONResponse(apod_to_dict(apod))

    async def apod_recent(request: Request) -> JSONResponse:
        apods = await svc.get_recent(request.query_params.get("count"))
        return JSONResponse([apod_to_dict(a) for a in apods])

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        if settings.using_demo_key:
            logger.warning(
                "Using NASA DEMO_KEY. Requests may be rate-limited. "
                "Set NASA_API_KEY to use your own key."
            )
        try:
            yield
        finally:
            await svc.close()

    routes: list[BaseRoute] = [
        Route("/api/health", health),
        Route("/api/apod/today", apod_today),
        Route("/api/apod/recent", apod_recent),
        Route("/api/apod", apod_by_date),
        # Unknown API paths get a JSON 404 instead of falling through to static files
        Route("/api", _api_not_found, methods=_ALL_METHODS),
        Route("/api/{path:path}", _api_not_found, methods=_ALL_METHODS),
    ]
    if settings.public_dir.is_dir():
        routes.append(Mount("/", app=StaticFiles(directory=settings.public_dir, html=True)))
    else:
        logger.info("No frontend directory at %s, serving API only", settings.public_dir)

    return Starlette(
        routes=routes,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
        exception_handlers={
            ValidationError: _handle_validation_error,
            ApodProxyError: _handle_upstream_error,
            Exception: _handle_unexpected,
        },
        lifespan=lifespan,
    )

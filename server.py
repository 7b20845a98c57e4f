#!/usr/bin/env python3
"""APOD Proxy, repository root entry point.

Usage:
    uv run server.py           # REST API + static frontend (default)
    uv run server.py --mcp     # MCP over streamable HTTP
    uv run server.py --stdio   # MCP over stdio for Claude Desktop
"""
from __future__ import annotations

import logging
import sys

import uvicorn
from starlette.middleware.cors import CORSMiddleware

from apod_proxy.config import Settings
from apod_proxy.mcp import create_mcp_app
from apod_proxy.web import create_web_app

settings = Settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

if __name__ == "__main__":
    if "--stdio" in sys.argv:
        create_mcp_app(settings).run(transport="stdio")
    elif "--mcp" in sys.argv:
        app = create_mcp_app(settings).streamable_http_app()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        print(f"APOD MCP server listening on http://{settings.host}:{settings.port}/mcp")
        uvicorn.run(app, host=settings.host, port=settings.port)
    else:
        app = create_web_app(settings)
        print(f"APOD backend listening on http://{settings.host}:{settings.port}")
        uvicorn.run(app, host=settings.host, port=settings.port)

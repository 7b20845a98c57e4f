from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from apod_proxy.application.apod_service import build_apod_service
from apod_proxy.config import Settings
from apod_proxy.mcp.tools import register_tools


def create_mcp_app(settings: Settings) -> FastMCP:
    """Create and configure the FastMCP application with all services wired."""
    apod_svc = build_apod_service(settings)

    mcp = FastMCP("NASA APOD", stateless_http=True)
    register_tools(mcp, apod_svc)
    return mcp

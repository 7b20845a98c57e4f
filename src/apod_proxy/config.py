"""Centralized configuration: all env vars in one place."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from apod_proxy.infrastructure.cache import DEFAULT_MAX_ITEMS, DEFAULT_TTL_MS

logger = logging.getLogger(__name__)

DEMO_KEY = "DEMO_KEY"


def _int_env(name: str, default: int) -> int:
    """Read an integer env var, falling back to default when unset or non-numeric."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %d", name, raw, default)
        return default


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = _int_env("PORT", 5000)
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.public_dir: Path = Path(os.getenv("PUBLIC_DIR", "public"))

        self.nasa_api_key: str = os.getenv("NASA_API_KEY") or DEMO_KEY

        # The cache trusts its arguments, so bad values are corrected here.
        max_items = _int_env("CACHE_MAX_ITEMS", DEFAULT_MAX_ITEMS)
        if max_items <= 0:
            logger.warning("CACHE_MAX_ITEMS must be positive, using %d", DEFAULT_MAX_ITEMS)
            max_items = DEFAULT_MAX_ITEMS
        self.cache_max_items: int = max_items
        # 0 or negative keeps entries until evicted
        self.cache_ttl_ms: int = _int_env("CACHE_TTL_MS", DEFAULT_TTL_MS)

    @property
    def using_demo_key(self) -> bool:
        return self.nasa_api_key == DEMO_KEY

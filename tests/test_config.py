"""Tests for environment-driven settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from apod_proxy.config import DEMO_KEY, Settings

_VARS = ["HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS", "PUBLIC_DIR", "NASA_API_KEY", "CACHE_MAX_ITEMS", "CACHE_TTL_MS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults() -> None:
    settings = Settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 5000
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]
    assert settings.public_dir == Path("public")
    assert settings.nasa_api_key == DEMO_KEY
    assert settings.using_demo_key is True
    assert settings.cache_max_items == 200
    assert settings.cache_ttl_ms == 86_400_000


def test_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example,https://b.example")
    monkeypatch.setenv("NASA_API_KEY", "abc123")
    monkeypatch.setenv("CACHE_MAX_ITEMS", "50")
    monkeypatch.setenv("CACHE_TTL_MS", "60000")

    settings = Settings()
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.using_demo_key is False
    assert settings.cache_max_items == 50
    assert settings.cache_ttl_ms == 60000


def test_empty_api_key_falls_back_to_demo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NASA_API_KEY", "")
    assert Settings().nasa_api_key == DEMO_KEY


@pytest.mark.parametrize("raw", ["abc", "0", "-4", ""])
def test_bad_max_items_uses_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CACHE_MAX_ITEMS", raw)
    assert Settings().cache_max_items == 200


def test_non_numeric_ttl_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CACHE_TTL_MS", "one day")
    assert Settings().cache_ttl_ms == 86_400_000


def test_zero_ttl_is_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CACHE_TTL_MS", "0")
    assert Settings().cache_ttl_ms == 0

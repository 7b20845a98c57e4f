"""Shared pytest fixtures for the APOD proxy test suite."""
from __future__ import annotations

import pytest


@pytest.fixture
def sample_apod_raw() -> dict:  # type: ignore[type-arg]
    """Sample raw entry matching the api.nasa.gov/planetary/apod response schema."""
    return {
        "copyright": "Jane Doe",
        "date": "2024-01-15",
        "explanation": "A spiral galaxy seen nearly face-on.",
        "hdurl": "https://apod.nasa.gov/apod/image/2401/galaxy_hd.jpg",
        "media_type": "image",
        "service_version": "v1",
        "title": "A Face-On Spiral",
        "url": "https://apod.nasa.gov/apod/image/2401/galaxy.jpg",
    }


@pytest.fixture
def sample_video_raw() -> dict:  # type: ignore[type-arg]
    """Video entries carry no hdurl and usually no copyright."""
    return {
        "date": "2024-01-14",
        "explanation": "A time-lapse of a total solar eclipse.",
        "media_type": "video",
        "service_version": "v1",
        "title": "Eclipse Time-Lapse",
        "url": "https://www.youtube.com/embed/abc123",
    }


@pytest.fixture
def sample_range_raw(sample_apod_raw, sample_video_raw) -> list:  # type: ignore[no-untyped-def,type-arg]
    """A start_date/end_date response: oldest first, as NASA returns it."""
    return [sample_video_raw, sample_apod_raw]

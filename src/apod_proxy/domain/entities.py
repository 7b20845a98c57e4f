from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Apod:
    """A single Astronomy Picture of the Day, reduced to the fields the UI renders."""

    date: str  # YYYY-MM-DD
    title: str
    media_type: str  # "image" or "video"
    url: str
    explanation: str
    hdurl: str | None = None  # Only present for images
    copyright: str | None = None
    service_version: str | None = None

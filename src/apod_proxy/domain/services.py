from __future__ import annotations

import re
from datetime import date

from apod_proxy.domain.exceptions import ValidationError

MAX_RECENT_COUNT = 50
DEFAULT_RECENT_COUNT = 10

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_valid_date_string(s: str) -> bool:
    """Return True for a YYYY-MM-DD string naming a real calendar day.

    "2024-02-30" matches the shape but is rejected.
    """
    if not _DATE_RE.fullmatch(s):
        return False
    try:
        date.fromisoformat(s)
    except ValueError:
        return False
    return True


def validate_date(raw: str | None) -> str:
    """Strip and validate a date query value. Raises ValidationError."""
    value = (raw or "").strip()
    if not value:
        raise ValidationError("Missing required query param: date=YYYY-MM-DD")
    if not is_valid_date_string(value):
        raise ValidationError("Invalid date format. Use YYYY-MM-DD")
    return value


def clamp_recent_count(raw: str | int | None) -> int:
    """Parse a recent-count value and clamp it to MAX_RECENT_COUNT.

    None or an empty string means DEFAULT_RECENT_COUNT.
    Raises ValidationError for non-integers and values <= 0.
    """
    if raw is None or raw == "":
        return DEFAULT_RECENT_COUNT
    try:
        count = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Invalid count. Must be a positive integer.")
    if count <= 0:
        raise ValidationError("Invalid count. Must be a positive integer.")
    return min(MAX_RECENT_COUNT, count)

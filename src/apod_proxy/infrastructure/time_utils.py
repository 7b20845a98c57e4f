from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def today_utc() -> date:
    """Return the current calendar day in UTC (the day APOD publishes against)."""
    return datetime.now(tz=timezone.utc).date()


def now_utc_iso() -> str:
    """Current moment as an ISO 8601 string with millisecond precision and a Z suffix."""
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_date(d: date) -> str:
    """Return date string in YYYY-MM-DD format (for the date/start_date/end_date params)."""
    return d.strftime("%Y-%m-%d")


def recent_window(count: int, today: date | None = None) -> tuple[str, str]:
    """Return (start_date, end_date) covering ``count`` days that end today.

    count=1 yields a single-day window where start == end.
    """
    end = today if today is not None else today_utc()
    start = end - timedelta(days=count - 1)
    return format_date(start), format_date(end)

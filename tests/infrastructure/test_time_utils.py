"""Tests for time utility functions."""
from __future__ import annotations

from datetime import date

from freezegun import freeze_time

from apod_proxy.infrastructure.time_utils import (
    format_date,
    now_utc_iso,
    recent_window,
    today_utc,
)


def test_format_date() -> None:
    assert format_date(date(2024, 1, 5)) == "2024-01-05"


def test_recent_window_single_day() -> None:
    assert recent_window(1, date(2024, 1, 15)) == ("2024-01-15", "2024-01-15")


def test_recent_window_spans_count_days() -> None:
    assert recent_window(10, date(2024, 1, 15)) == ("2024-01-06", "2024-01-15")


def test_recent_window_crosses_month_and_year() -> None:
    assert recent_window(3, date(2024, 1, 1)) == ("2023-12-30", "2024-01-01")


def test_recent_window_leap_day() -> None:
    assert recent_window(2, date(2024, 3, 1)) == ("2024-02-29", "2024-03-01")


@freeze_time("2024-06-30T23:30:00+00:00")
def test_today_utc() -> None:
    assert today_utc() == date(2024, 6, 30)


@freeze_time("2024-06-30T23:30:00+00:00")
def test_recent_window_defaults_to_today_utc() -> None:
    assert recent_window(2) == ("2024-06-29", "2024-06-30")


@freeze_time("2024-06-30T12:00:00.123456+00:00")
def test_now_utc_iso() -> None:
    assert now_utc_iso() == "2024-06-30T12:00:00.123Z"

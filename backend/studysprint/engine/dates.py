"""Calendar-date helpers operating on ``YYYY-MM-DD`` strings."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(value: str) -> date:
    year, month, day = (int(part) for part in value.split("-"))
    return date(year, month, day)


def add_days(value: str, days: int) -> str:
    return format_date(parse_date(value) + timedelta(days=days))


def previous_date(value: str) -> str:
    return add_days(value, -1)


def compare_dates(a: str, b: str) -> int:
    # Fixed-width ISO dates sort lexicographically in calendar order.
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def days_between(start: str, end: str) -> int:
    """Whole days from ``start`` to ``end`` (negative when ``end`` is earlier)."""
    return (parse_date(end) - parse_date(start)).days


def today_in_timezone(tz_name: str, now: Optional[datetime] = None) -> str:
    """Resolve the calendar date a user in ``tz_name`` currently sees."""
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    return format_date(current.astimezone(ZoneInfo(tz_name)).date())

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def to_key(value: date) -> str:
    """Format a date as its ``YYYY-MM-DD`` key.

    Uses the value's own year/month/day fields. Aware datetimes are not
    converted to UTC first, so the key never drifts to a neighbouring day.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def from_key(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` key into a date."""
    parts = (value or "").strip().split("-")
    if len(parts) != 3:
        raise ValidationError(f"Tanggal tidak valid: {value!r}")
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError as e:
        raise ValidationError(f"Tanggal tidak valid: {value!r}") from e


def as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def js_weekday(value: date) -> int:
    """Weekday number with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def month_end(year: int, month: int) -> date:
    # "day 0 of next month"; December never steps into the next year
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date in the inclusive range."""
    current = as_date(start)
    end = as_date(end)
    while current <= end:
        yield current
        if current == end:
            break
        current += timedelta(days=1)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DayType


@dataclass(frozen=True)
class CalendarDaySetting:
    """Override of the institutional day type for one date key."""

    date: str
    day_type: DayType
    description: Optional[str] = None


@dataclass(frozen=True)
class CalendarDayView:
    """Read-model for one cell of the calendar month view."""

    date: str
    day: int
    weekday: int
    day_type: DayType
    description: Optional[str]
    is_override: bool

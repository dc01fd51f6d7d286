from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import iter_days, to_key
from ..common.validators import optional_text
from ..core.enums import DayType
from ..core.exceptions import ValidationError
from ..state.actions import SetCalendarDay
from ..state.store import AppStore
from .model import CalendarDaySetting, CalendarDayView
from .resolver import CalendarResolver, default_day_type, month_view

logger = logging.getLogger(__name__)


def weekend_settings_for_year(year: int) -> list[CalendarDaySetting]:
    """Explicit WEEKEND overrides for every Saturday/Sunday of ``year``."""
    return [
        CalendarDaySetting(date=to_key(d), day_type=DayType.WEEKEND)
        for d in iter_days(date(year, 1, 1), date(year, 12, 31))
        if default_day_type(d) == DayType.WEEKEND
    ]


class CalendarService:
    def __init__(self, store: AppStore):
        self._store = store

    def resolver(self) -> CalendarResolver:
        return CalendarResolver(self._store.state.calendar_settings)

    def set_day(self, *, day: date, day_type: DayType | str, description: Optional[str] = None) -> CalendarDaySetting:
        try:
            day_type = DayType(day_type)
        except ValueError as e:
            raise ValidationError(f"Jenis hari tidak valid: {day_type!r}") from e

        description = optional_text(description, "Keterangan")
        setting = CalendarDaySetting(date=to_key(day), day_type=day_type, description=description)
        self._store.dispatch(SetCalendarDay(setting))
        logger.info("Calendar %s set to %s", setting.date, setting.day_type.value)
        return setting

    def month_view(self, year: int, month: int) -> list[CalendarDayView]:
        if not 1 <= int(month) <= 12:
            raise ValidationError("Bulan tidak valid")
        return month_view(int(year), int(month), self.resolver())

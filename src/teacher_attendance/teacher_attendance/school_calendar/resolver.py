from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import iter_days, js_weekday, month_end, to_key
from ..core.constants import SATURDAY, SUNDAY
from ..core.enums import DayType
from ..teachers.model import Teacher
from .model import CalendarDaySetting, CalendarDayView


def default_day_type(value: date) -> DayType:
    """Day type used when no override exists for the date."""
    if js_weekday(value) in (SUNDAY, SATURDAY):
        return DayType.WEEKEND
    return DayType.WORKDAY


class CalendarResolver:
    """Resolves the effective day type of a date.

    An explicit setting always wins, even when it contradicts the weekday
    (a Tuesday marked WEEKEND is honoured).
    """

    def __init__(self, settings: Iterable[CalendarDaySetting]):
        self._by_key: dict[str, CalendarDaySetting] = {s.date: s for s in settings}

    def setting_for(self, value: date) -> Optional[CalendarDaySetting]:
        return self._by_key.get(to_key(value))

    def resolve_day_type(self, value: date) -> DayType:
        setting = self.setting_for(value)
        if setting is not None:
            return setting.day_type
        return default_day_type(value)


def is_teacher_work_day(teacher: Teacher, value: date, resolver: CalendarResolver) -> bool:
    """Whether ``teacher`` is expected at school on ``value``.

    Institutional non-workdays override the personal schedule.
    """
    if resolver.resolve_day_type(value) != DayType.WORKDAY:
        return False
    return teacher.works_on_weekday(js_weekday(value))


def month_view(year: int, month: int, resolver: CalendarResolver) -> list[CalendarDayView]:
    """Every date of a month with its resolved day type."""
    out: list[CalendarDayView] = []
    for day in iter_days(date(year, month, 1), month_end(year, month)):
        setting = resolver.setting_for(day)
        out.append(
            CalendarDayView(
                date=to_key(day),
                day=day.day,
                weekday=js_weekday(day),
                day_type=setting.day_type if setting else default_day_type(day),
                description=setting.description if setting else None,
                is_override=setting is not None,
            )
        )
    return out

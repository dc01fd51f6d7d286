"""Attendance aggregation over a date range.

Every function here is pure: the reference ``today`` is passed in explicitly,
and nothing reads the clock or touches storage. A past scheduled work day
without a record counts as an (inferred) absence; today and future days
without a record contribute nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.ledger import AttendanceLedger
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import iter_days, month_end
from ..core.constants import MONTH_ABBREVIATIONS
from ..core.enums import AttendanceStatus
from ..school_calendar.model import CalendarDaySetting
from ..school_calendar.resolver import CalendarResolver, is_teacher_work_day
from ..teachers.model import Teacher
from .period import Period, parse_period

OVERALL_SERIES = "overall"


def percentage(part: int, whole: int) -> int:
    """Rounded percentage, half up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


@dataclass(frozen=True)
class TeacherSummary:
    teacher_id: str
    name: str
    work_days_in_period: int
    present_days: int
    sick: int
    permit: int
    absent: int
    presence_percentage: int

    @property
    def total_absence(self) -> int:
        return self.sick + self.permit + self.absent


@dataclass(frozen=True)
class OverallSummary:
    present: int
    sick: int
    permit: int
    absent: int
    total_work_days: int
    presence_percentage: int


@dataclass(frozen=True)
class Trend:
    """Presence percentages per series (teacher id or ``overall``).

    ``None`` marks a gap: the teacher was not scheduled that day.
    """

    labels: tuple[str, ...]
    series: dict[str, tuple[Optional[int], ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class Analysis:
    period: Period
    today: date
    teacher_stats: tuple[TeacherSummary, ...]
    overall: OverallSummary
    trend: Trend


def summarize_teacher(
    teacher: Teacher,
    start: date,
    end: date,
    resolver: CalendarResolver,
    ledger: AttendanceLedger,
    today: date,
) -> TeacherSummary:
    work_days = sick = permit = absent = 0

    for day in iter_days(start, end):
        if not is_teacher_work_day(teacher, day, resolver):
            continue
        work_days += 1

        record = ledger.get(teacher.teacher_id, day)
        if record is not None:
            if record.status == AttendanceStatus.SICK:
                sick += 1
            elif record.status == AttendanceStatus.PERMIT:
                permit += 1
            elif record.status == AttendanceStatus.ABSENT:
                absent += 1
        elif day < today:
            absent += 1

    present = max(0, work_days - (sick + permit + absent))
    return TeacherSummary(
        teacher_id=teacher.teacher_id,
        name=teacher.name,
        work_days_in_period=work_days,
        present_days=present,
        sick=sick,
        permit=permit,
        absent=absent,
        presence_percentage=percentage(present, work_days),
    )


def summarize_overall(summaries: Iterable[TeacherSummary]) -> OverallSummary:
    present = sick = permit = absent = total = 0
    for s in summaries:
        present += s.present_days
        sick += s.sick
        permit += s.permit
        absent += s.absent
        total += s.work_days_in_period

    return OverallSummary(
        present=present,
        sick=sick,
        permit=permit,
        absent=absent,
        total_work_days=total,
        presence_percentage=percentage(present, total),
    )


def _is_present_on(teacher: Teacher, day: date, ledger: AttendanceLedger, today: date) -> bool:
    record = ledger.get(teacher.teacher_id, day)
    if record is not None:
        return record.status == AttendanceStatus.PRESENT
    return day >= today


def _monthly_trend(
    period: Period,
    teachers: Sequence[Teacher],
    resolver: CalendarResolver,
    ledger: AttendanceLedger,
    today: date,
) -> Trend:
    labels: list[str] = []
    series: dict[str, list[Optional[int]]] = {t.teacher_id: [] for t in teachers}
    overall: list[Optional[int]] = []

    for year, month in period.months():
        labels.append(MONTH_ABBREVIATIONS[month - 1])
        month_stats = [
            summarize_teacher(t, date(year, month, 1), month_end(year, month), resolver, ledger, today)
            for t in teachers
        ]
        for s in month_stats:
            series[s.teacher_id].append(s.presence_percentage)
        overall.append(summarize_overall(month_stats).presence_percentage)

    out = {k: tuple(v) for k, v in series.items()}
    out[OVERALL_SERIES] = tuple(overall)
    return Trend(labels=tuple(labels), series=out)


def _daily_trend(
    period: Period,
    teachers: Sequence[Teacher],
    resolver: CalendarResolver,
    ledger: AttendanceLedger,
    today: date,
) -> Trend:
    labels: list[str] = []
    series: dict[str, list[Optional[int]]] = {t.teacher_id: [] for t in teachers}
    overall: list[Optional[int]] = []

    for day in iter_days(period.start, period.end):
        labels.append(str(day.day))
        scheduled = present = 0
        for t in teachers:
            if not is_teacher_work_day(t, day, resolver):
                series[t.teacher_id].append(None)
                continue
            scheduled += 1
            if _is_present_on(t, day, ledger, today):
                present += 1
                series[t.teacher_id].append(100)
            else:
                series[t.teacher_id].append(0)
        overall.append(percentage(present, scheduled))

    out = {k: tuple(v) for k, v in series.items()}
    out[OVERALL_SERIES] = tuple(overall)
    return Trend(labels=tuple(labels), series=out)


def build_trend(
    period: Period,
    teachers: Sequence[Teacher],
    resolver: CalendarResolver,
    ledger: AttendanceLedger,
    today: date,
) -> Trend:
    """Monthly points for multi-month periods, daily points for a single month."""
    if period.spans_multiple_months:
        return _monthly_trend(period, teachers, resolver, ledger, today)
    return _daily_trend(period, teachers, resolver, ledger, today)


def analyze(
    period_token: str,
    *,
    teachers: Sequence[Teacher],
    calendar_settings: Iterable[CalendarDaySetting],
    attendance_records: Iterable[AttendanceRecord],
    today: date,
) -> Analysis:
    period = parse_period(period_token)
    resolver = CalendarResolver(calendar_settings)
    ledger = AttendanceLedger(attendance_records)

    stats = tuple(
        summarize_teacher(t, period.start, period.end, resolver, ledger, today) for t in teachers
    )
    return Analysis(
        period=period,
        today=today,
        teacher_stats=stats,
        overall=summarize_overall(stats),
        trend=build_trend(period, teachers, resolver, ledger, today),
    )

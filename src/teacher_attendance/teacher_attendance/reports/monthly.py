"""Monthly recap: the teacher x day grid with per-teacher summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.ledger import AttendanceLedger
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_end
from ..core.constants import MONTH_NAMES
from ..core.enums import AttendanceStatus, DayType
from ..school_calendar.model import CalendarDaySetting, CalendarDayView
from ..school_calendar.resolver import CalendarResolver, is_teacher_work_day, month_view
from ..teachers.model import Teacher
from .aggregation import TeacherSummary, summarize_teacher

STATUS_CODES = {
    AttendanceStatus.SICK: "S",
    AttendanceStatus.PERMIT: "I",
    AttendanceStatus.ABSENT: "A",
}


@dataclass(frozen=True)
class RecapCell:
    day: int
    is_work_day: bool
    day_type: DayType
    status: Optional[AttendanceStatus] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None

    @property
    def code(self) -> str:
        """Short text shown in the grid cell."""
        if not self.is_work_day or self.status is None:
            return ""
        if self.status == AttendanceStatus.PRESENT:
            return " - ".join(t for t in (self.check_in, self.check_out) if t)
        return STATUS_CODES[self.status]


@dataclass(frozen=True)
class RecapRow:
    teacher_id: str
    name: str
    cells: tuple[RecapCell, ...]
    summary: TeacherSummary


@dataclass(frozen=True)
class MonthlyRecap:
    year: int
    month: int
    days: tuple[CalendarDayView, ...]
    rows: tuple[RecapRow, ...]
    status_totals: dict[AttendanceStatus, int]

    @property
    def label(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    @property
    def signed_on(self) -> str:
        last = month_end(self.year, self.month)
        return f"{last.day} {MONTH_NAMES[last.month - 1]} {last.year}"


def build_monthly_recap(
    year: int,
    month: int,
    *,
    teachers: Sequence[Teacher],
    calendar_settings: Iterable[CalendarDaySetting],
    attendance_records: Iterable[AttendanceRecord],
    today: date,
) -> MonthlyRecap:
    resolver = CalendarResolver(calendar_settings)
    ledger = AttendanceLedger(attendance_records)
    days = month_view(year, month, resolver)
    first, last = date(year, month, 1), month_end(year, month)

    totals = {s: 0 for s in AttendanceStatus}
    rows: list[RecapRow] = []
    for teacher in teachers:
        cells: list[RecapCell] = []
        for view in days:
            day = date(year, month, view.day)
            working = is_teacher_work_day(teacher, day, resolver)
            record = ledger.get(teacher.teacher_id, day) if working else None
            if record is not None:
                totals[record.status] += 1
            elif working and day < today:
                totals[AttendanceStatus.ABSENT] += 1
            cells.append(
                RecapCell(
                    day=view.day,
                    is_work_day=working,
                    day_type=view.day_type,
                    status=record.status if record else None,
                    check_in=record.check_in if record else None,
                    check_out=record.check_out if record else None,
                )
            )
        rows.append(
            RecapRow(
                teacher_id=teacher.teacher_id,
                name=teacher.name,
                cells=tuple(cells),
                summary=summarize_teacher(teacher, first, last, resolver, ledger, today),
            )
        )

    return MonthlyRecap(year=year, month=month, days=tuple(days), rows=tuple(rows), status_totals=totals)

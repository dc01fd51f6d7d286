from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..school_calendar.model import CalendarDaySetting
from ..teachers.model import Teacher


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of everything the application records."""

    teachers: tuple[Teacher, ...] = ()
    attendance_records: tuple[AttendanceRecord, ...] = ()
    calendar_settings: tuple[CalendarDaySetting, ...] = ()

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        for t in self.teachers:
            if t.teacher_id == teacher_id:
                return t
        return None

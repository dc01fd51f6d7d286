from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..attendance.model import AttendanceRecord
from ..school_calendar.model import CalendarDaySetting
from ..teachers.model import Teacher


@dataclass(frozen=True)
class AddTeacher:
    teacher: Teacher


@dataclass(frozen=True)
class UpdateTeacher:
    teacher: Teacher


@dataclass(frozen=True)
class DeleteTeacher:
    teacher_id: str


@dataclass(frozen=True)
class SetCalendarDay:
    setting: CalendarDaySetting


@dataclass(frozen=True)
class UpsertAttendance:
    records: tuple[AttendanceRecord, ...]


@dataclass(frozen=True)
class UpdateTeacherSchedule:
    teacher_id: str
    work_days: tuple[int, ...]


Action = Union[AddTeacher, UpdateTeacher, DeleteTeacher, SetCalendarDay, UpsertAttendance, UpdateTeacherSchedule]

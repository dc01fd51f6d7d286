from __future__ import annotations

from dataclasses import replace

from ..attendance.ledger import upsert_records
from .actions import (
    Action,
    AddTeacher,
    DeleteTeacher,
    SetCalendarDay,
    UpdateTeacher,
    UpdateTeacherSchedule,
    UpsertAttendance,
)
from .model import AppState


def reduce(state: AppState, action: Action) -> AppState:
    """Pure state transition: returns a new snapshot, never mutates ``state``."""
    if isinstance(action, AddTeacher):
        return replace(state, teachers=state.teachers + (action.teacher,))

    if isinstance(action, UpdateTeacher):
        teachers = tuple(
            action.teacher if t.teacher_id == action.teacher.teacher_id else t for t in state.teachers
        )
        return replace(state, teachers=teachers)

    if isinstance(action, DeleteTeacher):
        # Attendance rows of the deleted teacher stay; lookups treat them as orphans.
        teachers = tuple(t for t in state.teachers if t.teacher_id != action.teacher_id)
        return replace(state, teachers=teachers)

    if isinstance(action, SetCalendarDay):
        settings = list(state.calendar_settings)
        for i, s in enumerate(settings):
            if s.date == action.setting.date:
                settings[i] = action.setting
                break
        else:
            settings.append(action.setting)
        return replace(state, calendar_settings=tuple(settings))

    if isinstance(action, UpsertAttendance):
        return replace(state, attendance_records=upsert_records(state.attendance_records, action.records))

    if isinstance(action, UpdateTeacherSchedule):
        teachers = tuple(
            replace(t, work_days=action.work_days) if t.teacher_id == action.teacher_id else t
            for t in state.teachers
        )
        return replace(state, teachers=teachers)

    raise TypeError(f"Unsupported action: {type(action).__name__}")

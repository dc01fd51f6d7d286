from __future__ import annotations

from dataclasses import dataclass

import pytest

from teacher_attendance.attendance.model import AttendanceRecord
from teacher_attendance.core.enums import AttendanceStatus, DayType
from teacher_attendance.school_calendar.model import CalendarDaySetting
from teacher_attendance.state.actions import (
    AddTeacher,
    DeleteTeacher,
    SetCalendarDay,
    UpdateTeacher,
    UpdateTeacherSchedule,
    UpsertAttendance,
)
from teacher_attendance.state.model import AppState
from teacher_attendance.state.reducer import reduce
from teacher_attendance.teachers.model import Teacher

A = Teacher(teacher_id="t-1", name="Ahmad", subject="IPA")
B = Teacher(teacher_id="t-2", name="Budi", subject="IPS")


def test_add_update_delete_teacher_without_touching_the_old_snapshot():
    s0 = AppState()
    s1 = reduce(s0, AddTeacher(A))
    s2 = reduce(s1, AddTeacher(B))
    s3 = reduce(s2, UpdateTeacher(Teacher(teacher_id="t-1", name="Ahmad F.", subject="Fisika")))
    s4 = reduce(s3, DeleteTeacher("t-2"))

    assert s0.teachers == ()
    assert s2.teachers == (A, B)
    assert s3.teachers[0].name == "Ahmad F." and s2.teachers[0].name == "Ahmad"
    assert s4.teachers == (s3.teachers[0],)


def test_delete_teacher_keeps_their_attendance():
    rec = AttendanceRecord.create(teacher_id="t-2", date="2024-01-02", status=AttendanceStatus.SICK)
    state = AppState(teachers=(A, B), attendance_records=(rec,))

    after = reduce(state, DeleteTeacher("t-2"))

    assert after.attendance_records == (rec,)
    assert after.get_teacher("t-2") is None


def test_update_schedule_only_touches_work_days():
    state = AppState(teachers=(A, B))
    after = reduce(state, UpdateTeacherSchedule(teacher_id="t-1", work_days=(1, 3)))

    assert after.teachers[0] == Teacher(teacher_id="t-1", name="Ahmad", subject="IPA", work_days=(1, 3))
    assert after.teachers[1] is B
    assert state.teachers[0].work_days == (1, 2, 3, 4, 5)


def test_unknown_teacher_updates_are_noops():
    state = AppState(teachers=(A,))
    assert reduce(state, UpdateTeacherSchedule(teacher_id="t-9", work_days=())).teachers == (A,)
    assert reduce(state, UpdateTeacher(Teacher(teacher_id="t-9", name="X", subject="-"))).teachers == (A,)


def test_set_calendar_day_upserts_by_date():
    first = CalendarDaySetting(date="2024-08-17", day_type=DayType.NATIONAL_HOLIDAY, description="HUT RI")
    other = CalendarDaySetting(date="2024-08-18", day_type=DayType.WEEKEND)
    state = reduce(reduce(AppState(), SetCalendarDay(first)), SetCalendarDay(other))

    replaced = reduce(state, SetCalendarDay(CalendarDaySetting(date="2024-08-17", day_type=DayType.WORKDAY)))

    assert [s.date for s in replaced.calendar_settings] == ["2024-08-17", "2024-08-18"]
    assert replaced.calendar_settings[0].day_type == DayType.WORKDAY
    assert replaced.calendar_settings[0].description is None
    assert state.calendar_settings[0] == first


def test_upsert_attendance_never_duplicates():
    rec1 = AttendanceRecord.create(teacher_id="t-1", date="2024-01-02", status=AttendanceStatus.PRESENT, check_in="07:00", check_out="15:00")
    rec2 = AttendanceRecord.create(teacher_id="t-1", date="2024-01-02", status=AttendanceStatus.ABSENT)

    state = reduce(AppState(), UpsertAttendance((rec1,)))
    state = reduce(state, UpsertAttendance((rec2,)))

    assert state.attendance_records == (rec2,)


def test_unknown_action_is_rejected():
    @dataclass(frozen=True)
    class Bogus:
        pass

    with pytest.raises(TypeError):
        reduce(AppState(), Bogus())

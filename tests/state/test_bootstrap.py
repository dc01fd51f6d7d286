from __future__ import annotations

import json
from datetime import date

from teacher_attendance.core.enums import DayType
from teacher_attendance.state.bootstrap import load_initial_state
from teacher_attendance.storage.json_storage import InMemoryStorage, JsonFileStorage
from teacher_attendance.storage.repository import StateRepository


def test_fresh_install_seeds_roster_and_weekends():
    kv = InMemoryStorage()
    state = load_initial_state(StateRepository(kv, "attendanceApp"), date(2024, 5, 1))

    assert len(state.teachers) == 14
    assert state.teachers[0].teacher_id == "t-1"
    assert all(t.work_days == (1, 2, 3, 4, 5) for t in state.teachers)
    assert state.teachers[0].profile_picture.endswith("seed=Ahmad%20Fauzi")

    # 2024 starts on a Monday and has 366 days: 52 full weeks of weekends
    assert len(state.calendar_settings) == 104
    assert {s.day_type for s in state.calendar_settings} == {DayType.WEEKEND}
    assert state.calendar_settings[0].date == "2024-01-06"
    assert "attendanceApp" in kv.data


def test_corrupt_state_falls_back_to_seed():
    kv = InMemoryStorage({"attendanceApp": "{not json"})
    state = load_initial_state(StateRepository(kv, "attendanceApp"), date(2024, 5, 1))
    assert len(state.teachers) == 14


def test_invalid_work_days_fall_back_to_seed():
    doc = {"schemaVersion": 1, "teachers": [{"id": "x", "name": "X", "workDays": [9]}], "attendanceRecords": [], "calendarSettings": []}
    kv = InMemoryStorage({"attendanceApp": json.dumps(doc)})

    state = load_initial_state(StateRepository(kv, "attendanceApp"), date(2024, 1, 1))
    assert len(state.teachers) == 14


def test_undecodable_state_file_is_replaced_by_seed(tmp_path):
    path = tmp_path / "attendanceApp.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    state = load_initial_state(StateRepository(JsonFileStorage(tmp_path), "attendanceApp"), date(2024, 1, 1))

    assert len(state.teachers) == 14
    assert json.loads(path.read_text(encoding="utf-8"))["teachers"][0]["id"] == "t-1"


def test_empty_roster_counts_as_no_state():
    kv = InMemoryStorage({"attendanceApp": json.dumps({"schemaVersion": 1, "teachers": [], "attendanceRecords": [], "calendarSettings": []})})
    state = load_initial_state(StateRepository(kv, "attendanceApp"), date(2024, 5, 1))
    assert len(state.teachers) == 14


def test_persisted_state_wins():
    doc = {
        "schemaVersion": 1,
        "teachers": [{"id": "x", "name": "Xena", "subject": "Seni", "workDays": [2]}],
        "attendanceRecords": [{"id": "x-2024-01-02", "teacherId": "x", "date": "2024-01-02", "status": "PRESENT", "checkIn": "07:00", "checkOut": "15:00"}],
        "calendarSettings": [{"date": "2024-01-03", "type": "NATIONAL_HOLIDAY", "description": "Libur"}],
    }
    state = load_initial_state(StateRepository(InMemoryStorage({"attendanceApp": json.dumps(doc)}), "attendanceApp"), date(2024, 5, 1))

    assert [t.name for t in state.teachers] == ["Xena"]
    assert state.attendance_records[0].check_in == "07:00"
    assert state.calendar_settings[0].day_type == DayType.NATIONAL_HOLIDAY


def test_without_repository_seeds_in_memory():
    state = load_initial_state(None, date(2023, 1, 1))
    assert len(state.teachers) == 14

"""Mapping between domain snapshots and the persisted JSON layout (camelCase)."""

from __future__ import annotations

from typing import Any, Optional

from ..attendance.model import AttendanceRecord, make_record_id
from ..common.validators import normalize_work_days
from ..core.constants import SCHEMA_VERSION
from ..core.enums import AttendanceStatus, DayType
from ..school_calendar.model import CalendarDaySetting
from ..state.model import AppState
from ..teachers.model import Teacher


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def teacher_to_dict(t: Teacher) -> dict:
    out = {
        "id": t.teacher_id,
        "name": t.name,
        "subject": t.subject,
        "workDays": list(t.work_days),
    }
    if t.profile_picture:
        out["profilePicture"] = t.profile_picture
    return out


def teacher_from_dict(r: dict) -> Teacher:
    return Teacher(
        teacher_id=str(r["id"]),
        name=str(r["name"]),
        subject=str(r.get("subject") or ""),
        profile_picture=_optional_str(r.get("profilePicture")),
        work_days=normalize_work_days(r["workDays"]),
    )


def record_to_dict(r: AttendanceRecord) -> dict:
    out = {
        "id": r.record_id,
        "teacherId": r.teacher_id,
        "date": r.date,
        "status": r.status.value,
    }
    if r.check_in is not None:
        out["checkIn"] = r.check_in
    if r.check_out is not None:
        out["checkOut"] = r.check_out
    return out


def record_from_dict(r: dict) -> AttendanceRecord:
    teacher_id = str(r["teacherId"])
    date_key = str(r["date"])
    return AttendanceRecord(
        record_id=str(r.get("id") or make_record_id(teacher_id, date_key)),
        teacher_id=teacher_id,
        date=date_key,
        status=AttendanceStatus(r["status"]),
        check_in=_optional_str(r.get("checkIn")),
        check_out=_optional_str(r.get("checkOut")),
    )


def setting_to_dict(s: CalendarDaySetting) -> dict:
    out = {"date": s.date, "type": s.day_type.value}
    if s.description:
        out["description"] = s.description
    return out


def setting_from_dict(r: dict) -> CalendarDaySetting:
    return CalendarDaySetting(
        date=str(r["date"]),
        day_type=DayType(r["type"]),
        description=_optional_str(r.get("description")),
    )


def state_to_document(state: AppState) -> dict:
    return {
        "schemaVersion": SCHEMA_VERSION,
        "teachers": [teacher_to_dict(t) for t in state.teachers],
        "attendanceRecords": [record_to_dict(r) for r in state.attendance_records],
        "calendarSettings": [setting_to_dict(s) for s in state.calendar_settings],
    }


def state_from_document(doc: dict) -> AppState:
    """Decode an already-upgraded document.

    Raises KeyError/TypeError/ValueError on structurally unexpected input.
    """
    if not isinstance(doc, dict):
        raise TypeError("State document must be an object")
    return AppState(
        teachers=tuple(teacher_from_dict(t) for t in doc.get("teachers") or []),
        attendance_records=tuple(record_from_dict(r) for r in doc.get("attendanceRecords") or []),
        calendar_settings=tuple(setting_from_dict(s) for s in doc.get("calendarSettings") or []),
    )

from __future__ import annotations

from datetime import date

from teacher_attendance.attendance.model import AttendanceRecord
from teacher_attendance.core.enums import AttendanceStatus, DayType
from teacher_attendance.reports.monthly import build_monthly_recap
from teacher_attendance.school_calendar.model import CalendarDaySetting
from teacher_attendance.teachers.model import Teacher

TEACHER = Teacher(teacher_id="t-1", name="Ahmad", subject="IPA", work_days=(1, 2, 3, 4, 5))


def _recap(records, settings=(), today=date(2024, 1, 10)):
    return build_monthly_recap(
        2024,
        1,
        teachers=[TEACHER],
        calendar_settings=settings,
        attendance_records=records,
        today=today,
    )


def test_recap_cells_and_summary():
    records = [
        AttendanceRecord.create(teacher_id="t-1", date="2024-01-02", status=AttendanceStatus.PRESENT, check_in="07:00", check_out="15:00"),
        AttendanceRecord.create(teacher_id="t-1", date="2024-01-03", status=AttendanceStatus.SICK),
    ]
    recap = _recap(records)
    row = recap.rows[0]

    assert len(recap.days) == 31 and len(row.cells) == 31
    assert row.cells[1].code == "07:00 - 15:00"
    assert row.cells[2].code == "S"
    assert row.cells[3].code == ""  # past, unrecorded: counted but not drawn
    assert row.cells[5].is_work_day is False and row.cells[5].day_type == DayType.WEEKEND

    s = row.summary
    assert (s.work_days_in_period, s.sick, s.absent, s.present_days) == (23, 1, 5, 17)


def test_recap_status_totals_include_inferred_absences():
    records = [
        AttendanceRecord.create(teacher_id="t-1", date="2024-01-02", status=AttendanceStatus.PRESENT),
        AttendanceRecord.create(teacher_id="t-1", date="2024-01-03", status=AttendanceStatus.SICK),
    ]
    totals = _recap(records).status_totals

    assert totals[AttendanceStatus.PRESENT] == 1
    assert totals[AttendanceStatus.SICK] == 1
    assert totals[AttendanceStatus.PERMIT] == 0
    # Jan 1, 4, 5, 8, 9 are past work days without a record
    assert totals[AttendanceStatus.ABSENT] == 5


def test_recap_hides_records_on_days_that_became_holidays():
    records = [AttendanceRecord.create(teacher_id="t-1", date="2024-01-03", status=AttendanceStatus.PERMIT)]
    settings = [CalendarDaySetting(date="2024-01-03", day_type=DayType.NATIONAL_HOLIDAY)]
    recap = _recap(records, settings, today=date(2024, 1, 1))

    cell = recap.rows[0].cells[2]
    assert cell.is_work_day is False and cell.code == ""
    assert recap.rows[0].summary.permit == 0
    assert recap.status_totals[AttendanceStatus.PERMIT] == 0


def test_recap_labels():
    recap = _recap([])
    assert recap.label == "Januari 2024"
    assert recap.signed_on == "31 Januari 2024"

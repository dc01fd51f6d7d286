from __future__ import annotations

from datetime import date

from teacher_attendance.attendance.ledger import AttendanceLedger
from teacher_attendance.attendance.model import AttendanceRecord
from teacher_attendance.core.enums import AttendanceStatus, DayType
from teacher_attendance.reports.aggregation import (
    OVERALL_SERIES,
    analyze,
    percentage,
    summarize_overall,
    summarize_teacher,
)
from teacher_attendance.school_calendar.model import CalendarDaySetting
from teacher_attendance.school_calendar.resolver import CalendarResolver
from teacher_attendance.teachers.model import Teacher

MON_FRI = Teacher(teacher_id="t-1", name="Ahmad", subject="IPA", work_days=(1, 2, 3, 4, 5))
IDLE = Teacher(teacher_id="t-2", name="Budi", subject="IPS", work_days=())


def _rec(teacher_id: str, day: str, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord.create(teacher_id=teacher_id, date=day, status=status, check_in="07:00", check_out="15:00")


def _summary(records=(), settings=(), *, start, end, today, teacher=MON_FRI):
    return summarize_teacher(teacher, start, end, CalendarResolver(settings), AttendanceLedger(records), today)


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(5, 5) == 100
    assert percentage(0, 0) == 0


def test_future_month_without_records_is_fully_present():
    s = _summary(start=date(2024, 2, 1), end=date(2024, 2, 29), today=date(2024, 2, 1))

    assert s.work_days_in_period == 21
    assert (s.sick, s.permit, s.absent) == (0, 0, 0)
    assert s.present_days == 21
    assert s.presence_percentage == 100


def test_past_month_without_records_is_inferred_absent():
    s = _summary(start=date(2024, 1, 1), end=date(2024, 1, 31), today=date(2024, 2, 1))

    assert s.work_days_in_period == 23
    assert s.absent == 23
    assert s.present_days == 0
    assert s.presence_percentage == 0


def test_explicit_present_record_is_not_an_absence():
    s = _summary(
        [_rec("t-1", "2024-01-02", AttendanceStatus.PRESENT)],
        start=date(2024, 1, 1),
        end=date(2024, 1, 31),
        today=date(2024, 2, 1),
    )
    assert s.absent == 22
    assert s.present_days == 1
    assert s.presence_percentage == 4


def test_status_counters_and_today_is_not_inferred():
    records = [
        _rec("t-1", "2024-01-02", AttendanceStatus.SICK),
        _rec("t-1", "2024-01-03", AttendanceStatus.PERMIT),
        _rec("t-1", "2024-01-04", AttendanceStatus.ABSENT),
        _rec("t-1", "2024-01-06", AttendanceStatus.SICK),  # Saturday: ignored
        _rec("t-2", "2024-01-02", AttendanceStatus.SICK),  # other teacher
    ]
    s = _summary(records, start=date(2024, 1, 1), end=date(2024, 1, 31), today=date(2024, 1, 1))

    assert (s.sick, s.permit, s.absent) == (1, 1, 1)
    assert s.work_days_in_period == 23
    assert s.present_days == 20
    assert s.presence_percentage == 87


def test_calendar_overrides_shrink_and_grow_the_denominator():
    settings = [
        CalendarDaySetting(date="2024-01-03", day_type=DayType.NATIONAL_HOLIDAY),
        CalendarDaySetting(date="2024-01-06", day_type=DayType.WORKDAY),
    ]
    s = _summary(settings=settings, start=date(2024, 1, 1), end=date(2024, 1, 31), today=date(2024, 1, 1))
    assert s.work_days_in_period == 22

    saturday_teacher = Teacher(teacher_id="t-3", name="C", subject="-", work_days=(1, 2, 3, 4, 5, 6))
    s = _summary(settings=settings, start=date(2024, 1, 1), end=date(2024, 1, 7), today=date(2024, 1, 1), teacher=saturday_teacher)
    assert s.work_days_in_period == 5  # Mon, Tue, Thu, Fri + overridden Saturday


def test_teacher_without_schedule_has_zero_percentage():
    s = _summary(start=date(2024, 1, 1), end=date(2024, 1, 31), today=date(2024, 2, 1), teacher=IDLE)
    assert s.work_days_in_period == 0
    assert s.absent == 0
    assert s.presence_percentage == 0


def test_overall_sums_teacher_totals():
    a = _summary(start=date(2024, 1, 1), end=date(2024, 1, 31), today=date(2024, 1, 1))
    b = _summary(
        [_rec("t-4", "2024-01-08", AttendanceStatus.SICK)],
        start=date(2024, 1, 1),
        end=date(2024, 1, 31),
        today=date(2024, 1, 1),
        teacher=Teacher(teacher_id="t-4", name="D", subject="-", work_days=(1,)),
    )
    overall = summarize_overall([a, b])

    assert overall.total_work_days == 23 + 5
    assert overall.present == 23 + 4
    assert overall.sick == 1
    assert overall.presence_percentage == percentage(27, 28)


def test_daily_trend_for_a_single_month():
    records = [
        _rec("t-1", "2024-02-01", AttendanceStatus.PRESENT),
        _rec("t-1", "2024-02-02", AttendanceStatus.SICK),
    ]
    analysis = analyze(
        "2024-02",
        teachers=[MON_FRI, IDLE],
        calendar_settings=[],
        attendance_records=records,
        today=date(2024, 2, 6),
    )
    trend = analysis.trend
    teacher = trend.series["t-1"]

    assert len(trend.labels) == 29 and trend.labels[0] == "1"
    assert teacher[0] == 100  # explicit present
    assert teacher[1] == 0  # sick
    assert teacher[2] is None  # Saturday
    assert teacher[4] == 0  # Monday Feb 5, past, no record
    assert teacher[5] == 100  # today, no record yet
    assert all(v is None for v in trend.series["t-2"])
    assert trend.series[OVERALL_SERIES][0] == 100
    assert trend.series[OVERALL_SERIES][1] == 0
    assert trend.series[OVERALL_SERIES][2] == 0  # nobody scheduled


def test_monthly_trend_reuses_monthly_summaries():
    records = [_rec("t-1", f"2024-01-{d:02d}", AttendanceStatus.PRESENT) for d in range(1, 32)]
    analysis = analyze(
        "2024-q1",
        teachers=[MON_FRI],
        calendar_settings=[],
        attendance_records=records,
        today=date(2024, 3, 1),
    )

    assert analysis.trend.labels == ("Jan", "Feb", "Mar")
    # Jan all present, Feb all inferred absent, Mar not yet due
    assert analysis.trend.series["t-1"] == (100, 0, 100)
    assert analysis.trend.series[OVERALL_SERIES] == (100, 0, 100)

    summary = analysis.teacher_stats[0]
    assert summary.work_days_in_period == 23 + 21 + 21
    assert summary.absent == 21


def test_year_token_gives_twelve_monthly_points():
    analysis = analyze("2024", teachers=[MON_FRI], calendar_settings=[], attendance_records=[], today=date(2025, 1, 1))
    assert len(analysis.trend.labels) == 12
    assert analysis.trend.series["t-1"] == (0,) * 12


def test_analysis_is_idempotent():
    kwargs = dict(
        teachers=[MON_FRI, IDLE],
        calendar_settings=[CalendarDaySetting(date="2024-03-11", day_type=DayType.NATIONAL_HOLIDAY)],
        attendance_records=[_rec("t-1", "2024-03-04", AttendanceStatus.PERMIT)],
        today=date(2024, 3, 15),
    )
    assert analyze("2024-03", **kwargs) == analyze("2024-03", **kwargs)
    assert analyze("2024-s1", **kwargs) == analyze("2024-s1", **kwargs)


def test_orphan_records_do_not_break_analysis():
    analysis = analyze(
        "2024-01",
        teachers=[MON_FRI],
        calendar_settings=[],
        attendance_records=[_rec("deleted-teacher", "2024-01-02", AttendanceStatus.SICK)],
        today=date(2024, 1, 1),
    )
    assert analysis.overall.sick == 0
    assert "deleted-teacher" not in analysis.trend.series


def test_far_future_month_is_analyzed():
    analysis = analyze("9999-12", teachers=[MON_FRI], calendar_settings=[], attendance_records=[], today=date(2024, 1, 1))

    assert len(analysis.trend.labels) == 31
    assert analysis.teacher_stats[0].presence_percentage == 100

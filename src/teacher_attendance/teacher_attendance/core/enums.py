from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Institutional classification of a calendar date."""

    WORKDAY = "WORKDAY"
    WEEKEND = "WEEKEND"
    NATIONAL_HOLIDAY = "NATIONAL_HOLIDAY"
    JOINT_LEAVE = "JOINT_LEAVE"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the persisted state."""

    PRESENT = "PRESENT"
    SICK = "SICK"
    PERMIT = "PERMIT"
    ABSENT = "ABSENT"


class PeriodKind(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    SEMESTER = "semester"
    YEAR = "year"

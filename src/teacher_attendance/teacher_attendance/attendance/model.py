from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


def make_record_id(teacher_id: str, date_key: str) -> str:
    """Composite identity of an attendance record: one per (teacher, date)."""
    return f"{teacher_id}-{date_key}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance of one teacher on one date.

    Check-in/out times are only kept for PRESENT records.
    """

    record_id: str
    teacher_id: str
    date: str
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        teacher_id: str,
        date: str,
        status: AttendanceStatus,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> "AttendanceRecord":
        if status != AttendanceStatus.PRESENT:
            check_in = None
            check_out = None
        return cls(
            record_id=make_record_id(teacher_id, date),
            teacher_id=teacher_id,
            date=date,
            status=status,
            check_in=check_in,
            check_out=check_out,
        )

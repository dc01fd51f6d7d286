from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import iter_days, month_end, to_key
from ..common.validators import require_time_of_day
from ..core.constants import DEFAULT_CHECK_IN, DEFAULT_CHECK_OUT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..school_calendar.resolver import CalendarResolver, is_teacher_work_day
from ..state.actions import UpsertAttendance
from ..state.store import AppStore
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


def _parse_status(status: AttendanceStatus | str) -> AttendanceStatus:
    try:
        return AttendanceStatus(status)
    except ValueError as e:
        raise ValidationError(f"Status absensi tidak valid: {status!r}") from e


class AttendanceService:
    def __init__(self, store: AppStore):
        self._store = store

    def _times(
        self,
        status: AttendanceStatus,
        check_in: Optional[str],
        check_out: Optional[str],
    ) -> tuple[Optional[str], Optional[str]]:
        if status != AttendanceStatus.PRESENT:
            return None, None
        return (
            require_time_of_day(check_in or DEFAULT_CHECK_IN, "Waktu hadir"),
            require_time_of_day(check_out or DEFAULT_CHECK_OUT, "Waktu pulang"),
        )

    def record_individual(
        self,
        *,
        teacher_id: str,
        day: date,
        status: AttendanceStatus | str,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> AttendanceRecord:
        state = self._store.state
        teacher = state.get_teacher(teacher_id)
        if not teacher:
            raise NotFoundError(f"Guru tidak ditemukan: {teacher_id}")

        resolver = CalendarResolver(state.calendar_settings)
        if not is_teacher_work_day(teacher, day, resolver):
            raise ValidationError(f"{to_key(day)} bukan hari kerja {teacher.name}")

        status = _parse_status(status)
        check_in, check_out = self._times(status, check_in, check_out)
        record = AttendanceRecord.create(
            teacher_id=teacher_id,
            date=to_key(day),
            status=status,
            check_in=check_in,
            check_out=check_out,
        )
        self._store.dispatch(UpsertAttendance((record,)))
        return record

    def record_mass(
        self,
        *,
        teacher_ids: Iterable[str],
        start: date,
        end: date,
        status: AttendanceStatus | str,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> int:
        """Write one status for many teachers over a date range.

        Only each teacher's own work days receive a record. Returns the
        number of records written.
        """
        if end < start:
            raise ValidationError("Tanggal selesai harus setelah tanggal mulai")

        status = _parse_status(status)
        check_in, check_out = self._times(status, check_in, check_out)

        state = self._store.state
        resolver = CalendarResolver(state.calendar_settings)
        teachers = []
        for teacher_id in dict.fromkeys(teacher_ids):
            teacher = state.get_teacher(teacher_id)
            if teacher is None:
                logger.warning("Mass attendance: unknown teacher %s skipped", teacher_id)
                continue
            teachers.append(teacher)

        records: list[AttendanceRecord] = []
        for day in iter_days(start, end):
            for teacher in teachers:
                if not is_teacher_work_day(teacher, day, resolver):
                    continue
                records.append(
                    AttendanceRecord.create(
                        teacher_id=teacher.teacher_id,
                        date=to_key(day),
                        status=status,
                        check_in=check_in,
                        check_out=check_out,
                    )
                )

        if records:
            self._store.dispatch(UpsertAttendance(tuple(records)))
        logger.info("Mass attendance %s: %s records (%s..%s)", status.value, len(records), to_key(start), to_key(end))
        return len(records)

    def records_for_month(self, year: int, month: int) -> Sequence[AttendanceRecord]:
        first = to_key(date(year, month, 1))
        last = to_key(month_end(year, month))
        return [r for r in self._store.state.attendance_records if first <= r.date <= last]

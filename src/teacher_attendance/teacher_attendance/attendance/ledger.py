from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import to_key
from .model import AttendanceRecord


def upsert_records(
    existing: Sequence[AttendanceRecord],
    incoming: Iterable[AttendanceRecord],
) -> tuple[AttendanceRecord, ...]:
    """Return a new record tuple with ``incoming`` written over ``existing``.

    A record sharing the composite id of an existing one replaces it in place
    (last write wins, no field merge); others are appended in arrival order.
    """
    records = list(existing)
    position = {r.record_id: i for i, r in enumerate(records)}

    for record in incoming:
        index = position.get(record.record_id)
        if index is None:
            position[record.record_id] = len(records)
            records.append(record)
        else:
            records[index] = record

    return tuple(records)


class AttendanceLedger:
    """Read-only (teacher, date) index over attendance records."""

    def __init__(self, records: Iterable[AttendanceRecord]):
        self._by_teacher_date: dict[tuple[str, str], AttendanceRecord] = {
            (r.teacher_id, r.date): r for r in records
        }

    def __len__(self) -> int:
        return len(self._by_teacher_date)

    def get(self, teacher_id: str, value: date) -> Optional[AttendanceRecord]:
        return self._by_teacher_date.get((teacher_id, to_key(value)))

    def for_teacher(self, teacher_id: str) -> list[AttendanceRecord]:
        items = [r for r in self._by_teacher_date.values() if r.teacher_id == teacher_id]
        items.sort(key=lambda r: r.date)
        return items

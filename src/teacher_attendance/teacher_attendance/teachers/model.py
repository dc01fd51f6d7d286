from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_WORK_DAYS


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher and their weekly work schedule.

    ``work_days`` holds weekday numbers (0=Sunday .. 6=Saturday), unique and sorted.
    """

    teacher_id: str
    name: str
    subject: str
    profile_picture: Optional[str] = None
    work_days: tuple[int, ...] = DEFAULT_WORK_DAYS

    def works_on_weekday(self, weekday: int) -> bool:
        return weekday in self.work_days

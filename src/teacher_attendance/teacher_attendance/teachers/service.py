from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence
from urllib.parse import quote

from ..common.validators import normalize_work_days, optional_text, require_non_empty
from ..core.constants import AVATAR_URL_TEMPLATE, DEFAULT_SUBJECT, DEFAULT_WORK_DAYS
from ..core.exceptions import NotFoundError
from ..state.actions import AddTeacher, DeleteTeacher, UpdateTeacher, UpdateTeacherSchedule
from ..state.store import AppStore
from .model import Teacher

logger = logging.getLogger(__name__)


def default_avatar_url(name: str) -> str:
    return AVATAR_URL_TEMPLATE.format(seed=quote(name, safe=""))


def avatar_url(teacher: Teacher) -> str:
    """Profile picture, falling back to a generated initials avatar."""
    return teacher.profile_picture or default_avatar_url(teacher.name)


def new_teacher_id() -> str:
    return f"t-{uuid.uuid4().hex[:12]}"


class TeacherService:
    """Use cases around the teacher roster and weekly schedules."""

    def __init__(self, store: AppStore):
        self._store = store

    def list_teachers(self) -> Sequence[Teacher]:
        return self._store.state.teachers

    def get(self, teacher_id: str) -> Teacher:
        teacher = self._store.state.get_teacher(teacher_id)
        if not teacher:
            raise NotFoundError(f"Guru tidak ditemukan: {teacher_id}")
        return teacher

    def add(
        self,
        *,
        name: str,
        subject: Optional[str] = None,
        profile_picture: Optional[str] = None,
        work_days: Optional[Iterable[int]] = None,
        teacher_id: Optional[str] = None,
    ) -> Teacher:
        name = require_non_empty(name, "Nama guru")
        teacher = Teacher(
            teacher_id=teacher_id or new_teacher_id(),
            name=name,
            subject=optional_text(subject, "Mata pelajaran") or DEFAULT_SUBJECT,
            profile_picture=optional_text(profile_picture, "Foto profil") or default_avatar_url(name),
            work_days=normalize_work_days(DEFAULT_WORK_DAYS if work_days is None else work_days),
        )
        self._store.dispatch(AddTeacher(teacher))
        logger.info("Added teacher %s (%s)", teacher.teacher_id, teacher.name)
        return teacher

    def update(
        self,
        teacher_id: str,
        *,
        name: Optional[str] = None,
        subject: Optional[str] = None,
        profile_picture: Optional[str] = None,
        work_days: Optional[Iterable[int]] = None,
    ) -> Teacher:
        current = self.get(teacher_id)
        changes: dict = {}
        if name is not None:
            changes["name"] = require_non_empty(name, "Nama guru")
        if subject is not None:
            changes["subject"] = optional_text(subject, "Mata pelajaran") or DEFAULT_SUBJECT
        if profile_picture is not None:
            changes["profile_picture"] = optional_text(profile_picture, "Foto profil")
        if work_days is not None:
            changes["work_days"] = normalize_work_days(work_days)

        teacher = replace(current, **changes)
        self._store.dispatch(UpdateTeacher(teacher))
        return teacher

    def delete(self, teacher_id: str) -> None:
        self.get(teacher_id)
        self._store.dispatch(DeleteTeacher(teacher_id))
        logger.info("Deleted teacher %s; attendance rows are kept", teacher_id)

    def update_schedule(self, teacher_id: str, work_days: Iterable[int]) -> Teacher:
        self.get(teacher_id)
        days = normalize_work_days(work_days)
        self._store.dispatch(UpdateTeacherSchedule(teacher_id=teacher_id, work_days=days))
        return self.get(teacher_id)

    def save_schedules(self, schedules: Mapping[str, Iterable[int]]) -> int:
        """Bulk save of the schedule table; unknown ids are skipped."""
        normalized = {tid: normalize_work_days(days) for tid, days in schedules.items()}
        saved = 0
        for teacher_id, days in normalized.items():
            if self._store.state.get_teacher(teacher_id) is None:
                logger.warning("Skipping schedule for unknown teacher %s", teacher_id)
                continue
            self._store.dispatch(UpdateTeacherSchedule(teacher_id=teacher_id, work_days=days))
            saved += 1
        return saved

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_SUBJECT, DEFAULT_WORK_DAYS
from ..school_calendar.service import weekend_settings_for_year
from ..storage.repository import StateRepository
from ..teachers.model import Teacher
from ..teachers.service import default_avatar_url
from .model import AppState

logger = logging.getLogger(__name__)

DEFAULT_ROSTER = (
    "Ahmad Fauzi",
    "Budi Santoso",
    "Cecep Maulana",
    "Dewi Lestari",
    "Eka Fitriani",
    "Fitri Handayani",
    "Gita Permata",
    "Hesti Wulandari",
    "Indah Purnamasari",
    "Joko Prasetyo",
    "Kartono",
    "Lia Agustina",
    "Muhammad Rizki",
    "Nurhidayat",
)


def default_teachers() -> tuple[Teacher, ...]:
    return tuple(
        Teacher(
            teacher_id=f"t-{i}",
            name=name,
            subject=DEFAULT_SUBJECT,
            profile_picture=default_avatar_url(name),
            work_days=DEFAULT_WORK_DAYS,
        )
        for i, name in enumerate(DEFAULT_ROSTER, start=1)
    )


def seed_state(today: date) -> AppState:
    """Fresh install: default roster plus explicit weekends for this year."""
    return AppState(
        teachers=default_teachers(),
        attendance_records=(),
        calendar_settings=tuple(weekend_settings_for_year(today.year)),
    )


def load_initial_state(repository: Optional[StateRepository], today: date) -> AppState:
    """Persisted snapshot when usable, otherwise the seeded defaults.

    A snapshot without teachers counts as unusable.
    """
    state = repository.load() if repository is not None else None
    if state is not None and state.teachers:
        return state

    logger.info("No usable persisted state; seeding defaults for %s", today.year)
    state = seed_state(today)
    if repository is not None:
        repository.save(state)
    return state

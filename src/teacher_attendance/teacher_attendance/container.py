from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .attendance.service import AttendanceService
from .common.datetime_utils import today_local
from .core.constants import PRINT_SETTINGS_KEY, STATE_KEY
from .reports.service import ReportService
from .school_calendar.service import CalendarService
from .state.bootstrap import load_initial_state
from .state.store import AppStore
from .storage.json_storage import InMemoryStorage, JsonFileStorage
from .storage.repository import KeyValueStorage, PrintSettingsRepository, StateRepository
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    state_repo: StateRepository
    print_settings_repo: PrintSettingsRepository
    store: AppStore
    today_provider: Callable[[], date]

    teacher_service: TeacherService
    calendar_service: CalendarService
    attendance_service: AttendanceService
    report_service: ReportService


def build_storage(data_dir: Optional[str]) -> KeyValueStorage:
    if not data_dir:
        return InMemoryStorage()
    return JsonFileStorage(data_dir)


def build_container(
    *,
    storage: KeyValueStorage,
    state_key: str = STATE_KEY,
    print_settings_key: str = PRINT_SETTINGS_KEY,
    today_provider: Callable[[], date] = today_local,
) -> Container:
    state_repo = StateRepository(storage, state_key)
    print_settings_repo = PrintSettingsRepository(storage, print_settings_key)

    store = AppStore(load_initial_state(state_repo, today_provider()), state_repo)

    return Container(
        storage=storage,
        state_repo=state_repo,
        print_settings_repo=print_settings_repo,
        store=store,
        today_provider=today_provider,
        teacher_service=TeacherService(store),
        calendar_service=CalendarService(store),
        attendance_service=AttendanceService(store),
        report_service=ReportService(store, print_settings_repo, today_provider=today_provider),
    )

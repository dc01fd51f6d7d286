from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import today_local
from ..storage.repository import PrintSettingsRepository
from ..state.store import AppStore
from .aggregation import OVERALL_SERIES, Analysis, analyze
from .export import recap_to_xlsx
from .monthly import MonthlyRecap, build_monthly_recap
from .period import PeriodOption, default_period, period_options
from .print_settings import PrintSettings


class ReportService:
    """Read side: dashboard statistics, monthly recap, print metadata."""

    def __init__(
        self,
        store: AppStore,
        print_settings: PrintSettingsRepository,
        *,
        today_provider: Callable[[], date] = today_local,
    ):
        self._store = store
        self._print_settings = print_settings
        self._today = today_provider

    def dashboard(self, period_token: Optional[str] = None, *, today: Optional[date] = None) -> Analysis:
        today = today or self._today()
        state = self._store.state
        return analyze(
            period_token or default_period(today),
            teachers=state.teachers,
            calendar_settings=state.calendar_settings,
            attendance_records=state.attendance_records,
            today=today,
        )

    def period_options(self, year: Optional[int] = None) -> tuple[list[PeriodOption], str]:
        today = self._today()
        return period_options(year or today.year), default_period(today)

    def monthly_recap(self, year: int, month: int) -> MonthlyRecap:
        state = self._store.state
        return build_monthly_recap(
            year,
            month,
            teachers=state.teachers,
            calendar_settings=state.calendar_settings,
            attendance_records=state.attendance_records,
            today=self._today(),
        )

    def export_recap(self, year: int, month: int) -> bytes:
        return recap_to_xlsx(self.monthly_recap(year, month), self.get_print_settings())

    def get_print_settings(self) -> PrintSettings:
        return self._print_settings.load()

    def save_print_settings(self, data: dict) -> PrintSettings:
        settings = PrintSettings.from_dict(data, base=self.get_print_settings())
        self._print_settings.save(settings)
        return settings


def filter_trend(analysis: Analysis, teacher_ids: Iterable[str]) -> dict:
    """Trend series restricted to the selected teachers (overall always kept)."""
    wanted = set(teacher_ids)
    return {k: v for k, v in analysis.trend.series.items() if k == OVERALL_SERIES or k in wanted}

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import month_end
from ..core.constants import MONTH_NAMES
from ..core.enums import PeriodKind
from ..core.exceptions import InvalidPeriodError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_YEAR_RE = re.compile(r"^(\d{4})$")
_QUARTER_RE = re.compile(r"^(\d{4})-q([1-4])$")
_SEMESTER_RE = re.compile(r"^(\d{4})-s([12])$")

_ROMAN = ("I", "II", "III", "IV")


@dataclass(frozen=True)
class Period:
    """Inclusive reporting range resolved from a period token."""

    token: str
    kind: PeriodKind
    year: int
    start: date
    end: date

    @property
    def spans_multiple_months(self) -> bool:
        return (self.start.year, self.start.month) != (self.end.year, self.end.month)

    def months(self) -> list[tuple[int, int]]:
        """(year, month) pairs covered by the range, in order."""
        out: list[tuple[int, int]] = []
        year, month = self.start.year, self.start.month
        while (year, month) <= (self.end.year, self.end.month):
            out.append((year, month))
            month += 1
            if month > 12:
                year, month = year + 1, 1
        return out


@dataclass(frozen=True)
class PeriodOption:
    value: str
    label: str
    group: str


def _month_range(year: int, first_month: int, last_month: int) -> tuple[date, date]:
    try:
        return date(year, first_month, 1), month_end(year, last_month)
    except ValueError as e:
        raise InvalidPeriodError(f"Tahun di luar jangkauan: {year}") from e


def parse_period(token: str) -> Period:
    """Resolve ``YYYY-MM``, ``YYYY``, ``YYYY-qN`` or ``YYYY-sN`` to a date range.

    Any other token raises InvalidPeriodError instead of guessing a range.
    """
    token = (token or "").strip()

    m = _MONTH_RE.match(token)
    if m:
        year, month = int(m.group(1)), int(m.group(2))
        if not 1 <= month <= 12:
            raise InvalidPeriodError(f"Periode tidak dikenal: {token!r}")
        start, end = _month_range(year, month, month)
        return Period(token=token, kind=PeriodKind.MONTH, year=year, start=start, end=end)

    m = _QUARTER_RE.match(token)
    if m:
        year, q = int(m.group(1)), int(m.group(2))
        start, end = _month_range(year, (q - 1) * 3 + 1, q * 3)
        return Period(token=token, kind=PeriodKind.QUARTER, year=year, start=start, end=end)

    m = _SEMESTER_RE.match(token)
    if m:
        year, s = int(m.group(1)), int(m.group(2))
        start, end = _month_range(year, (s - 1) * 6 + 1, s * 6)
        return Period(token=token, kind=PeriodKind.SEMESTER, year=year, start=start, end=end)

    m = _YEAR_RE.match(token)
    if m:
        year = int(m.group(1))
        start, end = _month_range(year, 1, 12)
        return Period(token=token, kind=PeriodKind.YEAR, year=year, start=start, end=end)

    raise InvalidPeriodError(f"Periode tidak dikenal: {token!r}")


def month_token(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def default_period(today: date) -> str:
    return month_token(today.year, today.month)


def period_options(year: int) -> list[PeriodOption]:
    """Enumerated period tokens offered for selection in a given year."""
    options = [
        PeriodOption(value=month_token(year, i + 1), label=f"{name} {year}", group="Bulan")
        for i, name in enumerate(MONTH_NAMES)
    ]
    options += [
        PeriodOption(value=f"{year}-q{q}", label=f"Triwulan {_ROMAN[q - 1]} ({year})", group="Triwulan")
        for q in range(1, 5)
    ]
    options += [
        PeriodOption(value=f"{year}-s{s}", label=f"Semester {s} ({year})", group="Semester")
        for s in (1, 2)
    ]
    options.append(PeriodOption(value=str(year), label=f"Tahun {year}", group="Tahun"))
    return options


def period_label(period: Period) -> str:
    if period.kind == PeriodKind.MONTH:
        return f"{MONTH_NAMES[period.start.month - 1]} {period.year}"
    for option in period_options(period.year):
        if option.value == period.token:
            return option.label
    return period.token


def parse_month(token: str) -> tuple[int, int]:
    """(year, month) of a ``YYYY-MM`` token; other period forms are rejected."""
    period = parse_period(token)
    if period.kind != PeriodKind.MONTH:
        raise InvalidPeriodError(f"Bulan harus berformat YYYY-MM: {token!r}")
    return period.year, period.start.month

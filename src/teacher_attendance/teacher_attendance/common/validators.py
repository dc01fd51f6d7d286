from __future__ import annotations

import re
from typing import Any, Iterable, Optional

from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} tidak boleh kosong")
    return str(value).strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    """Stripped text, or None when missing or blank; non-strings are rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} harus berupa teks")
    return value.strip() or None


def normalize_work_days(values: Iterable[int]) -> tuple[int, ...]:
    """Deduplicate and sort weekday numbers (0=Sunday .. 6=Saturday)."""
    if isinstance(values, (str, bytes, dict)):
        raise ValidationError(f"Hari kerja harus berupa daftar: {values!r}")
    try:
        items = list(values)
    except TypeError as e:
        raise ValidationError(f"Hari kerja harus berupa daftar: {values!r}") from e

    days: set[int] = set()
    for v in items:
        try:
            day = int(v)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Hari kerja tidak valid: {v!r}") from e
        if day < 0 or day > 6:
            raise ValidationError(f"Hari kerja tidak valid: {v!r}")
        days.add(day)
    return tuple(sorted(days))


def require_time_of_day(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _TIME_RE.match(value):
        raise ValidationError(f"{field_name} harus berformat HH:MM")
    return value

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any


@dataclass(frozen=True)
class PrintSettings:
    """Header/footer metadata for the printed monthly recap."""

    title: str = "DAFTAR HADIR GURU SMP IT ADIFATHI JATIWANGI"
    school_year: str = "2025/2026"
    city: str = "Majalengka"
    principal_name: str = "KOMARUDIN, S.Pd.I"

    def to_dict(self) -> dict:
        d = asdict(self)
        return {
            "title": d["title"],
            "schoolYear": d["school_year"],
            "city": d["city"],
            "principalName": d["principal_name"],
        }

    @classmethod
    def from_dict(cls, data: Any, *, base: "PrintSettings | None" = None) -> "PrintSettings":
        """Merge a (possibly partial) camelCase document over ``base``."""
        base = base or cls()
        if not isinstance(data, dict):
            return base
        changes = {}
        for key, attr in (("title", "title"), ("schoolYear", "school_year"), ("city", "city"), ("principalName", "principal_name")):
            value = data.get(key)
            if isinstance(value, str):
                changes[attr] = value
        return replace(base, **changes)

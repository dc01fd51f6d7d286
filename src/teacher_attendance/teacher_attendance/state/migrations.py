"""Versioned upgrades of the persisted state document.

Documents written before versioning carry no ``schemaVersion`` and are
treated as version 0. Each step upgrades exactly one version.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..core.constants import DEFAULT_WORK_DAYS, SCHEMA_VERSION

logger = logging.getLogger(__name__)

Document = dict[str, Any]


def _v0_to_v1(doc: Document) -> Document:
    # Teachers saved before personal schedules existed work Mon-Fri.
    teachers = []
    for t in doc.get("teachers") or []:
        if isinstance(t, dict) and "workDays" not in t:
            t = {**t, "workDays": list(DEFAULT_WORK_DAYS)}
        teachers.append(t)
    return {**doc, "teachers": teachers}


_STEPS: dict[int, Callable[[Document], Document]] = {
    0: _v0_to_v1,
}


def document_version(doc: Document) -> int:
    return int(doc.get("schemaVersion", 0))


def upgrade(doc: Document) -> Document:
    """Apply every pending step so the document matches SCHEMA_VERSION."""
    version = document_version(doc)
    if version > SCHEMA_VERSION:
        raise ValueError(f"State schema v{version} is newer than supported v{SCHEMA_VERSION}")

    while version < SCHEMA_VERSION:
        doc = _STEPS[version](doc)
        version += 1
        logger.info("Upgraded persisted state to schema v%s", version)

    return {**doc, "schemaVersion": SCHEMA_VERSION}

from __future__ import annotations

import json

import pytest

from teacher_attendance.core.constants import SCHEMA_VERSION
from teacher_attendance.state.migrations import upgrade
from teacher_attendance.storage.json_storage import InMemoryStorage
from teacher_attendance.storage.repository import StateRepository

LEGACY = {
    "teachers": [
        {"id": "t-1", "name": "Ahmad", "subject": "IPA"},
        {"id": "t-2", "name": "Budi", "subject": "IPS", "workDays": [1, 3]},
    ],
    "attendanceRecords": [],
    "calendarSettings": [],
}


def test_legacy_teachers_get_monday_to_friday():
    doc = upgrade(LEGACY)

    assert doc["schemaVersion"] == SCHEMA_VERSION
    assert doc["teachers"][0]["workDays"] == [1, 2, 3, 4, 5]
    assert doc["teachers"][1]["workDays"] == [1, 3]
    assert "workDays" not in LEGACY["teachers"][0]


def test_current_documents_pass_through():
    doc = {**LEGACY, "schemaVersion": SCHEMA_VERSION, "teachers": []}
    assert upgrade(doc) == doc


def test_newer_schema_is_refused():
    with pytest.raises(ValueError):
        upgrade({**LEGACY, "schemaVersion": SCHEMA_VERSION + 1})


def test_repository_applies_migration_on_load():
    kv = InMemoryStorage({"attendanceApp": json.dumps(LEGACY)})
    state = StateRepository(kv, "attendanceApp").load()

    assert state.teachers[0].work_days == (1, 2, 3, 4, 5)
    assert state.teachers[1].work_days == (1, 3)

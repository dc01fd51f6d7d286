from __future__ import annotations

import json
import logging
from typing import Optional, Protocol

from ..core.exceptions import DomainError
from ..reports.print_settings import PrintSettings
from ..state.migrations import upgrade
from ..state.model import AppState
from .codec import state_from_document, state_to_document

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised by key-value backends when a read or write cannot complete."""


class KeyValueStorage(Protocol):
    """Durable string storage addressed by well-known keys."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``; raises StorageError on failure."""

        raise NotImplementedError


class StateRepository:
    """Loads/saves the whole AppState as one JSON document under one key."""

    def __init__(self, storage: KeyValueStorage, key: str):
        self._storage = storage
        self._key = key

    def load(self) -> Optional[AppState]:
        """Return the persisted snapshot, or None when absent or malformed."""
        try:
            raw = self._storage.get(self._key)
        except StorageError:
            logger.exception("Could not read state %r", self._key)
            return None
        if raw is None:
            return None

        try:
            doc = json.loads(raw)
            if not isinstance(doc, dict):
                raise TypeError("State document must be an object")
            return state_from_document(upgrade(doc))
        except (ValueError, KeyError, TypeError, DomainError):
            logger.warning("Ignoring malformed persisted state %r", self._key, exc_info=True)
            return None

    def save(self, state: AppState) -> bool:
        """Persist ``state``; a failure is logged and reported as False."""
        try:
            self._storage.set(self._key, json.dumps(state_to_document(state), ensure_ascii=False))
        except StorageError:
            logger.exception("Could not write state %r", self._key)
            return False
        return True


class PrintSettingsRepository:
    def __init__(self, storage: KeyValueStorage, key: str, *, defaults: Optional[PrintSettings] = None):
        self._storage = storage
        self._key = key
        self._defaults = defaults or PrintSettings()

    def load(self) -> PrintSettings:
        try:
            raw = self._storage.get(self._key)
        except StorageError:
            logger.exception("Could not read print settings %r", self._key)
            return self._defaults
        if raw is None:
            return self._defaults

        try:
            return PrintSettings.from_dict(json.loads(raw), base=self._defaults)
        except ValueError:
            logger.warning("Ignoring malformed print settings %r", self._key)
            return self._defaults

    def save(self, settings: PrintSettings) -> bool:
        try:
            self._storage.set(self._key, json.dumps(settings.to_dict(), ensure_ascii=False))
        except StorageError:
            logger.exception("Could not write print settings %r", self._key)
            return False
        return True

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..storage.repository import StateRepository
from .actions import Action
from .model import AppState
from .reducer import reduce

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]


class AppStore:
    """Holds the current snapshot and persists it after every transition.

    The in-memory snapshot is authoritative for the session; a failed save is
    logged by the repository and never rolls the state back.
    """

    def __init__(self, initial_state: AppState, repository: Optional[StateRepository] = None):
        self._state = initial_state
        self._repository = repository
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        self._state = reduce(self._state, action)
        logger.debug("dispatched %s", type(action).__name__)

        if self._repository is not None and not self._repository.save(self._state):
            logger.warning("State kept in memory only; last %s was not persisted", type(action).__name__)

        for listener in list(self._listeners):
            listener(self._state)
        return self._state

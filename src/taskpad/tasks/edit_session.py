# src/taskpad/tasks/edit_session.py

from __future__ import annotations

"""
Single-slot edit state machine.

    Idle --begin(id)--> Editing(id)        (only if id is in the store)
    Editing(id) --commit(text)--> Idle     (always, even if the text is rejected)
    Editing(id) --cancel()--> Idle         (no store mutation)
    Editing(id) --begin(id2)--> Editing(id2)  (implicit commit of the current draft first)
    Editing(id) --task deleted/cleared--> Idle
"""

import logging
from dataclasses import dataclass

from .task_models import TaskDeleted, TaskEvent, TasksCleared
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Idle:
    pass


@dataclass(slots=True, frozen=True)
class Editing:
    task_id: int
    draft: str


EditState = Idle | Editing

IDLE = Idle()


class EditSession:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._state: EditState = IDLE
        store.subscribe(self._on_task_event)

    def close(self) -> None:
        """Detach from the store."""
        self._store.unsubscribe(self._on_task_event)

    # ---- state ----

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return isinstance(self._state, Editing)

    @property
    def task_id(self) -> int | None:
        return self._state.task_id if isinstance(self._state, Editing) else None

    @property
    def draft(self) -> str | None:
        return self._state.draft if isinstance(self._state, Editing) else None

    # ---- transitions ----

    def begin(self, task_id: int) -> bool:
        """
        Enter edit mode for `task_id`.

        Refused (returns False) when the task does not exist. If another
        task is being edited, its draft is committed first.
        """
        if isinstance(self._state, Editing) and self._state.task_id == task_id:
            return True

        task = self._store.get(task_id)
        if task is None:
            logger.debug("begin: no task id=%s; staying %s", task_id, type(self._state).__name__)
            return False

        if isinstance(self._state, Editing):
            # A PersistenceError from here propagates with the session already Idle.
            logger.debug("begin: committing edit of id=%s before editing id=%s", self._state.task_id, task_id)
            self.commit()

        self._state = Editing(task_id=task_id, draft=task.text)
        logger.debug("Editing id=%s", task_id)
        return True

    def set_draft(self, text: str) -> None:
        if isinstance(self._state, Editing):
            self._state = Editing(task_id=self._state.task_id, draft=text)

    def commit(self, new_text: str | None = None) -> bool:
        """
        Apply `new_text` (or the current draft) and return to Idle.

        Returns True when the store accepted the text. Rejected text ends
        the session too and the task keeps its previous text.
        """
        if not isinstance(self._state, Editing):
            return False
        task_id = self._state.task_id
        text = self._state.draft if new_text is None else new_text
        self._state = IDLE
        applied = self._store.update(task_id, text)
        if not applied:
            logger.info("Edit of id=%s discarded (empty text); previous text kept.", task_id)
        return applied

    def cancel(self) -> None:
        if isinstance(self._state, Editing):
            logger.debug("Edit of id=%s cancelled", self._state.task_id)
        self._state = IDLE

    # ---- store events ----

    def _on_task_event(self, event: TaskEvent) -> None:
        if not isinstance(event, (TaskDeleted, TasksCleared)):
            return
        task_id = self.task_id
        if task_id is not None and task_id not in self._store:
            logger.debug("Edited task id=%s was removed; edit session reset", task_id)
            self._state = IDLE

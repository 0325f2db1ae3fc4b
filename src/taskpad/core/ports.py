# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task engine depends on Protocols instead of concrete implementations.
This keeps storage backends and the notification surface swappable
and makes testing easier.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from ..tasks.task_models import Task, TaskEvent

TaskListener = Callable[[TaskEvent], None]


class KeyValueStore(Protocol):
    """
    Synchronous blob storage keyed by string (local analogue of browser storage).

    Implementations raise PersistenceError when the backend fails.
    get() returns None for a missing key.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class PersistenceAdapter(Protocol):
    """
    Whole-collection snapshot persistence used by TaskStore.

    - load() is called once at startup; malformed/absent data -> []
    - save() is called after every mutating operation with the full collection
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...


class NotificationChannel(Protocol):
    """Fire-and-forget ephemeral message display."""

    def notify(self, message: str) -> None: ...

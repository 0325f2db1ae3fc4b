# src/taskpad/core/notifications.py

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import TaskAdded, TaskDeleted, TaskEvent, TasksCleared, TaskUpdated
from .ports import NotificationChannel

logger = logging.getLogger(__name__)

DEFAULT_HOLD_SECONDS = 3.0


def notification_for(event: TaskEvent) -> str | None:
    """User-facing message for a task event (None -> nothing to show)."""
    if isinstance(event, TaskAdded):
        return "Task added successfully!"
    if isinstance(event, TaskDeleted):
        return "Task deleted!"
    if isinstance(event, TaskUpdated):
        return "Task updated!"
    if isinstance(event, TasksCleared):
        return f"{event.count} completed tasks cleared!"
    return None


def forward_events_to(channel: NotificationChannel) -> Callable[[TaskEvent], None]:
    """Build a TaskStore listener that sends event messages to `channel`."""

    def _listener(event: TaskEvent) -> None:
        message = notification_for(event)
        if message is not None:
            channel.notify(message)

    return _listener


@dataclass(slots=True, frozen=True)
class Notice:
    message: str
    posted_at: float
    expires_at: float


class NotificationBoard:
    """
    Holds ephemeral messages for a fixed time.

    The console redraws the board on every prompt; a notice shows up
    while now < expires_at and is dropped afterwards.
    """

    def __init__(
        self,
        *,
        hold_seconds: float = DEFAULT_HOLD_SECONDS,
        clock: Callable[[], float] | None = None,
        max_items: int = 5,
    ) -> None:
        self._hold = max(0.0, float(hold_seconds))
        self._clock = clock or time.monotonic
        self._notices: deque[Notice] = deque(maxlen=max(1, int(max_items)))

    def notify(self, message: str) -> None:
        now = self._clock()
        self._notices.append(Notice(message=message, posted_at=now, expires_at=now + self._hold))
        logger.debug("Notification: %s", message)

    def dismiss_expired(self) -> None:
        now = self._clock()
        while self._notices and self._notices[0].expires_at <= now:
            self._notices.popleft()

    def active(self) -> list[str]:
        self.dismiss_expired()
        return [n.message for n in self._notices]

    def clear(self) -> None:
        self._notices.clear()

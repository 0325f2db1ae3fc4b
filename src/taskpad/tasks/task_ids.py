# src/taskpad/tasks/task_ids.py

from __future__ import annotations

import time
from collections.abc import Callable, Iterable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskIdAllocator:
    """
    Millisecond-clock ids with a counter fallback.

    next() returns max(clock_ms, last + 1), so two creates in the same
    millisecond (or a clock that goes backwards) still get distinct,
    increasing ids.
    """

    def __init__(self, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or _now_ms
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def observe(self, ids: Iterable[int]) -> None:
        """Make sure future ids are above every id already in use."""
        for task_id in ids:
            if task_id > self._last:
                self._last = task_id

    def next(self) -> int:
        candidate = int(self._clock_ms())
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate

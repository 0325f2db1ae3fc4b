# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any

from ..core.errors import PersistenceError
from ..core.ports import PersistenceAdapter, TaskListener
from .task_ids import TaskIdAllocator
from .task_models import (
    Task,
    TaskAdded,
    TaskCounts,
    TaskDeleted,
    TaskEvent,
    TasksCleared,
    TaskToggled,
    TaskUpdated,
    normalize,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    In-memory ordered task collection with snapshot persistence.

    - every mutating operation writes the whole collection through the
      PersistenceAdapter (no deltas)
    - rejected input and unknown ids are silent no-ops (None/False return)
    - a failed write raises PersistenceError after the in-memory change
      and the event have been applied

    The store is the only owner of Task objects; readers get tuples.
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        *,
        tasks: Iterable[Task] = (),
        ids: TaskIdAllocator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = []
        self._ids = ids or TaskIdAllocator()
        self._clock = clock or _utc_now
        self._listeners: list[TaskListener] = []

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                logger.warning("Dropping task with duplicate id=%s", task.id)
                continue
            seen.add(task.id)
            self._tasks.append(task)
        self._ids.observe(seen)

    @classmethod
    def open(
        cls,
        persistence: PersistenceAdapter,
        *,
        ids: TaskIdAllocator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> TaskStore:
        """Load the snapshot once and build the store around it."""
        tasks = persistence.load()
        store = cls(persistence, tasks=tasks, ids=ids, clock=clock)
        counts = store.filtered_count()
        logger.info("TaskStore ready total=%d active=%d", counts.total, counts.active)
        return store

    # ---- events ----

    def subscribe(self, listener: TaskListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: TaskListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self, event: TaskEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Task listener failed for %s", event)

    def _commit(self, event: TaskEvent | None, result: Any = None) -> Any:
        """Persist the full collection, then publish; re-raise write errors with the result."""
        try:
            self._persistence.save(self._tasks)
        except PersistenceError as e:
            logger.warning("Snapshot write failed: %s", e)
            raise PersistenceError(str(e), result=result) from e
        finally:
            # The mutation is already applied; listeners hear about it whatever save() did.
            if event is not None:
                self._publish(event)
        return result

    # ---- reads ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return self._find(task_id) is not None

    def _find(self, task_id: object) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def get(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def filtered_count(self) -> TaskCounts:
        active = sum(1 for t in self._tasks if not t.completed)
        return TaskCounts(active=active, total=len(self._tasks))

    # ---- mutations ----

    def create(self, raw_text: str | None) -> int | None:
        text = normalize(raw_text)
        if text is None:
            logger.debug("Rejected empty task text.")
            return None

        task = Task(id=self._ids.next(), text=text, completed=False, created_at=self._clock())
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return self._commit(TaskAdded(task_id=task.id, text=text), result=task.id)

    def toggle_complete(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            logger.debug("toggle_complete: no task id=%s", task_id)
            return False
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return self._commit(TaskToggled(task_id=task_id, completed=task.completed), result=True)

    def delete(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            logger.debug("delete: no task id=%s", task_id)
            return False
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        return self._commit(TaskDeleted(task_id=task_id), result=True)

    def update(self, task_id: int, raw_text: str | None) -> bool:
        task = self._find(task_id)
        if task is None:
            logger.debug("update: no task id=%s", task_id)
            return False
        text = normalize(raw_text)
        if text is None:
            logger.debug("update: rejected empty text for id=%s; keeping previous text", task_id)
            return False
        task.text = text
        logger.debug("Task updated id=%s", task_id)
        return self._commit(TaskUpdated(task_id=task_id, text=text), result=True)

    def clear_completed(self) -> int:
        remaining = [t for t in self._tasks if not t.completed]
        count = len(self._tasks) - len(remaining)
        self._tasks[:] = remaining
        logger.debug("Cleared %d completed task(s)", count)
        return self._commit(TasksCleared(count=count), result=count)

    def seed(self, texts: Iterable[str]) -> list[int]:
        """
        Add starter tasks to an empty store with a single snapshot write.

        No events are published. Non-empty stores are left untouched.
        """
        if self._tasks:
            return []
        now = self._clock()
        added: list[int] = []
        for raw in texts:
            text = normalize(raw)
            if text is None:
                continue
            task = Task(id=self._ids.next(), text=text, completed=False, created_at=now)
            self._tasks.append(task)
            added.append(task.id)
        if not added:
            return added
        logger.info("Seeded %d starter task(s)", len(added))
        return self._commit(None, result=added)

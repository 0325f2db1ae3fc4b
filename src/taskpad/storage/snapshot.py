# src/taskpad/storage/snapshot.py

"""
Snapshot codec and the PersistenceAdapter built on top of a KeyValueStore.

Wire format (one value under one key, default "todos"):

    [{"id": 1, "text": "Buy milk", "completed": false,
      "createdAt": "2024-05-01T10:00:00.123456+00:00"}, ...]

Decoding is tolerant: the snapshot may come from an older version of the app
(fractional ids, "Z" timestamps) or be hand-edited. Anything that is not a
list decodes to an empty collection; bad records are skipped or repaired.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any

from ..core.errors import PersistenceError
from ..core.ports import KeyValueStore
from ..tasks.task_models import Task, normalize

logger = logging.getLogger(__name__)

DEFAULT_KEY = "todos"


def _utc_now() -> datetime:
    return datetime.now(UTC)


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": task.created_at.isoformat(),
    }


def encode_snapshot(tasks: Sequence[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)


def _parse_id(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


def _parse_created_at(raw: Any, fallback: datetime) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        return fallback
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        return fallback
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def decode_snapshot(raw: str | None, *, now: datetime | None = None) -> list[Task]:
    """
    Parse a stored snapshot into Tasks, preserving order.

    - None / invalid JSON / non-list -> []
    - records without usable text are dropped
    - missing, fractional or duplicate ids get fresh ids above the largest valid one
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Snapshot is not valid JSON; starting with an empty list.")
        return []
    if not isinstance(data, list):
        logger.warning("Snapshot is not a list (got %s); starting with an empty list.", type(data).__name__)
        return []

    fallback_ts = now or _utc_now()
    parsed: list[tuple[int | None, str, bool, datetime]] = []
    seen: set[int] = set()

    for item in data:
        if not isinstance(item, dict):
            continue
        text = normalize(item.get("text")) if isinstance(item.get("text"), str) else None
        if text is None:
            logger.debug("Skipping snapshot record without text: %r", item)
            continue
        task_id = _parse_id(item.get("id"))
        if task_id is not None:
            if task_id in seen:
                task_id = None
            else:
                seen.add(task_id)
        created_at = _parse_created_at(item.get("createdAt", item.get("created_at")), fallback_ts)
        parsed.append((task_id, text, item.get("completed") is True, created_at))

    next_id = max(seen, default=0) + 1
    tasks: list[Task] = []
    for task_id, text, completed, created_at in parsed:
        if task_id is None:
            task_id = next_id
            next_id += 1
        tasks.append(Task(id=task_id, text=text, completed=completed, created_at=created_at))

    repaired = len(parsed) - len(seen)
    if repaired:
        logger.info("Assigned fresh ids to %d snapshot record(s).", repaired)
    return tasks


class SnapshotPersistence:
    """PersistenceAdapter: full collection as one JSON value under one key."""

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        key: str = DEFAULT_KEY,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock or _utc_now
        # Set when load() could not read the stored value: saving would replace
        # a snapshot this session never saw.
        self._load_failed = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def load_failed(self) -> bool:
        return self._load_failed

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except PersistenceError:
            self._load_failed = True
            raise
        self._load_failed = False
        tasks = decode_snapshot(raw, now=self._clock())
        logger.info("Loaded %d task(s) from key=%s", len(tasks), self._key)
        return tasks

    def _check_writable(self) -> None:
        """After a failed load, only write once the key reads back as absent."""
        if not self._load_failed:
            return
        if self._storage.get(self._key) is not None:
            raise PersistenceError(
                f"Stored snapshot under key={self._key} could not be loaded; refusing to overwrite it."
            )
        logger.info("Snapshot key=%s is readable and empty now; saving enabled.", self._key)
        self._load_failed = False

    def save(self, tasks: Sequence[Task]) -> None:
        self._check_writable()
        self._storage.set(self._key, encode_snapshot(tasks))

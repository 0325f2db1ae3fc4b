# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import NamedTuple

MAX_TEXT_LENGTH = 100


class FilterMode(StrEnum):
    """Which subset of the collection is visible."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool
    created_at: datetime


class TaskCounts(NamedTuple):
    active: int
    total: int


def normalize(raw_text: str | None) -> str | None:
    """
    Trim surrounding whitespace.

    Returns None (rejected) when nothing is left.
    """
    if raw_text is None:
        return None
    text = str(raw_text).strip()
    return text or None


# ---- events published by TaskStore ----


@dataclass(slots=True, frozen=True)
class TaskAdded:
    task_id: int
    text: str


@dataclass(slots=True, frozen=True)
class TaskToggled:
    task_id: int
    completed: bool


@dataclass(slots=True, frozen=True)
class TaskUpdated:
    task_id: int
    text: str


@dataclass(slots=True, frozen=True)
class TaskDeleted:
    task_id: int


@dataclass(slots=True, frozen=True)
class TasksCleared:
    count: int


TaskEvent = TaskAdded | TaskToggled | TaskUpdated | TaskDeleted | TasksCleared

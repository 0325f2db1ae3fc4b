# src/taskpad/tasks/filter_view.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import FilterMode, Task


def parse_mode(raw: FilterMode | str) -> FilterMode:
    """Accept a FilterMode or its name (case-insensitive). Unknown names raise ValueError."""
    if isinstance(raw, FilterMode):
        return raw
    return FilterMode(str(raw).strip().lower())


def apply(tasks: Iterable[Task], mode: FilterMode | str) -> list[Task]:
    """Order-preserving subset of `tasks` for the given mode. Input is not modified."""
    mode = parse_mode(mode)
    if mode is FilterMode.ACTIVE:
        return [t for t in tasks if not t.completed]
    if mode is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)

# tests/test_filter_view.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taskpad.tasks import filter_view
from taskpad.tasks.task_models import FilterMode, Task


def _task(task_id: int, completed: bool) -> Task:
    return Task(
        id=task_id,
        text=f"task {task_id}",
        completed=completed,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.mark.parametrize(
    "flags",
    [
        [],
        [False],
        [True],
        [True, False, True, False, False],
        [True, True, True],
    ],
)
def test_active_and_completed_partition_all(flags: list[bool]) -> None:
    tasks = [_task(i, f) for i, f in enumerate(flags, start=1)]

    active = filter_view.apply(tasks, FilterMode.ACTIVE)
    completed = filter_view.apply(tasks, FilterMode.COMPLETED)

    active_ids = {t.id for t in active}
    completed_ids = {t.id for t in completed}
    assert active_ids | completed_ids == {t.id for t in tasks}
    assert active_ids.isdisjoint(completed_ids)


def test_apply_preserves_order_and_input() -> None:
    tasks = [_task(3, False), _task(1, True), _task(2, False)]
    snapshot = list(tasks)

    assert [t.id for t in filter_view.apply(tasks, "active")] == [3, 2]
    assert [t.id for t in filter_view.apply(tasks, "completed")] == [1]
    everything = filter_view.apply(tasks, "all")
    assert everything == tasks
    assert everything is not tasks
    assert tasks == snapshot


def test_apply_is_repeatable() -> None:
    tasks = [_task(1, True), _task(2, False)]
    assert filter_view.apply(tasks, "active") == filter_view.apply(tasks, "active")


def test_parse_mode() -> None:
    assert filter_view.parse_mode("  Active ") is FilterMode.ACTIVE
    assert filter_view.parse_mode(FilterMode.COMPLETED) is FilterMode.COMPLETED
    with pytest.raises(ValueError):
        filter_view.parse_mode("done")

# tests/test_notifications.py

from __future__ import annotations

from taskpad.core.notifications import NotificationBoard, forward_events_to, notification_for
from taskpad.tasks.task_models import TaskAdded, TaskDeleted, TasksCleared, TaskToggled, TaskUpdated
from taskpad.tasks.task_store import TaskStore

from .fakes import ManualClock, RecordingNotifier


def test_messages_for_events() -> None:
    assert notification_for(TaskAdded(task_id=1, text="a")) == "Task added successfully!"
    assert notification_for(TaskDeleted(task_id=1)) == "Task deleted!"
    assert notification_for(TaskUpdated(task_id=1, text="b")) == "Task updated!"
    assert notification_for(TasksCleared(count=2)) == "2 completed tasks cleared!"
    assert notification_for(TaskToggled(task_id=1, completed=True)) is None


def test_store_events_reach_channel(store: TaskStore) -> None:
    notifier = RecordingNotifier()
    store.subscribe(forward_events_to(notifier))

    task_id = store.create("x")
    store.toggle_complete(task_id)
    store.update(task_id, "y")
    store.clear_completed()

    assert notifier.messages == [
        "Task added successfully!",
        "Task updated!",
        "1 completed tasks cleared!",
    ]


def test_board_holds_messages_for_fixed_time() -> None:
    clock = ManualClock()
    board = NotificationBoard(hold_seconds=3.0, clock=clock)

    board.notify("first")
    clock.advance(2.0)
    board.notify("second")
    assert board.active() == ["first", "second"]

    clock.advance(1.0)
    assert board.active() == ["second"]

    clock.advance(2.0)
    assert board.active() == []


def test_board_keeps_only_latest_items() -> None:
    board = NotificationBoard(clock=ManualClock(), max_items=2)
    for msg in ("a", "b", "c"):
        board.notify(msg)
    assert board.active() == ["b", "c"]

    board.clear()
    assert board.active() == []

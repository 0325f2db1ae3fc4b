# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, handle_text, registry
from taskpad.core.state import AppState
from taskpad.tasks.task_models import FilterMode, MAX_TEXT_LENGTH


def _texts(state: AppState) -> list[str]:
    return [t.text for t in state.store.tasks()]


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_done_clear_through_row_numbers(state: AppState) -> None:
    registry.handle(state, "/add Buy milk")
    handle_text(state, "Walk dog")
    registry.handle(state, "/list")

    registry.handle(state, "/done 1")
    assert state.store.filtered_count() == (1, 2)

    registry.handle(state, "/clear")
    assert _texts(state) == ["Walk dog"]
    assert state.notifications.active()[-1] == "1 completed tasks cleared!"


def test_row_numbers_resolve_against_filtered_view(state: AppState) -> None:
    for text in ("A", "B", "C"):
        handle_text(state, text)
    state.refresh_view()
    registry.handle(state, "/done 2")

    registry.handle(state, "/filter active")
    assert state.filter_mode is FilterMode.ACTIVE
    state.refresh_view()
    registry.handle(state, "/rm 2")

    assert _texts(state) == ["A", "B"]


def test_bad_row_numbers_are_usage_errors(state: AppState) -> None:
    handle_text(state, "only")
    state.refresh_view()
    assert "Usage" in registry.handle(state, "/done 5")
    assert "Usage" in registry.handle(state, "/rm x")
    assert "Usage" in registry.handle(state, "/edit")
    assert _texts(state) == ["only"]


def test_edit_flow(state: AppState) -> None:
    handle_text(state, "old text")
    state.refresh_view()

    shown: list[str] = []
    reply = registry.handle(state, "/edit 1", emit=shown.append)
    assert state.edit_session.is_editing
    assert shown == ["Editing: old text"]
    assert "/save" in reply

    assert handle_text(state, "new text") is None
    assert _texts(state) == ["new text"]
    assert not state.edit_session.is_editing


def test_edit_inline_and_blank_commit(state: AppState) -> None:
    handle_text(state, "keep")
    state.refresh_view()

    assert registry.handle(state, "/edit 1 changed") == ""
    assert _texts(state) == ["changed"]

    registry.handle(state, "/edit 1")
    assert handle_text(state, "   ") == "Edit discarded: task text cannot be empty."
    assert _texts(state) == ["changed"]
    assert not state.edit_session.is_editing


def test_save_and_cancel(state: AppState) -> None:
    assert registry.handle(state, "/save") == "Nothing is being edited."
    assert registry.handle(state, "/cancel") == "Nothing is being edited."

    handle_text(state, "x")
    state.refresh_view()
    registry.handle(state, "/edit 1")
    assert registry.handle(state, "/cancel") == "Edit cancelled."
    assert _texts(state) == ["x"]

    registry.handle(state, "/edit 1")
    assert registry.handle(state, "/save y z") == ""
    assert _texts(state) == ["y z"]


def test_filter_command(state: AppState) -> None:
    assert "Filter: all" in registry.handle(state, "/filter")
    assert "Unknown filter" in registry.handle(state, "/filter done")
    assert registry.handle(state, "/filter Completed") == ""
    assert state.filter_mode is FilterMode.COMPLETED


def test_text_is_clipped_and_blank_rejected(state: AppState) -> None:
    assert handle_text(state, "   ") == "Task text cannot be empty."
    assert registry.handle(state, "/add") == "Usage: /add <text>"

    handle_text(state, "y" * (MAX_TEXT_LENGTH + 20))
    assert _texts(state) == ["y" * MAX_TEXT_LENGTH]


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help")
    for name in ("/add", "/done", "/edit", "/rm", "/clear", "/filter"):
        assert name in text

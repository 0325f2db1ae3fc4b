# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.render import format_view
from ..core.state import AppState
from ..tasks import filter_view
from ..tasks.task_models import FilterMode, MAX_TEXT_LENGTH

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Plain text adds a task (or saves the task being edited).")
        return "\n".join(lines)


registry = CommandRegistry()


def clip_text(raw: str) -> str:
    """Input box limit: keep at most MAX_TEXT_LENGTH characters."""
    return raw[:MAX_TEXT_LENGTH]


def _join(args: list[str]) -> str:
    return clip_text(" ".join(args))


def _resolve_row(state: AppState, args: list[str]) -> int | None:
    """First arg is a row number from the last rendered list -> task id."""
    if not args:
        return None
    try:
        number = int(args[0])
    except ValueError:
        return None
    view = state.view or state.refresh_view()
    return view.task_id_for(number)


def handle_text(state: AppState, text: str) -> str | None:
    """Plain (non-command) input: commit the active edit, otherwise add a task."""
    text = clip_text(text)
    if state.edit_session.is_editing:
        applied = state.edit_session.commit(text)
        return None if applied else "Edit discarded: task text cannot be empty."
    task_id = state.store.create(text)
    return None if task_id is not None else "Task text cannot be empty."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return "\n".join(format_view(state.refresh_view()))


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>
    """
    if not args:
        return "Usage: /add <text>"
    task_id = state.store.create(_join(args))
    if task_id is None:
        return "Task text cannot be empty."
    return ""


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <n>  -> toggle completion of row n
    """
    task_id = _resolve_row(state, args)
    if task_id is None:
        return "Usage: /done <row number from the list>"
    state.store.toggle_complete(task_id)
    return ""


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit <n>         -> start editing row n (type the new text next)
    /edit <n> <text>  -> replace the text of row n right away
    """
    task_id = _resolve_row(state, args)
    if task_id is None:
        return "Usage: /edit <row number> [new text]"
    if not state.edit_session.begin(task_id):
        return "That task no longer exists."
    if len(args) > 1:
        if not state.edit_session.commit(_join(args[1:])):
            return "Edit discarded: task text cannot be empty."
        return ""
    if emit is not None:
        emit(f"Editing: {state.edit_session.draft}")
    return "Type the new text (or /save, /cancel)."


def cmd_save(state: AppState, args: list[str]) -> str:
    """
    /save         -> keep the current draft
    /save <text>  -> save <text> as the new task text
    """
    if not state.edit_session.is_editing:
        return "Nothing is being edited."
    applied = state.edit_session.commit(_join(args) if args else None)
    return "" if applied else "Edit discarded: task text cannot be empty."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.edit_session.is_editing:
        return "Nothing is being edited."
    state.edit_session.cancel()
    return "Edit cancelled."


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm <n>  -> delete row n
    """
    task_id = _resolve_row(state, args)
    if task_id is None:
        return "Usage: /rm <row number from the list>"
    state.store.delete(task_id)
    return ""


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.store.clear_completed()
    return ""


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                        -> show current filter
    /filter all|active|completed   -> switch filter
    """
    if not args:
        return f"Filter: {state.filter_mode.value}. Use /filter all|active|completed."
    try:
        state.filter_mode = filter_view.parse_mode(args[0])
    except ValueError:
        modes = "|".join(m.value for m in FilterMode)
        return f"Unknown filter: {args[0]}. Use /filter {modes}."
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["toggle", "x"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n> [text].", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the task being edited: /save [text].")
registry.register("cancel", cmd_cancel, help_text="Cancel the current edit.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <n>.", aliases=["del", "delete"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register(
    "filter", cmd_filter, help_text="Filter the list: /filter all | active | completed."
)

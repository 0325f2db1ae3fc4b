# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import handle_text, registry as command_registry
from ..core.errors import PersistenceError
from ..core.render import format_view
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _draw(state: AppState) -> None:
    """Print the list (through the binding table) and any live notifications."""
    view = state.refresh_view()
    print()
    for line in format_view(view):
        print(line)
    for message in state.notifications.active():
        print(f"  * {message}")


def _dispatch(state: AppState, line: str) -> str | None:
    if line.startswith("/"):
        return command_registry.handle(state, line, emit=_print_ts)
    return handle_text(state, line)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    _print_ts(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.")

    while True:
        _draw(state)
        prompt = "edit> " if state.edit_session.is_editing else "> "
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = _dispatch(state, user_input)
        except PersistenceError as e:
            logger.warning("Change kept in memory but not saved: %s", e)
            _print_ts(f"[WARN] Your change was applied but could not be saved: {e}")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            _print_ts("Internal error while handling a command.")
            continue

        if reply:
            _print_ts(reply)

    logger.info("Console connector finished.")

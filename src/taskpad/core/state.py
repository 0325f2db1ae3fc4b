# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.edit_session import EditSession
from ..tasks.task_models import FilterMode
from ..tasks.task_store import TaskStore
from .notifications import NotificationBoard
from .render import RenderedView, render_view


@dataclass
class AppState:
    """Everything a command handler needs, passed explicitly (no module globals)."""

    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskStore
    edit_session: EditSession
    notifications: NotificationBoard

    filter_mode: FilterMode = FilterMode.ALL
    # Last view shown to the user; row numbers in commands resolve against it.
    view: RenderedView | None = None

    def refresh_view(self) -> RenderedView:
        self.view = render_view(self.store, self.filter_mode, self.edit_session)
        return self.view

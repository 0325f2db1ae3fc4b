# src/taskpad/core/render.py

from __future__ import annotations

"""
Render collaborator.

Reads TaskStore + FilterView + EditSession and produces what the console shows.
Row numbers shown to the user are resolved back to task ids through the
binding table built here, so commands never parse ids out of the screen.
"""

from dataclasses import dataclass, field

from ..tasks import filter_view
from ..tasks.edit_session import EditSession
from ..tasks.task_models import FilterMode, TaskCounts
from ..tasks.task_store import TaskStore

EMPTY_STATE_TEXT = "Nothing to show here."


def summary(counts: TaskCounts) -> str:
    if counts.total == 0:
        return "No tasks"
    if counts.active == 0:
        return "All tasks completed!"
    return f"{counts.active} of {counts.total} tasks remaining"


@dataclass(slots=True, frozen=True)
class Row:
    number: int
    task_id: int
    text: str
    completed: bool
    editing: bool
    draft: str | None = None


@dataclass(slots=True)
class RenderedView:
    mode: FilterMode
    rows: list[Row]
    summary: str
    bindings: dict[int, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def task_id_for(self, number: int) -> int | None:
        """Visible row number -> task id (None when the row is not on screen)."""
        return self.bindings.get(number)


def render_view(store: TaskStore, mode: FilterMode | str, session: EditSession | None = None) -> RenderedView:
    mode = filter_view.parse_mode(mode)
    editing_id = session.task_id if session is not None else None
    rows: list[Row] = []
    for number, task in enumerate(filter_view.apply(store.tasks(), mode), start=1):
        editing = task.id == editing_id
        rows.append(
            Row(
                number=number,
                task_id=task.id,
                text=task.text,
                completed=task.completed,
                editing=editing,
                draft=session.draft if editing and session is not None else None,
            )
        )
    return RenderedView(
        mode=mode,
        rows=rows,
        summary=summary(store.filtered_count()),
        bindings={r.number: r.task_id for r in rows},
    )


def format_row(row: Row) -> str:
    box = "[x]" if row.completed else "[ ]"
    if row.editing:
        return f"{row.number:>3}. {box} (editing) {row.draft if row.draft is not None else row.text}"
    return f"{row.number:>3}. {box} {row.text}"


def format_view(view: RenderedView) -> list[str]:
    lines = [f"Tasks [{view.mode.value}]"]
    if view.is_empty:
        lines.append(f"  {EMPTY_STATE_TEXT}")
    else:
        lines.extend(format_row(r) for r in view.rows)
    lines.append(view.summary)
    return lines

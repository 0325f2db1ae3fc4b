# src/taskpad/core/errors.py

from __future__ import annotations

from typing import Any


class TaskpadError(Exception):
    """Base class for errors raised by taskpad."""


class PersistenceError(TaskpadError):
    """
    Snapshot could not be read or written.

    Raised after the in-memory mutation has already been applied:
    the live collection stays the source of truth for the session.
    `result` carries what the interrupted operation would have returned
    (e.g. the new task id for a create).
    """

    def __init__(self, message: str, *, result: Any = None) -> None:
        super().__init__(message)
        self.result = result

# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the storage backend and opens the task store,
- wires the edit session and notification board into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import PersistenceError
from ..core.notifications import NotificationBoard, forward_events_to
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.json_storage import JsonFileStorage
from ..storage.snapshot import SnapshotPersistence
from ..storage.sqlite_storage import SqliteKeyValueStorage
from ..tasks import filter_view
from ..tasks.edit_session import EditSession
from ..tasks.task_models import FilterMode
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

SAMPLE_TASKS = (
    "Welcome to your Todo App!",
    "Click the checkbox to mark as complete",
    "Use the edit button to modify tasks",
    "Filter tasks using the buttons above",
)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "json")).lower()
    if backend == "sqlite":
        return SqliteKeyValueStorage(settings.storage_path)
    return JsonFileStorage(settings.storage_path)


def open_store(persistence: SnapshotPersistence) -> TaskStore:
    """
    Load the snapshot; an unreadable one means an empty list for this session.

    Saves are then refused until the stored value can be read (see SnapshotPersistence).
    """
    try:
        return TaskStore.open(persistence)
    except PersistenceError:
        logger.exception("Failed to load tasks; starting with an empty list, saving disabled.")
        return TaskStore(persistence)


def create_initial_state(*, settings=None, storage: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = create_storage(settings)

    persistence = SnapshotPersistence(storage, key=getattr(settings, "storage_key", "todos"))
    store = open_store(persistence)

    notifications = NotificationBoard(hold_seconds=getattr(settings, "notification_hold_seconds", 3.0))
    store.subscribe(forward_events_to(notifications))

    try:
        mode = filter_view.parse_mode(getattr(settings, "default_filter", "all"))
    except ValueError:
        mode = FilterMode.ALL

    state = AppState(
        settings=settings,
        store=store,
        edit_session=EditSession(store),
        notifications=notifications,
        filter_mode=mode,
    )
    return state


def seed_samples(state: AppState) -> list[int]:
    """Add the welcome tasks on first run (empty store + seed_samples enabled)."""
    if not getattr(state.settings, "seed_samples", False):
        return []
    try:
        return state.store.seed(SAMPLE_TASKS)
    except PersistenceError as e:
        logger.warning("Seeded sample tasks could not be saved: %s", e)
        return list(e.result or [])

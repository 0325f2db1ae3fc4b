# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.storage.snapshot import SnapshotPersistence
from taskpad.tasks.edit_session import EditSession
from taskpad.tasks.task_ids import TaskIdAllocator
from taskpad.tasks.task_store import TaskStore

from .fakes import MemoryKeyValueStore, StepDatetimeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="json",
        storage_path=tmp_path / "tasks.json",
        storage_key="todos",
        seed_samples=False,
        notification_hold_seconds=3.0,
        default_filter="all",
    )


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> TaskStore:
    """TaskStore over an in-memory key-value store with a fixed-start id clock."""
    return TaskStore(
        SnapshotPersistence(kv),
        ids=TaskIdAllocator(clock_ms=lambda: 1000),
        clock=StepDatetimeClock(),
    )


@pytest.fixture()
def session(store: TaskStore) -> EditSession:
    return EditSession(store)


@pytest.fixture()
def state(settings: SimpleNamespace, kv: MemoryKeyValueStore) -> AppState:
    """AppState wired by the real composition root, storage swapped for memory."""
    return create_initial_state(settings=settings, storage=kv)

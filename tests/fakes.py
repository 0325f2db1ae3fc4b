# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from taskpad.core.errors import PersistenceError


class MemoryKeyValueStore:
    """
    In-memory KeyValueStore.

    - Counts writes so tests can assert "persisted once" / "not persisted"
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


class FailingKeyValueStore(MemoryKeyValueStore):
    """Reads work, every write fails (quota exceeded / storage unavailable)."""

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        raise PersistenceError("quota exceeded")


@dataclass(slots=True)
class RecordingNotifier:
    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


class ManualClock:
    """Monotonic-style float clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StepDatetimeClock:
    """Returns a new UTC datetime (one second later) on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 5, 1, 10, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value

# src/taskpad/storage/json_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Key-value store backed by a single JSON object file.

    Writes go through a temp file + os.replace so a crash never leaves
    a half-written file behind. Values are opaque strings.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
        except UnicodeDecodeError:
            logger.warning("Storage file %s is not valid UTF-8; treating as empty.", self._path)
            return {}
        except OSError as e:
            raise PersistenceError(f"Cannot read {self._path}: {e}") from e
        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            logger.warning("Storage file %s is not valid JSON; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; treating as empty.", self._path)
            return {}
        return data

    def get(self, key: str) -> str | None:
        val = self._read_all().get(key)
        return val if isinstance(val, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self._path}: {e}") from e
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Stored key=%s (%d chars) in %s", key, len(value), self._path)

"""Pluggable key-value persistence.

The ledger is stored as one JSON string under one key, the same way a
browser's localStorage would hold it. Three backends share the interface:
sqlite (default, via DatabaseManager), a directory of JSON files, and an
in-memory dict for tests.
"""
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path

from database.db_manager import DatabaseManager

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteKeyValueStore(KeyValueStore):
    def __init__(self, db: DatabaseManager):
        self._db = db

    def get(self, key: str) -> str | None:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        conn = self._db.get_connection()
        conn.execute(
            """INSERT INTO kv_store(key, value) VALUES (?, ?)
               ON CONFLICT(key)
               DO UPDATE SET value = excluded.value, updated_at = datetime('now')""",
            (key, value),
        )
        conn.commit()


class JsonFileKeyValueStore(KeyValueStore):
    """One <key>.json file per key inside folder; atomic write via .tmp + os.replace()."""

    def __init__(self, folder: str | os.PathLike):
        self._folder = Path(folder)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self._folder / f"{key}.json"

    def get(self, key: str) -> str | None:
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self._folder.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        try:
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

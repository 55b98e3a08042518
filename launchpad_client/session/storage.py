"""Persistent key-value storage backends for sessions."""

from pathlib import Path
from typing import Protocol

import duckdb
from loguru import logger

STORAGE_DDL = """
CREATE TABLE IF NOT EXISTS local_storage (
    key VARCHAR PRIMARY KEY,
    value VARCHAR NOT NULL,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""


class KeyValueStorage(Protocol):
    """String key-value store, synchronous like browser localStorage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage. Lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class DuckDBStorage:
    """Storage persisted in a DuckDB file, one row per key."""

    def __init__(self, path: str | Path = ":memory:"):
        self._path = str(path)
        self._conn = duckdb.connect(self._path)
        self._conn.execute(STORAGE_DDL)
        logger.debug("DuckDBStorage connected: {}", self._path)

    def get_item(self, key: str) -> str | None:
        row = self._conn.execute("SELECT value FROM local_storage WHERE key = ?", [key]).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        self._conn.execute(
            """
            INSERT OR REPLACE INTO local_storage (key, value, updated_at)
            VALUES (?, ?, current_timestamp)
            """,
            [key, value],
        )

    def remove_item(self, key: str) -> None:
        self._conn.execute("DELETE FROM local_storage WHERE key = ?", [key])

    def keys(self) -> list[str]:
        """All stored keys, sorted."""
        return [r[0] for r in self._conn.execute("SELECT key FROM local_storage ORDER BY key").fetchall()]

    def close(self) -> None:
        """Close the DuckDB connection."""
        self._conn.close()
        logger.debug("DuckDBStorage closed: {}", self._path)

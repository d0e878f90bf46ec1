"""SQLite key-value storage for locally persisted user preferences.

Design:
 - SQLite stores string values keyed by fixed preference names.
 - Filesystem stores actual images in Data/Photos (see core.images).
 - Each call opens a short-lived connection (thread-safe, WAL mode).
"""
from __future__ import annotations

import contextlib
import os
import sqlite3
from pathlib import Path
from typing import Iterator


def _db_path() -> Path:
    """Resolve SQLite DB path from environment or default."""
    return Path(os.environ.get("APP_DB_PATH", Path("Data") / "app.db"))


def init_db() -> None:
    """Initialize SQLite schema and enable WAL mode."""
    db_path = _db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with connect() as conn:
        conn.execute("PRAGMA journal_mode=WAL")
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS preferences (
                key TEXT PRIMARY KEY,
                value TEXT
            );
            """
        )


@contextlib.contextmanager
def connect() -> Iterator[sqlite3.Connection]:
    """Yield a short-lived SQLite connection (thread-safe)."""
    conn = sqlite3.connect(_db_path(), timeout=10, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def set_value(key: str, value: str | None) -> None:
    """Persist a single preference value. None removes the key."""
    init_db()
    with connect() as conn:
        if value is None:
            conn.execute("DELETE FROM preferences WHERE key = ?", (key,))
        else:
            conn.execute(
                "INSERT INTO preferences (key, value) VALUES (?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )


def get_value(key: str) -> str | None:
    """Fetch a stored preference value."""
    init_db()
    with connect() as conn:
        row = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
    return row["value"] if row else None


def list_keys() -> list[str]:
    """Return all stored preference keys."""
    init_db()
    with connect() as conn:
        rows = conn.execute("SELECT key FROM preferences ORDER BY key").fetchall()
    return [row["key"] for row in rows]


class KeyValueStore:
    """Injectable handle over the preferences table."""

    def get(self, key: str) -> str | None:
        return get_value(key)

    def set(self, key: str, value: str | None) -> None:
        set_value(key, value)

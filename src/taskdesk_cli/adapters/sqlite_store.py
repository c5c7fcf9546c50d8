"""SQLite-backed PersistentStore.

Values live in a single ``kv`` table. Each save is one committed
transaction, so a crash mid-write leaves the previous value intact.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from taskdesk_cli.exceptions import StorageUnavailable
from taskdesk_cli.repositories.repository import PersistentStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value BLOB NOT NULL,
    updated_at TEXT NOT NULL
)
"""


class SqliteStore(PersistentStore):
    """PersistentStore keeping every key in one SQLite database file.

    Provides:
    - Lazy connection, reused for the lifetime of the store
    - WAL mode
    - Owner-only file permissions on a newly created database
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._connection: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        if self._connection is not None:
            return self._connection

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not self.db_path.exists()

        connection = sqlite3.connect(str(self.db_path), timeout=30.0)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA journal_mode = WAL")
        connection.execute(_SCHEMA)
        connection.commit()

        if is_new_database:
            os.chmod(self.db_path, 0o600)

        self._connection = connection
        return connection

    def close(self) -> None:
        """Close the database connection if open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def load(self, key: str) -> bytes | None:
        try:
            row = (
                self._get_connection()
                .execute("SELECT value FROM kv WHERE key = ?", (key,))
                .fetchone()
            )
        except (sqlite3.Error, OSError) as e:
            raise StorageUnavailable(f"cannot read {key!r} from {self.db_path}: {e}") from e
        if row is None:
            return None
        return bytes(row["value"])

    def save(self, key: str, data: bytes) -> bool:
        try:
            connection = self._get_connection()
            with connection:
                connection.execute(
                    "INSERT OR REPLACE INTO kv (key, value, updated_at) VALUES (?, ?, ?)",
                    (key, sqlite3.Binary(data), datetime.now(UTC).isoformat()),
                )
        except (sqlite3.Error, OSError) as e:
            logger.warning("Failed to write %r to %s: %s", key, self.db_path, e)
            return False
        return True

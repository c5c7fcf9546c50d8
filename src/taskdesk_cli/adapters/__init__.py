"""Adapters module - PersistentStore implementations for different backends.

This package contains concrete implementations (adapters) of the storage port:
- file_store: one JSON file per key
- sqlite_store: a key/value table in a local SQLite database
- memory_store: process-local dict (ephemeral sessions, tests)
"""

from __future__ import annotations

from pathlib import Path

from taskdesk_cli.models.config_models import StorageConfig
from taskdesk_cli.repositories.repository import PersistentStore

from .file_store import FileStore
from .memory_store import MemoryStore
from .sqlite_store import SqliteStore

DEFAULT_DB_NAME = "taskdesk.db"
DEFAULT_STORE_DIR = "store"


def create_store(
    storage: StorageConfig, data_dir: str | Path, *, ephemeral: bool = False
) -> PersistentStore:
    """Build the PersistentStore selected by configuration.

    Args:
        storage: Storage section of the application config
        data_dir: Default location when storage.path is not set
        ephemeral: Force an in-memory store regardless of configuration

    Returns:
        PersistentStore implementation
    """
    if ephemeral or storage.backend == "memory":
        return MemoryStore()

    if storage.backend == "sqlite":
        db_path = Path(storage.path) if storage.path else Path(data_dir) / DEFAULT_DB_NAME
        return SqliteStore(db_path.expanduser())

    directory = Path(storage.path) if storage.path else Path(data_dir) / DEFAULT_STORE_DIR
    return FileStore(directory.expanduser())


__all__ = [
    "FileStore",
    "MemoryStore",
    "SqliteStore",
    "create_store",
]

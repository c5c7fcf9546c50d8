"""File-backed PersistentStore.

Each key maps to one ``<key>.json`` file inside the store directory. Writes
go to a temporary sibling file that is then renamed over the target, so a
reader sees either the old value or the new one, never a partial write.
"""

from __future__ import annotations

import logging
import os
import re
from contextlib import suppress
from pathlib import Path

from taskdesk_cli.exceptions import StorageUnavailable
from taskdesk_cli.repositories.repository import PersistentStore

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class FileStore(PersistentStore):
    """PersistentStore writing one JSON file per key.

    Args:
        directory: Directory holding the store files (created on first save)
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Return the file backing a key."""
        safe = _UNSAFE_KEY_CHARS.sub("_", key)
        return self.directory / f"{safe}.json"

    def load(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageUnavailable(f"cannot read {path}: {e}") from e

    def save(self, key: str, data: bytes) -> bool:
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.chmod(tmp, 0o600)
            os.replace(tmp, path)
        except OSError as e:
            logger.warning("Failed to write %s: %s", path, e)
            with suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        return True

"""In-memory PersistentStore.

Used for ephemeral sessions and as the substitute store in tests. Values
live only as long as the instance.
"""

from __future__ import annotations

from taskdesk_cli.repositories.repository import PersistentStore


class MemoryStore(PersistentStore):
    """Dict-backed PersistentStore."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self.data: dict[str, bytes] = dict(initial or {})
        self.save_count = 0

    def load(self, key: str) -> bytes | None:
        return self.data.get(key)

    def save(self, key: str, data: bytes) -> bool:
        self.data[key] = bytes(data)
        self.save_count += 1
        return True

"""Repository abstraction layer for TaskDesk.

This module defines the storage port the task repository depends on,
following the hexagonal architecture (Ports & Adapters) pattern.

The port is narrow: whole values in, whole values out, keyed by
a string. Concrete adapters live in taskdesk_cli.adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PersistentStore(ABC):
    """Abstract base class for durable key/value byte storage.

    All operations are synchronous. A save either fully succeeds or leaves
    the previously saved value in place.
    """

    @abstractmethod
    def load(self, key: str) -> bytes | None:
        """Load the value stored under a key.

        Args:
            key: Namespaced storage key

        Returns:
            Stored bytes, or None if nothing has been saved under the key

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageUnavailable: If the underlying storage cannot be read
        """
        raise NotImplementedError("PersistentStore.load() must be implemented by adapter")

    @abstractmethod
    def save(self, key: str, data: bytes) -> bool:
        """Replace the value stored under a key.

        Args:
            key: Namespaced storage key
            data: Complete value to store

        Returns:
            True if the value was durably written, False otherwise

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("PersistentStore.save() must be implemented by adapter")

    def close(self) -> None:
        """Release any resources held by the store. No-op by default."""

"""Repositories for TaskDesk.

- repository: the PersistentStore port (abstract base class)
- task_repository: the canonical task collection backed by a PersistentStore

Store implementations (adapters) are in taskdesk_cli.adapters.
"""

from .repository import PersistentStore
from .task_repository import TaskRepository

__all__ = [
    "PersistentStore",
    "TaskRepository",
]

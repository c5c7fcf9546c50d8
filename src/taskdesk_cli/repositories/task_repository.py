"""Task repository - the canonical, persisted task collection.

The repository keeps the ordered task list in memory and writes the whole
list to its PersistentStore after every mutation. There are no incremental
writes: on restart, initialize() reconstructs exactly the last successfully
saved collection.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import ValidationError

from taskdesk_cli.exceptions import StorageCorrupt, StorageError
from taskdesk_cli.models import Task

from .repository import PersistentStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "taskdesk.tasks"


def _utc_now() -> datetime:
    return datetime.now(UTC)


def encode_tasks(tasks: list[Task]) -> bytes:
    """Serialize a task collection to UTF-8 JSON."""
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False).encode("utf-8")


def decode_tasks(raw: bytes) -> list[Task]:
    """Deserialize a stored task collection.

    Records that fail validation are skipped, and a repeated id keeps its
    first occurrence, so the result always has unique ids.

    Raises:
        StorageCorrupt: If the bytes are not a UTF-8 JSON array
    """
    try:
        payload = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise StorageCorrupt(f"stored tasks are not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise StorageCorrupt(f"expected a JSON array, got {type(payload).__name__}")

    tasks: list[Task] = []
    seen: set[int] = set()
    for record in payload:
        try:
            task = Task.model_validate(record)
        except ValidationError:
            logger.warning("Skipping invalid task record: %r", record)
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s", task.id)
            continue
        seen.add(task.id)
        tasks.append(task)
    return tasks


class TaskRepository:
    """Owns the canonical task list and keeps it in sync with storage.

    Lookups by an unknown id are never errors: toggle returns None and
    delete returns False, so repeated UI actions are safe to retry.
    """

    def __init__(
        self,
        store: PersistentStore,
        key: str = DEFAULT_KEY,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the repository.

        Args:
            store: PersistentStore implementation holding the serialized list
            key: Storage key for the task collection
            clock: Source of creation timestamps (UTC)
        """
        self.store = store
        self.key = key
        self._clock = clock
        self._tasks: list[Task] = []

    @property
    def tasks(self) -> list[Task]:
        """Current collection, oldest first (a copy)."""
        return list(self._tasks)

    def initialize(self) -> list[Task]:
        """Load the previously saved collection.

        Absent, unreadable or corrupt data all start an empty collection.

        Returns:
            The loaded tasks, oldest first
        """
        try:
            raw = self.store.load(self.key)
            self._tasks = [] if raw is None else decode_tasks(raw)
        except StorageError as e:
            logger.warning("Starting with an empty task list (%s): %s", self.key, e)
            self._tasks = []

        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.key)
        return self.tasks

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add_task(self, text: str) -> Task | None:
        """Append a new, incomplete task.

        Args:
            text: Task text; surrounding whitespace is trimmed

        Returns:
            The created Task, or None if the text is blank
        """
        if not text or not text.strip():
            logger.debug("Ignoring blank task text")
            return None

        created_at = self._clock()
        task = Task(id=self._next_id(created_at), text=text, created_at=created_at)
        self._tasks.append(task)
        self._persist()
        logger.debug("Task added id=%s", task.id)
        return task

    def toggle_task(self, task_id: int) -> Task | None:
        """Flip the completion flag of a task.

        Returns:
            The updated Task, or None if no task has this id
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = task.toggled()
                self._tasks[index] = updated
                self._persist()
                logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
                return updated

        logger.debug("toggle_task: no task id=%s", task_id)
        return None

    def delete_task(self, task_id: int) -> bool:
        """Remove a task.

        Returns:
            True if a task was removed, False if no task has this id
        """
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            logger.debug("delete_task: no task id=%s", task_id)
            return False

        self._tasks = remaining
        self._persist()
        logger.debug("Task deleted id=%s", task_id)
        return True

    def clear_completed(self) -> int:
        """Remove every completed task in a single mutation.

        Returns:
            Number of tasks removed
        """
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if removed:
            self._tasks = remaining
            self._persist()
            logger.debug("Cleared %d completed tasks", removed)
        return removed

    def _next_id(self, created_at: datetime) -> int:
        # Millisecond timestamps can collide or run backwards; ids must not.
        candidate = int(created_at.timestamp() * 1000)
        if self._tasks:
            candidate = max(candidate, max(t.id for t in self._tasks) + 1)
        return candidate

    def close(self) -> None:
        """Close the underlying store."""
        self.store.close()

    def _persist(self) -> bool:
        saved = self.store.save(self.key, encode_tasks(self._tasks))
        if not saved:
            logger.warning(
                "Failed to save %d tasks to %s; keeping in-memory state",
                len(self._tasks),
                self.key,
            )
        return saved

"""Task data models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Creation-time derived identifier (epoch milliseconds), unique per collection
        text: Task text, trimmed and never empty
        completed: Completion status
        created_at: Creation timestamp in UTC, persisted as ``createdAt``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    text: str = Field(min_length=1)
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Store text trimmed so blank input fails the length check."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps from older data as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    def toggled(self) -> Task:
        """Return a copy with the completion flag flipped."""
        return self.model_copy(update={"completed": not self.completed})

    def to_record(self) -> dict:
        """Serialize to the JSON record stored on disk."""
        return self.model_dump(mode="json", by_alias=True)


class TaskFilter(str, Enum):
    """Completion-state filter for the task list."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


class TaskStats(BaseModel):
    """Aggregate counts shown above the task list."""

    total: int = 0
    active: int = 0
    completed: int = 0

    @computed_field
    @property
    def progress(self) -> int:
        """Completed share as a whole percentage (half rounds up)."""
        if not self.total:
            return 0
        return int(self.completed * 100 / self.total + 0.5)

    @classmethod
    def from_tasks(cls, tasks: list[Task]) -> TaskStats:
        completed = sum(1 for t in tasks if t.completed)
        return cls(total=len(tasks), active=len(tasks) - completed, completed=completed)

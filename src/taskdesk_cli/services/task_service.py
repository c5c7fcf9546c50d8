"""Task service - Business logic for task list views.

This service sits between commands and the TaskRepository. Mutations go
straight through to the repository; list views combine the completion
filter, text search and pagination.
"""

from __future__ import annotations

from taskdesk_cli.models import Task, TaskFilter, TaskStats
from taskdesk_cli.repositories import TaskRepository

from .pagination import ListState, Page

TASK_SEARCH_FIELDS = ("text",)
DEFAULT_PAGE_SIZE = 20


class TaskService:
    """Service for task business logic.

    This service encapsulates the task list rules and orchestrates task
    operations using the task repository.
    """

    def __init__(self, task_repository: TaskRepository, *, page_size: int = DEFAULT_PAGE_SIZE):
        """Initialize the task service.

        Args:
            task_repository: Initialized TaskRepository
            page_size: Default page size for list views
        """
        self.repository = task_repository
        self.page_size = page_size

    def __enter__(self) -> "TaskService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the repository's store."""
        self.repository.close()

    def list_tasks(
        self,
        *,
        status: TaskFilter | str = TaskFilter.ALL,
        search: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[Task]:
        """List tasks with filtering and pagination.

        Args:
            status: Completion filter ("all", "active", "completed")
            search: Case-insensitive text search
            page: Requested 1-based page (clamped into range)
            page_size: Override the default page size

        Returns:
            Page of Task objects in creation order
        """
        task_filter = TaskFilter(status)
        state = ListState(page_size=page_size or self.page_size)
        state.set_search_term(search or "")
        state.set_page(page)
        return state.view(self.repository.tasks, TASK_SEARCH_FIELDS, where=task_filter.matches)

    def stats(self) -> TaskStats:
        """Total, active and completed counts plus progress percentage."""
        return TaskStats.from_tasks(self.repository.tasks)

    def add_task(self, text: str) -> Task | None:
        return self.repository.add_task(text)

    def toggle_task(self, task_id: int) -> Task | None:
        return self.repository.toggle_task(task_id)

    def delete_task(self, task_id: int) -> bool:
        return self.repository.delete_task(task_id)

    def clear_completed(self) -> int:
        return self.repository.clear_completed()

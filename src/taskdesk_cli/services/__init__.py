"""Services module for TaskDesk CLI - Business logic layer."""

from .pagination import ListState, Page, paginate, search_predicate
from .task_service import TaskService

__all__ = [
    "TaskService",
    "ListState",
    "Page",
    "paginate",
    "search_predicate",
]

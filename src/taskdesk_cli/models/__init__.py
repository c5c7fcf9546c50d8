"""TaskDesk domain models.

Pydantic models for the entities the CLI works with: tasks, articles, the
article load state and the application configuration.
"""

from .article import Article, ArticleLoadState, FetchStatus
from .config_models import AppConfig
from .task import Task, TaskFilter, TaskStats

__all__ = [
    # Task models
    "Task",
    "TaskFilter",
    "TaskStats",
    # Article models
    "Article",
    "ArticleLoadState",
    "FetchStatus",
    # Configuration
    "AppConfig",
]

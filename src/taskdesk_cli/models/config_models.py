"""Configuration models.

Every section has defaults, so an empty or missing config file yields a
working configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_ARTICLES_ENDPOINT = "https://jsonplaceholder.typicode.com/posts"


class StorageConfig(BaseModel):
    """Task persistence configuration."""

    backend: Literal["file", "sqlite", "memory"] = Field(default="file")
    namespace: str = Field(default="taskdesk", description="Prefix for storage keys")
    path: str | None = Field(
        default=None,
        description="Directory (file backend) or database file (sqlite backend)",
    )

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("namespace cannot be empty")
        return v.strip()


class TasksConfig(BaseModel):
    """Task list configuration."""

    page_size: int = Field(default=20, ge=1)


class ArticlesConfig(BaseModel):
    """Article browser configuration."""

    endpoint: str = Field(default=DEFAULT_ARTICLES_ENDPOINT)
    timeout: int = Field(default=30, ge=1)
    page_size: int = Field(default=10, ge=1)
    search_fields: list[str] = Field(
        default_factory=lambda: ["title", "body", "category", "author"]
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main TaskDesk configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    tasks: TasksConfig = Field(default_factory=TasksConfig)
    articles: ArticlesConfig = Field(default_factory=ArticlesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def task_key(self) -> str:
        """Storage key holding the serialized task collection."""
        return f"{self.storage.namespace}.tasks"

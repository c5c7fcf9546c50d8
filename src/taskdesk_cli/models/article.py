"""Article data models.

Articles come from an external source as ``{id, title, body, userId}``
records and are enriched with display fields once, at fetch time. After that
they are read-only.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORIES: tuple[str, ...] = ("Technology", "Science", "Lifestyle", "Business", "Travel")
WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 150


def estimate_read_time(body: str) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    return max(1, math.ceil(len(body.split()) / WORDS_PER_MINUTE))


def make_excerpt(body: str, limit: int = EXCERPT_LENGTH) -> str:
    """Body cut to *limit* characters, with "..." appended when cut."""
    if len(body) > limit:
        return f"{body[:limit]}..."
    return body


class Article(BaseModel):
    """Read-only article record.

    Attributes:
        id: Identifier assigned by the source
        title: Article title
        body: Full article text
        user_id: Author id as sent by the source (``userId`` on the wire)
        category: Display category
        author: Display author name
        read_time: Estimated reading time in minutes
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    body: str
    user_id: int | None = Field(default=None, alias="userId")
    category: str | None = None
    author: str | None = None
    read_time: int | None = Field(default=None, alias="readTime")

    @field_validator("read_time")
    @classmethod
    def drop_unusable_read_time(cls, v: int | None) -> int | None:
        """A non-positive read time is re-estimated from the body."""
        if v is not None and v < 1:
            return None
        return v

    @classmethod
    def from_post(cls, raw: dict[str, Any]) -> Article:
        """Build an article from a source record, filling in display fields."""
        post = cls.model_validate(raw)
        updates: dict[str, Any] = {}
        if post.user_id is not None:
            if post.author is None:
                updates["author"] = f"User {post.user_id}"
            if post.category is None:
                updates["category"] = CATEGORIES[(post.user_id - 1) % len(CATEGORIES)]
        if post.read_time is None:
            updates["read_time"] = estimate_read_time(post.body)
        return post.model_copy(update=updates) if updates else post

    def excerpt(self, limit: int = EXCERPT_LENGTH) -> str:
        return make_excerpt(self.body, limit)


class FetchStatus(str, Enum):
    """Lifecycle of the single article fetch."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class ArticleLoadState(BaseModel):
    """Observable state of the article view.

    Attributes:
        status: Where the fetch currently is
        articles: Fetched collection (empty unless status is success)
        error: Failure message (set only when status is failure)
        attempts: Number of fetches issued so far
    """

    status: FetchStatus = FetchStatus.IDLE
    articles: list[Article] = Field(default_factory=list)
    error: str | None = None
    attempts: int = 0

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.PENDING

    @property
    def failed(self) -> bool:
        return self.status is FetchStatus.FAILURE

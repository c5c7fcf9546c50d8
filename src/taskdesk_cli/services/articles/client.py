"""Article source client.

Defines a Protocol for testability (Dependency Inversion) and a concrete
implementation backed by httpx. The client performs a single GET per
fetch_all() call and never retries; retrying is the caller's decision.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from taskdesk_cli.exceptions import FetchFailure
from taskdesk_cli.models import Article
from taskdesk_cli.models.config_models import DEFAULT_ARTICLES_ENDPOINT

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class ArticleSourceProtocol(Protocol):
    """Abstract interface for fetching the article collection.

    Keeping this as a Protocol (not ABC) means tests can pass any object
    that satisfies the interface without subclassing.
    """

    async def fetch_all(self) -> list[Article]:
        """Return the whole collection or raise FetchFailure."""
        ...


class JsonPlaceholderClient:
    """Article source reading ``{id, title, body, userId}`` posts over HTTP.

    Args:
        endpoint: URL returning a JSON array of posts.
        timeout: HTTP request timeout in seconds.
        transport: Optional httpx transport (useful for testing).
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ARTICLES_ENDPOINT,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def fetch_all(self) -> list[Article]:
        """Fetch and enrich every article from the endpoint.

        Records that do not validate are skipped.

        Raises:
            FetchFailure: On network errors, non-2xx responses or a payload
                that is not a JSON array
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(
                    self._endpoint, headers={"Accept": "application/json"}
                )
        except httpx.HTTPError as e:
            raise FetchFailure(f"Network error: {str(e) or e.__class__.__name__}") from e

        if not response.is_success:
            raise FetchFailure(f"HTTP error! status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise FetchFailure(f"Invalid JSON response: {e}") from e

        if not isinstance(data, list):
            raise FetchFailure("Unexpected response: expected a list of articles")

        articles: list[Article] = []
        for raw in data:
            if not isinstance(raw, dict):
                logger.warning("Skipping non-object article record: %r", raw)
                continue
            try:
                articles.append(Article.from_post(raw))
            except ValidationError:
                logger.warning("Skipping malformed article record id=%s", raw.get("id"))

        logger.info("Fetched %d articles from %s", len(articles), self._endpoint)
        return articles

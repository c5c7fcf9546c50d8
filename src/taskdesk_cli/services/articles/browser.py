"""Article browser - load state and list view for fetched articles.

The browser issues the fetch once per lifetime. While it is pending, further
load() calls wait for the same fetch. A failed fetch stays failed until
retry() is called, which runs the fetch again from scratch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from taskdesk_cli.exceptions import FetchFailure
from taskdesk_cli.models import Article, ArticleLoadState, FetchStatus
from taskdesk_cli.services.pagination import ListState, Page

from .client import ArticleSourceProtocol

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_FIELDS = ("title", "body", "category", "author")


class ArticleBrowser:
    """Owns the article collection for one list view.

    Args:
        source: Article source to fetch from
        search_fields: Article fields matched by the search term
    """

    def __init__(
        self,
        source: ArticleSourceProtocol,
        *,
        search_fields: Sequence[str] = DEFAULT_SEARCH_FIELDS,
    ) -> None:
        self.source = source
        self.search_fields = tuple(search_fields)
        self._state = ArticleLoadState()
        self._inflight: asyncio.Future[ArticleLoadState] | None = None

    @property
    def state(self) -> ArticleLoadState:
        return self._state

    async def load(self) -> ArticleLoadState:
        """Fetch the collection unless a fetch has already been issued."""
        if self._inflight is not None:
            return await self._inflight
        if self._state.status is not FetchStatus.IDLE:
            return self._state
        return await self._start()

    async def retry(self) -> ArticleLoadState:
        """Run the fetch again after a failure; otherwise a no-op."""
        if self._state.status is not FetchStatus.FAILURE:
            return self._state
        logger.info("Retrying article fetch (attempt %d)", self._state.attempts + 1)
        return await self._start()

    def view(self, list_state: ListState) -> Page[Article]:
        """Search and paginate the loaded articles (empty until loaded)."""
        return list_state.view(self._state.articles, self.search_fields)

    async def _start(self) -> ArticleLoadState:
        attempts = self._state.attempts + 1
        self._state = ArticleLoadState(status=FetchStatus.PENDING, attempts=attempts)
        self._inflight = asyncio.ensure_future(self._fetch(attempts))
        try:
            return await self._inflight
        finally:
            self._inflight = None

    async def _fetch(self, attempts: int) -> ArticleLoadState:
        try:
            articles = await self.source.fetch_all()
        except FetchFailure as e:
            logger.warning("Article fetch failed: %s", e.message)
            self._state = ArticleLoadState(
                status=FetchStatus.FAILURE, error=e.message, attempts=attempts
            )
        except Exception as e:
            logger.exception("Article source raised an unexpected error")
            self._state = ArticleLoadState(
                status=FetchStatus.FAILURE,
                error=str(e) or e.__class__.__name__,
                attempts=attempts,
            )
        else:
            self._state = ArticleLoadState(
                status=FetchStatus.SUCCESS, articles=list(articles), attempts=attempts
            )
        return self._state

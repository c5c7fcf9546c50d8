"""Search, filter and paginate pipeline.

Pure functions shared by the task list and the article browser: filter a
collection with a predicate, then cut out one page of the result. Nothing
here raises for empty input, zero matches or an out-of-range page; those
cases come back as an empty or clamped Page.

ListState holds the per-list search term and page number and enforces the
rule that a new search term (or a new source collection) starts again at
page 1.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a filtered collection.

    Attributes:
        page_items: Items on this page, in collection order
        total_items: Number of items that passed the filter
        total_pages: Page count, never less than 1
        effective_page: Page actually served after clamping
        page_size: Maximum items per page
    """

    page_items: list[T]
    total_items: int
    total_pages: int
    effective_page: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.effective_page > 1

    @property
    def has_next(self) -> bool:
        return self.effective_page < self.total_pages

    @property
    def item_range(self) -> tuple[int, int]:
        """1-based positions of the first and last item shown, (0, 0) if none."""
        if not self.page_items:
            return (0, 0)
        start = (self.effective_page - 1) * self.page_size + 1
        return (start, start + len(self.page_items) - 1)


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed, treating an empty result as one page."""
    return max(1, math.ceil(total_items / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    return min(max(requested_page, 1), max(total_pages, 1))


def paginate(
    items: Iterable[T],
    predicate: Predicate | None,
    page_size: int,
    requested_page: int = 1,
) -> Page[T]:
    """Filter a collection and return one page of the result.

    Args:
        items: Full collection; its order is preserved
        predicate: Inclusion test per item, or None to keep everything
        page_size: Maximum items per page (>= 1)
        requested_page: 1-based page number; clamped into range

    Returns:
        Page with the served items and pagination metadata

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    filtered = [item for item in items if predicate is None or predicate(item)]
    total_items = len(filtered)
    total_pages = count_pages(total_items, page_size)
    effective_page = clamp_page(requested_page, total_pages)

    start = (effective_page - 1) * page_size
    return Page(
        page_items=filtered[start : start + page_size],
        total_items=total_items,
        total_pages=total_pages,
        effective_page=effective_page,
        page_size=page_size,
    )


def _field_value(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _match_all(item: Any) -> bool:
    return True


def search_predicate(term: str | None, fields: Sequence[str]) -> Predicate:
    """Build a case-insensitive substring match over several fields.

    An item matches when any of the named fields contains the term. Missing
    or None fields never match. A blank term matches every item.

    Args:
        term: Search text
        fields: Attribute names (or mapping keys) to search

    Returns:
        Predicate usable with paginate()
    """
    needle = (term or "").strip().lower()
    if not needle:
        return _match_all

    def predicate(item: Any) -> bool:
        for name in fields:
            value = _field_value(item, name)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return predicate


def all_of(*predicates: Predicate | None) -> Predicate:
    """Combine predicates with AND, ignoring None entries."""
    active = [p for p in predicates if p is not None]
    if not active:
        return _match_all
    return lambda item: all(p(item) for p in active)


@dataclass
class ListState:
    """Search and page position for one list view.

    Attributes:
        page_size: Fixed page size for this list
        search_term: Current case-insensitive search text
        current_page: 1-based page to request on the next view()
    """

    page_size: int
    search_term: str = ""
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    def set_search_term(self, term: str) -> None:
        """Change the search text; a different term starts again at page 1."""
        if term != self.search_term:
            self.search_term = term
            self.current_page = 1

    def items_changed(self) -> None:
        """Signal that the source collection was replaced."""
        self.current_page = 1

    def set_page(self, page: int) -> None:
        self.current_page = page

    def view(
        self,
        items: Iterable[T],
        fields: Sequence[str],
        where: Predicate | None = None,
    ) -> Page[T]:
        """Apply the search term (and an optional extra filter), then paginate.

        The clamped page becomes the new current_page.
        """
        predicate = all_of(where, search_predicate(self.search_term, fields))
        page = paginate(items, predicate, self.page_size, self.current_page)
        self.current_page = page.effective_page
        return page

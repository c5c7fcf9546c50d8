"""Unit tests for the search/filter/paginate pipeline."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from taskdesk_cli.services.pagination import (
    ListState,
    Page,
    all_of,
    clamp_page,
    count_pages,
    paginate,
    search_predicate,
)


@dataclass
class Item:
    title: str
    body: str | None = None


# ---------------------------------------------------------------------------
# paginate
# ---------------------------------------------------------------------------


class TestPaginate:
    def test_twenty_three_items_page_size_eight(self):
        items = list(range(23))
        page = paginate(items, None, 8)
        assert page.total_items == 23
        assert page.total_pages == 3
        assert page.effective_page == 1
        assert page.page_items == list(range(8))

    def test_page_beyond_range_is_clamped_to_last(self):
        page = paginate(list(range(23)), None, 8, requested_page=5)
        assert page.effective_page == 3
        assert page.page_items == list(range(16, 23))
        assert len(page.page_items) == 7

    def test_page_below_range_is_clamped_to_first(self):
        page = paginate(list(range(23)), None, 8, requested_page=0)
        assert page.effective_page == 1

    def test_no_matches(self):
        page = paginate(list(range(10)), lambda n: n > 100, 5, requested_page=3)
        assert page.page_items == []
        assert page.total_items == 0
        assert page.total_pages == 1
        assert page.effective_page == 1

    def test_empty_collection(self):
        page = paginate([], None, 10)
        assert page == Page(page_items=[], total_items=0, total_pages=1, effective_page=1, page_size=10)

    def test_predicate_preserves_order(self):
        page = paginate([5, 2, 8, 1, 9], lambda n: n > 1, 10)
        assert page.page_items == [5, 2, 8, 9]

    def test_exact_multiple_of_page_size(self):
        page = paginate(list(range(20)), None, 10, requested_page=2)
        assert page.total_pages == 2
        assert page.page_items == list(range(10, 20))

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_invalid_page_size(self, page_size):
        with pytest.raises(ValueError):
            paginate([1], None, page_size)

    @pytest.mark.parametrize("requested", [-3, 1, 2, 3, 4, 50])
    def test_effective_page_always_in_range(self, requested):
        page = paginate(list(range(17)), None, 6, requested_page=requested)
        assert 1 <= page.effective_page <= page.total_pages
        assert len(page.page_items) <= 6

    def test_accepts_generators(self):
        page = paginate((n for n in range(4)), None, 3, requested_page=2)
        assert page.page_items == [3]


class TestPageMetadata:
    def test_navigation_flags(self):
        first = paginate(list(range(23)), None, 8, 1)
        middle = paginate(list(range(23)), None, 8, 2)
        last = paginate(list(range(23)), None, 8, 3)
        assert (first.has_previous, first.has_next) == (False, True)
        assert (middle.has_previous, middle.has_next) == (True, True)
        assert (last.has_previous, last.has_next) == (True, False)

    def test_item_range(self):
        assert paginate(list(range(23)), None, 8, 3).item_range == (17, 23)
        assert paginate([], None, 8).item_range == (0, 0)


def test_count_pages_and_clamp():
    assert count_pages(0, 10) == 1
    assert count_pages(11, 10) == 2
    assert clamp_page(9, 2) == 2
    assert clamp_page(-1, 2) == 1


# ---------------------------------------------------------------------------
# search_predicate
# ---------------------------------------------------------------------------


class TestSearchPredicate:
    def test_case_insensitive_substring(self):
        match = search_predicate("HeLLo", ["title"])
        assert match(Item("say hello world"))
        assert not match(Item("goodbye"))

    def test_any_field_matches(self):
        match = search_predicate("milk", ["title", "body"])
        assert match(Item("groceries", body="buy MILK"))

    def test_none_field_never_matches(self):
        match = search_predicate("x", ["body"])
        assert not match(Item("x", body=None))

    def test_missing_field_never_matches(self):
        assert not search_predicate("x", ["nope"])(Item("x"))

    @pytest.mark.parametrize("term", ["", "   ", None])
    def test_blank_term_matches_everything(self, term):
        assert search_predicate(term, ["title"])(Item(""))

    def test_term_is_trimmed(self):
        assert search_predicate("  milk ", ["title"])(Item("milk"))

    def test_works_with_mappings(self):
        match = search_predicate("qui", ["title", "body"])
        assert match({"title": "sunt aut", "body": "quia et suscipit"})
        assert not match({"title": "eum", "body": None})


def test_all_of_combines_and_ignores_none():
    pred = all_of(None, lambda n: n > 1, lambda n: n < 5)
    assert [n for n in range(7) if pred(n)] == [2, 3, 4]
    assert all_of()(object())


# ---------------------------------------------------------------------------
# ListState
# ---------------------------------------------------------------------------


class TestListState:
    def _items(self):
        return [Item(f"item {n}", body="even" if n % 2 == 0 else "odd") for n in range(23)]

    def test_new_search_term_resets_to_first_page(self):
        state = ListState(page_size=8)
        state.set_page(3)
        state.set_search_term("even")
        assert state.current_page == 1
        assert state.view(self._items(), ["body"]).effective_page == 1

    def test_same_search_term_keeps_page(self):
        state = ListState(page_size=8, search_term="item")
        state.set_page(2)
        state.set_search_term("item")
        assert state.current_page == 2

    def test_items_changed_resets_page(self):
        state = ListState(page_size=8, current_page=3)
        state.items_changed()
        assert state.current_page == 1

    def test_view_stores_clamped_page(self):
        state = ListState(page_size=8)
        state.set_page(5)
        page = state.view(self._items(), ["title"])
        assert page.effective_page == 3
        assert state.current_page == 3

    def test_view_applies_search_and_extra_filter(self):
        state = ListState(page_size=50, search_term="item 1")
        page = state.view(self._items(), ["title"], where=lambda i: i.body == "odd")
        assert [i.title for i in page.page_items] == [
            "item 1", "item 11", "item 13", "item 15", "item 17", "item 19",
        ]

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            ListState(page_size=0)

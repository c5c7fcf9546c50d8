"""Tests for MemoryStore."""

from taskdesk_cli.adapters import MemoryStore
from taskdesk_cli.repositories import PersistentStore


def test_is_a_persistent_store():
    assert isinstance(MemoryStore(), PersistentStore)


def test_load_missing_key_returns_none():
    assert MemoryStore().load("nope") is None


def test_save_then_load():
    store = MemoryStore()
    assert store.save("k", b"[1]") is True
    assert store.load("k") == b"[1]"
    assert store.save_count == 1


def test_initial_data_is_copied():
    initial = {"k": b"x"}
    store = MemoryStore(initial)
    store.save("k", b"y")
    assert initial["k"] == b"x"
    assert store.load("k") == b"y"

"""Tests for FileStore."""

from __future__ import annotations

import os
import stat

import pytest

from taskdesk_cli.adapters import FileStore
from taskdesk_cli.exceptions import StorageUnavailable


@pytest.fixture()
def store(tmp_path):
    return FileStore(tmp_path / "store")


class TestLoad:
    def test_missing_file_returns_none(self, store):
        assert store.load("taskdesk.tasks") is None

    def test_unreadable_path_raises_unavailable(self, store):
        # a directory where the file should be
        store.path_for("taskdesk.tasks").mkdir(parents=True)
        with pytest.raises(StorageUnavailable):
            store.load("taskdesk.tasks")


class TestSave:
    def test_round_trip(self, store):
        assert store.save("taskdesk.tasks", b'[{"id": 1}]') is True
        assert store.load("taskdesk.tasks") == b'[{"id": 1}]'

    def test_creates_directory(self, store):
        store.save("k", b"[]")
        assert store.directory.is_dir()

    def test_overwrites_previous_value(self, store):
        store.save("k", b"old")
        store.save("k", b"new")
        assert store.load("k") == b"new"

    def test_no_temp_file_left_behind(self, store):
        store.save("k", b"[]")
        assert [p.name for p in store.directory.iterdir()] == ["k.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_file_is_owner_only(self, store):
        store.save("k", b"[]")
        mode = stat.S_IMODE(store.path_for("k").stat().st_mode)
        assert mode == 0o600

    def test_write_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = FileStore(blocker / "store")
        assert store.save("k", b"[]") is False


def test_unsafe_key_characters_are_replaced(store):
    path = store.path_for("../etc/passwd")
    assert path.parent == store.directory
    assert "/" not in path.name

"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/network state.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from taskdesk_cli.adapters import MemoryStore
from taskdesk_cli.repositories import TaskRepository

# ---------------------------------------------------------------------------
# Isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_log_dir(tmp_path):
    """Keep the rotating log file out of the user's real log directory."""
    with patch(
        "taskdesk_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from taskdesk_cli.services.config_service import ConfigService, get_config_service

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    get_config_service.cache_clear()
    with patch("taskdesk_cli.services.config_service.user_config_dir", return_value=config_dir):
        with patch("taskdesk_cli.services.config_service.user_data_dir", return_value=data_dir):
            yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def cli_env(tmp_path):
    """Point get_config_service() at a temporary directory for CLI tests."""
    from taskdesk_cli.services.config_service import get_config_service

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    get_config_service.cache_clear()
    with patch("taskdesk_cli.services.config_service.user_config_dir", return_value=config_dir):
        with patch("taskdesk_cli.services.config_service.user_data_dir", return_value=data_dir):
            yield get_config_service
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Task repository helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Deterministic clock; each call advances by *step*."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 6, 1, 10, 0, 0, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def memory_store():
    return MemoryStore()


@pytest.fixture()
def repository(memory_store, clock):
    repo = TaskRepository(memory_store, clock=clock)
    repo.initialize()
    return repo

"""Configuration service for managing TaskDesk CLI configuration.

This module provides the ConfigService class, which is the single source of truth
for all configuration management in TaskDesk CLI. It handles:

- Loading and saving config.json
- Dot-separated key access (``articles.page_size``)
- Wiring the configured PersistentStore into a TaskService
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from taskdesk_cli.adapters import create_store
from taskdesk_cli.models.config_models import AppConfig
from taskdesk_cli.repositories import TaskRepository

from .articles import ArticleBrowser, JsonPlaceholderClient
from .task_service import TaskService

logger = logging.getLogger(__name__)

APP_NAME = "taskdesk_cli"


class ConfigService:
    """Service for managing application configuration.

    The configuration lives in ``config.json`` under the platform config
    directory. A missing or unreadable file yields the defaults; the file is
    only written when a value is changed.
    """

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(APP_NAME))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            raw = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # first run
            self._config = AppConfig()
            return self._config
        except OSError as e:
            logger.warning("Cannot read %s, using defaults: %s", self.config_path, e)
            self._config = AppConfig()
            return self._config

        try:
            self._config = AppConfig.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Invalid config at %s, using defaults: %s", self.config_path, e)
            self._config = AppConfig()
        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
        """
        return _lookup(self.config, key)

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value by dot-separated key and save.

        Args:
            key: Dot-separated key, e.g. ``tasks.page_size``
            value: New value; validated by the config models

        Returns:
            The stored (validated) value

        Raises:
            KeyError: If the key does not name a configuration field
            ValidationError: If the value is rejected by the config models
        """
        _lookup(self.config, key)
        parts = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()
        logger.debug("Config %s set to %r", key, value)
        return _lookup(self._config, key)

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return
        self.set(key, _lookup(AppConfig(), key))

    def create_task_service(self, *, ephemeral: bool = False) -> TaskService:
        """Build a TaskService over the configured store, loaded and ready.

        The caller owns the returned service and must close it (it is a
        context manager) to release the store.
        """
        config = self.config
        store = create_store(config.storage, self.data_dir, ephemeral=ephemeral)
        repository = TaskRepository(store, config.task_key)
        try:
            repository.initialize()
        except Exception:
            store.close()
            raise
        return TaskService(repository, page_size=config.tasks.page_size)

    def create_article_browser(self) -> ArticleBrowser:
        """Build an ArticleBrowser for the configured endpoint."""
        articles = self.config.articles
        client = JsonPlaceholderClient(articles.endpoint, timeout=float(articles.timeout))
        return ArticleBrowser(client, search_fields=tuple(articles.search_fields))


def _lookup(config: AppConfig, key: str) -> Any:
    value: Any = config
    for part in key.split("."):
        if not isinstance(value, BaseModel) or part not in type(value).model_fields:
            raise KeyError(key)
        value = getattr(value, part)
    return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service

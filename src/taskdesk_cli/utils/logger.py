"""Application-wide logger writing to platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; every such logger is a
child of the ``taskdesk_cli`` logger configured here.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskdesk_cli"
_LOG_FILE = "taskdesk.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    # other handlers (e.g. log capture) may already be attached
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(handler)
    else:
        handler.close()
    logger.propagate = False

    _logger = logger
    return _logger

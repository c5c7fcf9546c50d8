"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskdesk_cli.utils.exit_codes import ERROR_GENERAL
from taskdesk_cli.utils.logger import get_logger
from taskdesk_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Decorator to wrap command functions with common functionality.

    Logs start, completion and failure with timing, runs coroutine commands
    with asyncio.run, and turns AppError into its exit code.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # --help, explicit Exit(0) and friends
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper


def is_ephemeral(ctx: typer.Context) -> bool:
    """Whether the root ``--ephemeral`` option is set for this invocation."""
    root = ctx.find_root()
    return bool(root.obj and root.obj.get("ephemeral"))

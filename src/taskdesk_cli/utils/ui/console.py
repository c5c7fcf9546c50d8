"""Console utilities for TaskDesk CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def disable_color() -> None:
    """Turn off colour on every console handed out so far or later."""
    for highlight in (True, False):
        get_console(highlight).no_color = True

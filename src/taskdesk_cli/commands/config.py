"""Configuration management commands."""

from typing import Any

import typer
from pydantic import ValidationError

from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskdesk_cli.utils.typer_helpers import SuggestingGroup
from taskdesk_cli.utils.ui.console import get_console
from taskdesk_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()

_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


def parse_value(raw: str, current: Any) -> Any:
    """Convert a command-line string to the type of the value it replaces."""
    if isinstance(current, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"expected true or false, got '{raw}'")
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, list):
        return [part.strip() for part in raw.split(",") if part.strip()]
    if current is None and raw.strip().lower() in ("", "none", "null"):
        return None
    return raw


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_svc = get_config_service()
    format_output(config_svc.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., articles.page_size)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from e
    if isinstance(value, dict | list):
        format_output(value, "json")
    else:
        console.print(value, highlight=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., articles.page_size)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_svc = get_config_service()
    try:
        current = config_svc.get(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from e
    if hasattr(current, "model_dump"):
        raise AppError(
            f"'{key}' is a section; set one of its keys instead",
            exit_code=ERROR_INVALID_ARGS,
        )

    try:
        stored = config_svc.set(key, parse_value(value, current))
    except (ValueError, ValidationError) as e:
        raise AppError(
            f"Invalid value for '{key}': {e}", exit_code=ERROR_INVALID_ARGS
        ) from e
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")

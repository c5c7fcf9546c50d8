"""Task management commands."""

import typer

from taskdesk_cli.models import TaskFilter
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.task_service import TaskService
from taskdesk_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskdesk_cli.utils.typer_helpers import SuggestingGroup
from taskdesk_cli.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
    format_warning,
)

from .decorators import command_wrapper, is_ephemeral

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


def _task_service(ctx: typer.Context) -> TaskService:
    return get_config_service().create_task_service(ephemeral=is_ephemeral(ctx))


def _output_format(output: str | None) -> str:
    return output or get_config_service().config.output.format


@app.command("add")
@command_wrapper
def add_task(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Task text"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Add a task."""
    with _task_service(ctx) as service:
        task = service.add_task(text)
    if task is None:
        format_warning("Task text cannot be empty")
        raise typer.Exit(code=ERROR_INVALID_ARGS)

    output_format = _output_format(output)
    if output_format in ("json", "yaml"):
        format_output(task.to_record(), output_format)
    else:
        format_success(f"Added task {task.id}: {task.text}")


@app.command("list")
@command_wrapper
def list_tasks(
    ctx: typer.Context,
    status: TaskFilter = typer.Option(
        TaskFilter.ALL, "--filter", "-f", help="Completion filter"
    ),
    search: str | None = typer.Option(None, "--search", "-s", help="Search task text"),
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    page_size: int | None = typer.Option(
        None, "--page-size", min=1, help="Tasks per page (default from config)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List tasks."""
    with _task_service(ctx) as service:
        result = service.list_tasks(
            status=status, search=search, page=page, page_size=page_size
        )
    format_output(
        {
            "items": [task.to_record() for task in result.page_items],
            "page": result.effective_page,
            "total_pages": result.total_pages,
            "total_items": result.total_items,
            "page_size": result.page_size,
        },
        _output_format(output),
    )


@app.command("toggle")
@command_wrapper
def toggle_task(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task completed, or active again."""
    with _task_service(ctx) as service:
        task = service.toggle_task(task_id)
    if task is None:
        format_info(f"No task with id {task_id}")
        return
    state = "completed" if task.completed else "active"
    format_success(f"Task {task.id} marked {state}")


@app.command("delete")
@command_wrapper
def delete_task(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Delete a task."""
    with _task_service(ctx) as service:
        deleted = service.delete_task(task_id)
    if not deleted:
        format_info(f"No task with id {task_id}")
        return
    format_success(f"Deleted task {task_id}")


@app.command("clear-completed")
@command_wrapper
def clear_completed(ctx: typer.Context) -> None:
    """Delete every completed task."""
    with _task_service(ctx) as service:
        removed = service.clear_completed()
    if not removed:
        format_info("No completed tasks")
        return
    format_success(f"Removed {removed} completed task{'s' if removed != 1 else ''}")


@app.command("stats")
@command_wrapper
def show_stats(
    ctx: typer.Context,
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show task counts and progress."""
    with _task_service(ctx) as service:
        stats = service.stats()
    format_output(stats.model_dump(), _output_format(output))

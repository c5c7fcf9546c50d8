"""Main entry point for TaskDesk CLI."""

import typer

from taskdesk_cli import __version__
from taskdesk_cli.commands import articles, config, tasks
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.utils.logger import get_log_path
from taskdesk_cli.utils.typer_helpers import SuggestingGroup
from taskdesk_cli.utils.ui.console import disable_color, get_console

app = typer.Typer(
    name="taskdesk",
    cls=SuggestingGroup,
    help="Track tasks locally and browse articles from a remote feed",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main(
    ctx: typer.Context,
    ephemeral: bool = typer.Option(
        False, "--ephemeral", help="Keep tasks in memory only for this run"
    ),
) -> None:
    """TaskDesk command-line interface."""
    ctx.obj = {"ephemeral": ephemeral}
    if not get_config_service().config.output.color:
        disable_color()


app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(articles.app, name="articles", help="Browse articles from the remote feed")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information and file locations."""
    config_svc = get_config_service()
    console.print(f"[bold]TaskDesk CLI[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Config: {config_svc.config_path}[/dim]", highlight=False)
    console.print(f"[dim]Data:   {config_svc.data_dir}[/dim]", highlight=False)
    console.print(f"[dim]Log:    {get_log_path()}[/dim]", highlight=False)


if __name__ == "__main__":
    app()

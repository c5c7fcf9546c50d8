"""Output formatters for different formats."""

import json
from datetime import UTC, datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from taskdesk_cli.models.article import make_excerpt

from .console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        if "items" in data:
            format_dict_table(data["items"])
            format_page_footer(data)
        else:
            format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_cell(item.get(col, "")) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, default=str)
    if value is None:
        return "-"
    return str(value)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

STATUS_ICONS = {
    "active": "⬜",
    "completed": "✅",
}

CATEGORY_ICONS = {
    "Technology": "💻",
    "Science": "🔬",
    "Business": "💼",
    "Lifestyle": "🌱",
    "Travel": "✈️",
}


def format_pretty(data: Any) -> None:
    """Format data in pretty format with colors and icons."""
    if isinstance(data, dict) and "items" in data:
        items = data["items"]
        if not items:
            console.print("[yellow]No items found[/yellow]")
        elif "text" in items[0] and "completed" in items[0]:
            format_tasks_pretty(items)
        elif "title" in items[0]:
            format_articles_pretty(items)
        else:
            format_dict_table(items)
        format_page_footer(data)
    elif isinstance(data, dict) and "progress" in data:
        format_stats_pretty(data)
    elif isinstance(data, dict):
        format_single_item(data)
    elif isinstance(data, list):
        format_dict_table(data)
    else:
        console.print(data)


def format_tasks_pretty(tasks: list[dict]) -> None:
    """Format task records, one line each."""
    for task in tasks:
        completed = task.get("completed", False)
        line = Text()
        line.append(STATUS_ICONS["completed" if completed else "active"] + " ")
        line.append(f"{task.get('id')} ", style="dim")
        line.append(str(task.get("text", "")), style="dim strike" if completed else "bold")
        created = format_relative_time(task.get("createdAt"))
        if created:
            line.append(f"  ✨ {created}", style="dim")
        console.print(line)


def format_articles_pretty(articles: list[dict]) -> None:
    """Format articles as title, byline and excerpt."""
    for article in articles:
        category = article.get("category", "")
        title = Text()
        title.append(f"{CATEGORY_ICONS.get(category, '📄')} ")
        title.append(str(article.get("title", "")), style="bold cyan")
        console.print(title)

        byline = Text(style="dim")
        byline.append(f"   {article.get('author', '')} · {category}")
        read_time = article.get("readTime")
        if read_time:
            byline.append(f" · {read_time} min read")
        console.print(byline)

        excerpt = make_excerpt(str(article.get("body", ""))).replace("\n", " ")
        console.print(f"   {excerpt}")
        console.print()


def format_stats_pretty(stats: dict) -> None:
    """Format task statistics with a progress bar."""
    progress = stats.get("progress", 0)
    color = get_completion_color(progress)

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(
        f"({stats.get('total', 0)} total, {stats.get('active', 0)} active, "
        f"{stats.get('completed', 0)} completed)",
        style="dim",
    )
    console.print(header)
    console.print(f"[{color}]{get_progress_bar(progress)} {progress}%[/{color}]")


def format_page_footer(data: dict) -> None:
    """Print "Page X of Y" under a paginated listing."""
    total_items = data.get("total_items", 0)
    if not total_items:
        return
    console.print(
        f"[dim]Page {data.get('page', 1)} of {data.get('total_pages', 1)} "
        f"({total_items} items)[/dim]"
    )


def format_relative_time(date_str: str | datetime | None) -> str:
    """Format timestamp as relative time."""
    if not date_str:
        return ""

    try:
        if isinstance(date_str, datetime):
            date = date_str
        else:
            date = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return ""

    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    seconds = (datetime.now(tz=UTC) - date).total_seconds()

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        minutes = int(seconds / 60)
        return f"{minutes}m ago"
    if seconds < 86400:
        hours = int(seconds / 3600)
        return f"{hours}h ago"
    days = int(seconds / 86400)
    return f"{days}d ago"


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"

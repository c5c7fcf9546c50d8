"""Article browsing commands."""

import logging

import typer

from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.services.pagination import ListState
from taskdesk_cli.utils.exit_codes import ERROR_NETWORK
from taskdesk_cli.utils.typer_helpers import SuggestingGroup
from taskdesk_cli.utils.ui.console import get_console
from taskdesk_cli.utils.ui.formatters import format_error, format_output

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Browse articles from the remote feed")
console = get_console()
logger = logging.getLogger(__name__)


@app.command("list")
@command_wrapper
async def list_articles(
    search: str | None = typer.Option(None, "--search", "-s", help="Search articles"),
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    page_size: int | None = typer.Option(
        None, "--page-size", min=1, help="Articles per page (default from config)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
    retry: bool = typer.Option(
        True, "--retry/--no-retry", help="Offer to retry when the fetch fails"
    ),
) -> None:
    """Fetch articles and show one page."""
    config_svc = get_config_service()
    config = config_svc.config
    browser = config_svc.create_article_browser()

    with console.status("Loading articles..."):
        state = await browser.load()

    while state.failed:
        format_error(state.error or "Failed to load articles")
        try:
            again = retry and typer.confirm("Retry?", default=True)
        except typer.Abort:
            again = False
        if not again:
            logger.warning("Giving up on articles after %d attempt(s)", state.attempts)
            raise typer.Exit(code=ERROR_NETWORK)
        with console.status("Retrying..."):
            state = await browser.retry()

    list_state = ListState(page_size=page_size or config.articles.page_size)
    list_state.set_search_term(search or "")
    list_state.set_page(page)
    result = browser.view(list_state)

    format_output(
        {
            "items": [
                article.model_dump(mode="json", by_alias=True)
                for article in result.page_items
            ],
            "page": result.effective_page,
            "total_pages": result.total_pages,
            "total_items": result.total_items,
            "page_size": result.page_size,
        },
        output or config.output.format,
    )

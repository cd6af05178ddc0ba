"""Headlines and search commands."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..api import NewsAPIClient, StaticTokenProvider
from ..config import Config
from ..models import ArticleDetails, ScreenState, ScreenStatus
from ..presentation import HeadlinesController
from ..repository import NewsRepository

console = Console()


def build_controller(
    config: Config,
    language: Optional[str] = None,
    max_articles: Optional[int] = None,
) -> HeadlinesController:
    """Wire client, repository and controller from configuration."""
    api_config = config.get_api_config()
    feed = config.config.feed

    client = NewsAPIClient(
        base_url=config.base_url,
        token_provider=StaticTokenProvider(api_config.get("token") or ""),
        timeout=api_config["timeout"],
    )
    return HeadlinesController(
        repository=NewsRepository(client),
        language=language or feed.language,
        country=feed.country,
        max_articles=max_articles or feed.max_articles,
        debounce_seconds=feed.debounce_seconds,
    )


def _print_progress(state: ScreenState) -> None:
    if state.is_loading:
        console.print(f"[dim]Loading ({state.kind.value})...[/dim]")


def print_state(state: ScreenState, empty_message: str) -> None:
    """Render a settled screen state."""
    if state.status is ScreenStatus.ERROR:
        console.print(
            Panel(
                f"[red]{state.error.message}[/red]\n\n"
                f"Run the command again to retry.",
                title=state.error.title,
                style="red",
            )
        )
        return

    if not state.items:
        console.print(f"[yellow]{empty_message}[/yellow]")
        return

    table = Table(title="Headlines")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Source", style="cyan")
    table.add_column("Published", style="yellow")

    for index, item in enumerate(state.items, start=1):
        table.add_row(str(index), item.title, item.source, item.published_relative or "-")

    console.print(table)


def print_details(details: ArticleDetails) -> None:
    """Render the detail panel for one article."""
    lines = [f"[bold]{details.title}[/bold]", f"[cyan]{details.source}[/cyan]"]
    if details.published_relative:
        lines.append(f"[dim]{details.published_relative}[/dim]")
    if details.summary:
        lines.extend(["", "[bold]Summary[/bold]", details.summary])
    if details.content:
        lines.extend(["", "[bold]Content[/bold]", details.content])
    if details.article_url:
        lines.extend(["", f"Read full article: [blue]{details.article_url}[/blue]"])
    if details.image_url:
        lines.append(f"[dim]Image: {details.image_url}[/dim]")

    console.print(Panel("\n".join(lines), title="Article", style="white"))


def _finish(controller: HeadlinesController, details: Optional[int]) -> None:
    state = controller.state
    print_state(state, controller.empty_description_message)

    if details is not None and state.status is ScreenStatus.LOADED:
        if not 1 <= details <= len(state.items):
            console.print(f"[red]No article #{details} (have {len(state.items)}).[/red]")
            raise typer.Exit(1)
        print_details(ArticleDetails(state.items[details - 1]))

    if state.status is ScreenStatus.ERROR:
        raise typer.Exit(1)


def headlines_command(
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Two-letter language code"),
    max_articles: Optional[int] = typer.Option(
        None, "--max", "-m", help="Maximum articles to fetch", min=1, max=100
    ),
    details: Optional[int] = typer.Option(None, "--details", "-d", help="Show details of article N"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file path"),
) -> None:
    """Show the top headlines."""
    controller = build_controller(Config(config_path), language, max_articles)
    controller.subscribe(_print_progress)

    async def run() -> None:
        await controller.load_initial_data()
        await controller.aclose()

    asyncio.run(run())
    _finish(controller, details)


def search_command(
    query: str = typer.Argument(..., help="Search keywords or a topic name"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Two-letter language code"),
    max_articles: Optional[int] = typer.Option(
        None, "--max", "-m", help="Maximum articles to fetch", min=1, max=100
    ),
    details: Optional[int] = typer.Option(None, "--details", "-d", help="Show details of article N"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file path"),
) -> None:
    """Search news articles."""
    controller = build_controller(Config(config_path), language, max_articles)
    controller.subscribe(_print_progress)

    async def run() -> None:
        controller.query = query
        await controller.refresh()
        await controller.aclose()

    asyncio.run(run())
    _finish(controller, details)

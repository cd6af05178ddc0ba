"""Main CLI application."""

import logging

import typer
from dotenv import load_dotenv
from rich.logging import RichHandler

# Load .env file if it exists
load_dotenv()

from .feed import headlines_command, search_command
from .init import init_command
from .topics import topics_command

app = typer.Typer(
    name="newsflash",
    help="NewsFlash - top headlines and news search in your terminal",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs full request URLs, which carry the API token
    logging.getLogger("httpx").setLevel(logging.WARNING)


# Register commands
app.command("init")(init_command)
app.command("headlines")(headlines_command)
app.command("search")(search_command)
app.command("topics")(topics_command)


if __name__ == "__main__":
    app()

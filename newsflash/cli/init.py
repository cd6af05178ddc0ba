"""Init command implementation."""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ApiConfig, ConfigModel, FeedConfig, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "newsflash",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    base_host: str = typer.Option(
        "gnews.io/api/v4", "--base-host", help="News API host and base path"
    ),
    language: str = typer.Option("en", "--language", "-l", help="Two-letter language code"),
    country: Optional[str] = typer.Option(
        None, "--country", help="Two-letter country code for top headlines"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Create the NewsFlash configuration file."""
    console.print(Panel.fit("📰 NewsFlash - Initialization", style="bold blue"))

    config_path = config_dir / "config.yaml"
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        config = ConfigModel(
            api=ApiConfig(base_host=base_host, token_env="GNEWS_API_KEY"),
            feed=FeedConfig(language=language, country=country),
        )
    except ValueError as e:
        console.print(f"[red]❌ Invalid option: {e}[/red]")
        raise typer.Exit(1)

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if not os.environ.get("GNEWS_API_KEY"):
        console.print(
            "\n[yellow]No API token found.[/yellow] "
            "Set it with: [bold]export GNEWS_API_KEY=your_token[/bold]"
        )

    console.print(
        Panel(
            f"[green]✅ NewsFlash initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set API token: [bold]export GNEWS_API_KEY=your_token[/bold]\n"
            f"2. Run: [bold]newsflash headlines[/bold]",
            style="green",
        )
    )

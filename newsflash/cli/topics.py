"""Topics command implementation."""

from rich.console import Console
from rich.table import Table

from ..presentation import Topic

console = Console()


def topics_command() -> None:
    """List the predefined topics usable as search queries."""
    table = Table(title="Topics")
    table.add_column("Topic", style="cyan")
    table.add_column("Query", style="magenta")

    for topic in Topic:
        table.add_row(topic.display_name, topic.query_value)

    console.print(table)

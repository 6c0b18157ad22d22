"""
Console output for the nls command - rich formatting with colors and tables.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console(stderr=True)

BADGE = "[bold white on dark_cyan] NLS [/bold white on dark_cyan]"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to the console, DEBUG and up when verbose."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def success(message: str, badge: bool = True):
    """Green success message with ✓

    Args:
        message: Main success message
        badge: Show NLS badge (default: True)
    """
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[green]✓[/green] {message}")


def error(message: str, badge: bool = True):
    """Red error message with ✗"""
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[red]✗[/red] {message}")


def data_table(columns: list[dict[str, Any]], rows: list[list[Any]], title: str | None = None):
    """Create and display a data table

    Args:
        columns: List of column dicts with 'name', optional 'style', 'justify'
        rows: List of row data (list of values matching column order)
        title: Optional table title
    """
    table = Table(title=title, border_style="dim", padding=(0, 1))
    for col in columns:
        table.add_column(
            col["name"],
            style=col.get("style", "white"),
            justify=col.get("justify", "left"),
        )
    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print()
    console.print(table)
    console.print()

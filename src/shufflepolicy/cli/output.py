"""Rich output formatting for the shufflepolicy CLI."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shufflepolicy.core.errors import ClassificationResult, Marker

console = Console()


def format_flag(value: bool) -> str:
    """Render a boolean decision with color."""
    return "[green]yes[/green]" if value else "[red]no[/red]"


def classification_table(
    policy_name: str,
    result: ClassificationResult,
    markers: Sequence[Marker],
) -> Table:
    """Build the table shown by ``shufflepolicy classify``."""
    table = Table(title=f"Classification ({escape(policy_name)} policy)", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("retry", format_flag(result.retry))
    table.add_row("log", format_flag(result.log))
    table.add_row("category", result.category.value)
    table.add_row("markers", ", ".join(m.name for m in markers) or "-")
    return table


def markers_table(version: int) -> Table:
    """Build the table shown by ``shufflepolicy markers``."""
    table = Table(title=f"Marker vocabulary v{version}")
    table.add_column("Marker", style="cyan", no_wrap=True)
    table.add_column("Text")
    for marker in Marker:
        table.add_row(marker.name, escape(marker.value))
    return table

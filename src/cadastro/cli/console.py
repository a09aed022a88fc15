"""Console output for the directory screens.

One shared rich console. Messages are escaped before styling because they
carry names and emails typed by the operator. Tables use the cyan border of
the menu and take None as "no title".
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Shared console instance for all screens
console = Console(highlight=False)


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{escape(msg)}[/red]")


def warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{escape(msg)}[/yellow]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{escape(msg)}[/green]")


def info(msg: str) -> None:
    """Print an info message in cyan."""
    console.print(f"[cyan]{escape(msg)}[/cyan]")


def header(title: str, style: str) -> None:
    """Print a screen title between two rules."""
    console.print()
    console.rule(f"[bold {style}]{escape(title)}[/bold {style}]", style=style)
    console.print()


def create_table(
    title: str | None,
    columns: list[tuple[str, str | dict]],
) -> Table:
    """Create a styled table with consistent formatting.

    Args:
        title: Table title, or None for no title.
        columns: List of (name, style) or (name, kwargs_dict) tuples.

    Returns:
        Configured Rich Table.
    """
    table = Table(title=title, border_style="cyan", header_style="bold")
    for name, style_or_kwargs in columns:
        if isinstance(style_or_kwargs, dict):
            table.add_column(name, **style_or_kwargs)
        else:
            table.add_column(name, style=style_or_kwargs)
    return table

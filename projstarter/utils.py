"""Rich-based console output helpers."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_info(message: str) -> None:
    """Print a dim informational line."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_next_steps(commands: Iterable[str]) -> None:
    """Print the commands a user should run after generation."""
    console.print()
    console.print("[bold cyan]Next steps:[/bold cyan]")
    for command in commands:
        console.print(f"   [yellow]{escape(command)}[/yellow]")
    console.print()


def print_file_table(rows: Iterable[tuple[str, int]], title: str = "Files") -> None:
    """Print a ``path | bytes`` table.

    Args:
        rows: ``(relative_path, size_in_bytes)`` pairs.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Path", no_wrap=True)
    table.add_column("Bytes", justify="right", style="dim")

    for path, size in rows:
        table.add_row(path, str(size))

    console.print(table)
    console.print()

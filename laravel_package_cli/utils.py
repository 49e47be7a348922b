"""Shared console helpers for the scaffolder.

All progress and outcome reporting goes through one Rich ``Console`` so that
callers (and tests) can redirect or silence it in a single place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

if TYPE_CHECKING:
    from laravel_package_cli.scaffolder.generator import GenerationResult

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing a generation run."""
    console.print()
    console.print(Rule(f"[bold bright_green] {title} [/bold bright_green]", style="bright_green"))
    console.print()


def print_stage(message: str) -> None:
    """Print a dim progress line for one generation stage."""
    console.print(f"  [dim]{message}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_generation_summary(result: GenerationResult) -> None:
    """Print a table of every file written during a run."""
    table = Table(
        title=f"Generated {result.metadata.full_package_name}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("File", no_wrap=True)
    table.add_column("Size", justify="right", style="dim")

    for generated in result.files:
        size = len(generated.content.encode("utf-8"))
        table.add_row(generated.path, "empty" if generated.is_empty else f"{size} B")

    console.print(table)
    if result.skipped:
        console.print(f"[dim]Skipped: {', '.join(result.skipped)}[/dim]")
    console.print()

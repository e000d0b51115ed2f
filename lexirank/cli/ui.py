# lexirank/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from lexirank.cli.ui import ui

    ui.header("Search")
    ui.info("Indexed notes.txt")
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from lexirank.ingestion.models import Source

console = Console()


class UI:
    """Consistent Rich styling for every command."""

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a command header in a fitted box."""
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def code(self, text: str, lexer: str) -> None:
        console.print(Syntax(text, lexer, theme="monokai", background_color="default"))

    def sources_table(self, sources: Sequence[Source]) -> None:
        """Ranked sources as a table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Score", justify="right")
        table.add_column("File", style="cyan")
        table.add_column("Chunk", justify="right")
        table.add_column("Snippet")

        for i, source in enumerate(sources, start=1):
            table.add_row(
                str(i),
                f"{source.score:.3f}",
                escape(source.filename),
                str(source.chunk_index),
                escape(source.snippet),
            )

        console.print(table)


ui = UI()

__all__ = ["UI", "console", "ui"]

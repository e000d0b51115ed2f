# lexirank/cli/cli.py
"""
lexirank CLI - main application.

Commands:
    lexirank search    Index text files in memory and rank them against a question
    lexirank config    Show the effective configuration

NOTE: Commands use lazy loading - implementations are imported only when invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="lexirank",
    help='lexirank - lexical passage retrieval. Try: lexirank search notes.txt -q "your question"',
    no_args_is_help=True,
    add_completion=False,
)


@app.command("search")
def search(
    files: List[Path] = typer.Argument(..., help="Text files to index."),
    query: str = typer.Option(..., "--query", "-q", help="Question to rank passages against."),
    limit: Optional[int] = typer.Option(None, "--limit", "-k", min=1, help="Number of results."),
    config: Optional[Path] = typer.Option(None, "--config", help="Config file overriding defaults."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Index text files and show the passages most relevant to a question."""
    from lexirank.cli.commands import search as mod

    mod.command(files=files, query=query, limit=limit, config=config, verbose=verbose)


@app.command("config")
def config(
    config: Optional[Path] = typer.Option(None, "--config", help="Config file overriding defaults."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Show the effective configuration."""
    from lexirank.cli.commands import config as mod

    mod.command(config=config, as_json=as_json)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

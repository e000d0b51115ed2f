# lexirank/cli/__init__.py
"""Command-line interface for lexirank."""

from lexirank.cli.cli import app

__all__ = ["app"]

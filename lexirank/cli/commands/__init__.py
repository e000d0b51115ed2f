# lexirank/cli/commands/__init__.py
"""CLI command implementations (imported lazily by lexirank.cli.cli)."""

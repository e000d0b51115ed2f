# lexirank/cli/commands/config.py
"""
Configuration command.

Usage:
    lexirank config                    # Show effective config as YAML
    lexirank config --json             # Output as JSON
    lexirank config --config my.yaml   # Preview a user file merged over defaults
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.markup import escape

from lexirank.cli.ui import ui
from lexirank.config.loader import get_config_source, load_config
from lexirank.core.exceptions import ConfigError


def command(config: Optional[Path] = None, as_json: bool = False) -> None:
    """Print the merged, validated configuration."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        ui.error(escape(str(e)))
        raise typer.Exit(1)

    data = cfg.model_dump()

    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return

    ui.header("lexirank config", escape(get_config_source(config)))
    ui.code(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), "yaml")

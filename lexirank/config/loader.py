# lexirank/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (lexirank/config/defaults/default.yaml) - always loaded
    2. User config - overrides defaults. First match wins:
         a. explicit `path` argument
         b. $LEXIRANK_CONFIG
         c. ./.lexirank/config.yaml (only if it exists)

The result is a validated LexiRankConfig where every value exists.

Usage:
    from lexirank.config.loader import load_config

    config = load_config()
    config = load_config("my_config.yaml")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from lexirank.config.schema import LexiRankConfig
from lexirank.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from lexirank.logging.logger import get_logger
from lexirank.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults" / "default.yaml"
CONFIG_ENV_VAR = "LEXIRANK_CONFIG"
WORKSPACE_CONFIG = Path(".lexirank") / "config.yaml"


# =============================================================================
# Raw Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the YAML is invalid or its root isn't a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence. Nested dicts are merged
    recursively; lists and scalars are replaced.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Layered Loading
# =============================================================================


def resolve_user_config_path(path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Find the user config file to overlay on the defaults.

    An explicit path or $LEXIRANK_CONFIG must exist (a missing file is an
    error there); the workspace file is optional.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    workspace = Path.cwd() / WORKSPACE_CONFIG
    if workspace.exists():
        return workspace

    return None


def load_config_dict(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Merged defaults + user config as a raw dictionary (no validation)."""
    data = load_yaml(DEFAULTS_PATH)

    user_path = resolve_user_config_path(path)
    if user_path is None:
        logger.debug(f"{CONFIG} Using package defaults only")
        return data

    return deep_merge(data, load_yaml(user_path))


def load_config(path: Optional[Union[str, Path]] = None) -> LexiRankConfig:
    """
    Load the complete, validated configuration.

    Args:
        path: Optional user config file overriding the defaults

    Raises:
        ConfigNotFoundError: If an explicitly requested file doesn't exist
        ConfigParseError: If a file isn't valid YAML
        ConfigValidationError: If the merged values don't match the schema
    """
    data = load_config_dict(path)

    try:
        return LexiRankConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Config validation failed: {e}",
            path=resolve_user_config_path(path) or DEFAULTS_PATH,
        ) from e


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Human-readable description of where config comes from."""
    user_path = resolve_user_config_path(path)
    if user_path is not None:
        return f"{user_path} (overriding defaults)"
    return f"{DEFAULTS_PATH} (package defaults)"


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULTS_PATH",
    "deep_merge",
    "get_config_source",
    "load_config",
    "load_config_dict",
    "load_yaml",
    "resolve_user_config_path",
]

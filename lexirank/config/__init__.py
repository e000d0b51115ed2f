# lexirank/config/__init__.py
"""
Configuration management for lexirank.

This package provides:
- The LexiRankConfig schema (pydantic)
- Package defaults (lexirank/config/defaults/default.yaml)
- Layered loading: defaults, then the user file on top

Usage:
    from lexirank.config import load_config

    config = load_config()
    config.retrieval.limit  # always present
"""

from lexirank.config.loader import deep_merge, load_config, load_yaml, resolve_user_config_path
from lexirank.config.schema import ChunkingConfig, LexiRankConfig, LoggingConfig, RetrievalConfig

__all__ = [
    "ChunkingConfig",
    "LexiRankConfig",
    "LoggingConfig",
    "RetrievalConfig",
    "deep_merge",
    "load_config",
    "load_yaml",
    "resolve_user_config_path",
]

# lexirank/core/exceptions.py
"""
All exceptions raised by lexirank.

The lexical index itself never raises for degenerate input (empty text,
empty store, unknown document ids); these types belong to the layers
around it.

Hierarchy:
    LexiRankError
    ├── IngestionError - a document could not be turned into chunks
    │   └── DocumentNotFoundError - unknown document id
    └── ConfigError - configuration failures
        ├── ConfigNotFoundError - config file missing
        ├── ConfigParseError - invalid YAML or wrong root type
        └── ConfigValidationError - values rejected by the schema
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LexiRankError(Exception):
    """
    Base exception for everything lexirank raises deliberately.

    Examples:
        >>> try:
        ...     service.delete_document("missing")
        ... except LexiRankError as e:
        ...     print(f"lexirank failed: {e}")
    """

    pass


# =============================================================================
# Ingestion Errors
# =============================================================================


class IngestionError(LexiRankError):
    """A source document produced no indexable chunks or could not be read."""

    pass


class DocumentNotFoundError(IngestionError):
    """No document with the given id has been ingested."""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id!r}")


# =============================================================================
# Config Errors
# =============================================================================


class ConfigError(LexiRankError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "DocumentNotFoundError",
    "IngestionError",
    "LexiRankError",
]

# lexirank/core/__init__.py
"""
Core contracts shared by every lexirank component.

Public API:
    - Chunk / ChunkMetadata: the unit of retrieval
    - IndexedChunk: a chunk together with its stored term vector
    - SearchResult: what a query hands back to callers
    - Exceptions: the package error hierarchy
"""

from .chunk import Chunk, ChunkMetadata, IndexedChunk, SearchResult, TermVector
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    DocumentNotFoundError,
    IngestionError,
    LexiRankError,
)

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "DocumentNotFoundError",
    "IndexedChunk",
    "IngestionError",
    "LexiRankError",
    "SearchResult",
    "TermVector",
]

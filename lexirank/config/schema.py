# lexirank/config/schema.py
"""
Configuration schema for lexirank.

This is the SINGLE source of truth for configuration.

Schema hierarchy:
- LexiRankConfig: the root model
- RetrievalConfig: query-time settings
- ChunkingConfig: how source text is split before indexing
- LoggingConfig: logging settings
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RetrievalConfig(BaseModel):
    """Query-time settings."""

    limit: int = Field(default=5, ge=1, description="Default number of results per query")
    snippet_chars: int = Field(
        default=200, ge=1, description="Characters of chunk content shown per source"
    )

    model_config = ConfigDict(extra="forbid")


class ChunkingConfig(BaseModel):
    """
    Sliding-window chunking settings.

    Example YAML:
        chunking:
          chunk_size: 800
          chunk_overlap: 200
    """

    chunk_size: int = Field(default=800, ge=1, description="Maximum characters per chunk")
    chunk_overlap: int = Field(default=200, ge=0, description="Characters shared by neighbours")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def overlap_smaller_than_size(self) -> "ChunkingConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be < chunk_size ({self.chunk_size})"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING", description="Root log level")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept any casing, reject unknown level names."""
        if not isinstance(v, str):
            return v
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level


class LexiRankConfig(BaseModel):
    """
    Root configuration.

    Examples:
        >>> config = LexiRankConfig()
        >>> config.retrieval.limit, config.chunking.chunk_size
        (5, 800)
    """

    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["ChunkingConfig", "LexiRankConfig", "LoggingConfig", "RetrievalConfig"]

# lexirank/core/chunk.py
"""
Chunk - core data model for lexirank.

A chunk is a short passage cut from a larger source document. It is the
unit the lexical index stores, scores and returns.

This module provides:
- ChunkMetadata: where a chunk came from
- Chunk: what callers hand to the index
- IndexedChunk: a chunk plus the term vector computed when it was stored
- SearchResult: what a query returns (content and metadata, never vectors)
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

# Sparse mapping term -> TF-IDF weight
TermVector = Dict[str, float]


class ChunkMetadata(BaseModel):
    """
    Position of a chunk within its source document.

    `chunk_index` and `total_chunks` are informational only; ranking never
    looks at them.
    """

    document_id: str = Field(..., description="Groups chunks cut from the same source")
    filename: str = Field(..., description="Original file name of the source")
    chunk_index: int = Field(..., ge=0, description="Position within the source document")
    total_chunks: int = Field(..., ge=1, description="Number of chunks the source produced")

    model_config = ConfigDict(extra="forbid")


class Chunk(BaseModel):
    """A passage submitted for indexing."""

    id: str = Field(..., description="Unique chunk identifier")
    content: str = Field(..., description="Raw chunk text")
    metadata: ChunkMetadata

    model_config = ConfigDict(extra="forbid")


class IndexedChunk(Chunk):
    """
    A stored chunk.

    `term_vector` reflects the document-frequency registry as it stood when
    the chunk was inserted and is never recomputed afterwards.
    """

    term_vector: TermVector = Field(default_factory=dict, description="TF-IDF weights")


class SearchResult(BaseModel):
    """A ranked query hit."""

    content: str
    metadata: ChunkMetadata
    score: float = Field(0.0, description="Cosine similarity to the query")


__all__ = ["Chunk", "ChunkMetadata", "IndexedChunk", "SearchResult", "TermVector"]

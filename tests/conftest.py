# tests/conftest.py
"""
Root conftest - shared fixtures for the lexirank test suite.

Test Tiers:
- tier1: Pure logic, no I/O (tokenizer, weighting, similarity, index)
         Run: pytest -m tier1
- tier2: Filesystem, config files and the CLI runner
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

from typing import Callable

import pytest

from lexirank.core.chunk import Chunk, ChunkMetadata
from lexirank.retrieval.lexical import LexicalIndex


def make_chunk(
    content: str,
    document_id: str = "doc",
    chunk_index: int = 0,
    total_chunks: int = 1,
    chunk_id: str | None = None,
    filename: str | None = None,
) -> Chunk:
    """Build a Chunk with ids following the "<doc>-chunk-<n>" convention."""
    return Chunk(
        id=chunk_id or f"{document_id}-chunk-{chunk_index}",
        content=content,
        metadata=ChunkMetadata(
            document_id=document_id,
            filename=filename or f"{document_id}.txt",
            chunk_index=chunk_index,
            total_chunks=total_chunks,
        ),
    )


@pytest.fixture
def chunk_factory() -> Callable[..., Chunk]:
    return make_chunk


@pytest.fixture
def index() -> LexicalIndex:
    """A fresh, empty index per test."""
    return LexicalIndex()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory with no LEXIRANK_CONFIG set."""
    monkeypatch.delenv("LEXIRANK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

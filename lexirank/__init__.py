# lexirank/__init__.py
"""
lexirank - in-process lexical retrieval for short text passages.

A corpus of chunks is ranked against free-text questions with TF-IDF
weighting and cosine similarity. Nothing is persisted: an index lives
exactly as long as the object that owns it.

Public API:
    - LexicalIndex: insert / query / delete / size
    - Chunk, ChunkMetadata, SearchResult: data model
    - DocumentService: document-level ingestion on top of an index
    - SentenceChunker: splits raw text into overlapping passages
    - load_config: layered YAML configuration

Examples:
    >>> from lexirank import Chunk, ChunkMetadata, LexicalIndex
    >>> index = LexicalIndex()
    >>> index.insert_chunks([
    ...     Chunk(
    ...         id="d1-chunk-0",
    ...         content="The cat sat on the mat",
    ...         metadata=ChunkMetadata(
    ...             document_id="d1", filename="cats.txt", chunk_index=0, total_chunks=1
    ...         ),
    ...     )
    ... ])
    >>> [r.metadata.document_id for r in index.query("cat mat", limit=1)]
    ['d1']
"""

from lexirank.config import LexiRankConfig, load_config
from lexirank.core.chunk import Chunk, ChunkMetadata, IndexedChunk, SearchResult
from lexirank.core.exceptions import (
    ConfigError,
    DocumentNotFoundError,
    IngestionError,
    LexiRankError,
)
from lexirank.ingestion import Document, DocumentService, SentenceChunker, Source
from lexirank.retrieval.lexical import LexicalIndex

__version__ = "0.1.0"

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ConfigError",
    "Document",
    "DocumentNotFoundError",
    "DocumentService",
    "IndexedChunk",
    "IngestionError",
    "LexiRankConfig",
    "LexiRankError",
    "LexicalIndex",
    "SearchResult",
    "SentenceChunker",
    "Source",
    "load_config",
]

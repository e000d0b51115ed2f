# lexirank/retrieval/lexical/index.py
"""
In-memory lexical index.

Owns the authoritative chunk mapping and the document-frequency registry,
and orchestrates tokenizing, weighting and ranking on insert/query/delete.

Stores:
- Chunk id -> IndexedChunk (content, metadata, term vector)
- DocumentFrequencyRegistry shared by every chunk in this index

Usage:
    index = LexicalIndex()
    index.insert_chunks(chunks)          # one batch per source document
    results = index.query("cat mat", limit=3)
    index.delete_chunks("d1")

Known limitations:
- Term vectors are computed once, at insertion. Later insertions change
  document frequencies without touching earlier vectors.
- Deleting chunks never decrements document frequencies.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Set, Tuple

from lexirank.core.chunk import Chunk, IndexedChunk, SearchResult
from lexirank.logging.logger import get_logger
from lexirank.logging.tags import INDEX, RETRIEVER

from .similarity import rank
from .tokenizer import tokenize
from .weighting import DocumentFrequencyRegistry, compute_tf, vectorize

logger = get_logger(__name__)

DEFAULT_LIMIT = 5


class LexicalIndex:
    """
    TF-IDF index over a growing corpus of chunks.

    All public operations run under one re-entrant lock, so an index can
    be shared between threads. Nothing here performs I/O.

    Example:
        >>> index = LexicalIndex()
        >>> index.size()
        0
        >>> index.query("anything")
        []
    """

    def __init__(self) -> None:
        self._chunks: Dict[str, IndexedChunk] = {}
        self._registry = DocumentFrequencyRegistry()
        self._lock = threading.RLock()

    @property
    def registry(self) -> DocumentFrequencyRegistry:
        """Document frequencies observed by this index."""
        return self._registry

    def insert_chunks(self, chunks: Iterable[Chunk]) -> None:
        """
        Index a batch of chunks.

        Every chunk in the batch is counted in the registry first; only then
        is `total_docs` fixed (current size + batch size) and each chunk
        vectorized against that single value. Duplicate ids overwrite.

        Args:
            chunks: Chunks to index, typically all chunks of one document
        """
        batch = list(chunks)
        if not batch:
            return

        with self._lock:
            prepared: List[Tuple[Chunk, Dict[str, float]]] = []
            for chunk in batch:
                tf = compute_tf(tokenize(chunk.content))
                self._registry.observe(tf.keys())
                prepared.append((chunk, tf))

            total_docs = len(self._chunks) + len(batch)

            for chunk, tf in prepared:
                self._chunks[chunk.id] = IndexedChunk(
                    id=chunk.id,
                    content=chunk.content,
                    metadata=chunk.metadata.model_copy(),
                    term_vector=vectorize(tf, total_docs, self._registry),
                )

            logger.debug(
                f"{INDEX} Inserted {len(batch)} chunks (total_docs={total_docs}, "
                f"size={len(self._chunks)}, vocabulary={len(self._registry)})"
            )

    def query(self, text: str, limit: int = DEFAULT_LIMIT) -> List[SearchResult]:
        """
        Rank every stored chunk against `text`.

        Args:
            text: Free-text question
            limit: Maximum number of results

        Returns:
            Up to `limit` results sorted by descending similarity; ties keep
            insertion order. Empty when the index is empty.
        """
        with self._lock:
            if not self._chunks:
                logger.debug(f"{RETRIEVER} Query on empty index")
                return []

            tokens = tokenize(text)
            query_vector = vectorize(compute_tf(tokens), len(self._chunks), self._registry)

            hits = rank(
                query_vector,
                ((chunk_id, chunk.term_vector) for chunk_id, chunk in self._chunks.items()),
                limit=limit,
            )

            results = [
                SearchResult(
                    content=self._chunks[hit.chunk_id].content,
                    metadata=self._chunks[hit.chunk_id].metadata.model_copy(),
                    score=hit.score,
                )
                for hit in hits
            ]
            candidates = len(self._chunks)

        logger.debug(f"{RETRIEVER} Query terms={tokens} candidates={candidates} hits={len(results)}")
        return results

    def delete_chunks(self, document_id: str) -> int:
        """
        Remove every chunk whose metadata belongs to `document_id`.

        The registry and the vectors of remaining chunks are left untouched.
        Unknown ids are a no-op.

        Returns:
            Number of chunks removed
        """
        with self._lock:
            doomed = [
                chunk_id
                for chunk_id, chunk in self._chunks.items()
                if chunk.metadata.document_id == document_id
            ]
            for chunk_id in doomed:
                del self._chunks[chunk_id]

        logger.debug(f"{INDEX} Deleted {len(doomed)} chunks for document {document_id!r}")
        return len(doomed)

    def size(self) -> int:
        """Number of stored chunks."""
        with self._lock:
            return len(self._chunks)

    def get(self, chunk_id: str) -> Optional[IndexedChunk]:
        """Stored chunk with its term vector, or None."""
        with self._lock:
            chunk = self._chunks.get(chunk_id)
            return chunk.model_copy(deep=True) if chunk is not None else None

    def document_ids(self) -> Set[str]:
        """Distinct document ids currently present in the index."""
        with self._lock:
            return {chunk.metadata.document_id for chunk in self._chunks.values()}

    def __len__(self) -> int:
        return self.size()


__all__ = ["DEFAULT_LIMIT", "LexicalIndex"]

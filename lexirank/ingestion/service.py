# lexirank/ingestion/service.py
"""
Document service.

Sits between callers that think in documents (upload, list, delete,
ask) and the LexicalIndex, which only knows chunks.

Responsibilities:
- Split source text with a SentenceChunker
- Assign chunk ids ("<document_id>-chunk-<index>") and metadata
- Insert each document's chunks as ONE batch so they share total_docs
- Keep an in-memory registry of ingested documents
- Turn index results into display-ready sources and prompt context
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from lexirank.config.schema import LexiRankConfig
from lexirank.core.chunk import Chunk, ChunkMetadata, SearchResult
from lexirank.core.exceptions import DocumentNotFoundError, IngestionError
from lexirank.logging.logger import get_logger
from lexirank.logging.tags import INGEST, RETRIEVER
from lexirank.retrieval.lexical import LexicalIndex

from .chunker import SentenceChunker
from .models import Document, Source

logger = get_logger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"


class DocumentService:
    """
    Document-level operations over a LexicalIndex.

    Example:
        >>> service = DocumentService(LexicalIndex())
        >>> doc = service.ingest_text("The cat sat on the mat.", filename="cats.txt")
        >>> [s.filename for s in service.search("cat")]
        ['cats.txt']
    """

    def __init__(
        self,
        index: LexicalIndex,
        chunker: Optional[SentenceChunker] = None,
        *,
        default_limit: int = 5,
        snippet_chars: int = 200,
    ) -> None:
        self.index = index
        self.chunker = chunker or SentenceChunker()
        self.default_limit = default_limit
        self.snippet_chars = snippet_chars
        self._documents: Dict[str, Document] = {}

    @classmethod
    def from_config(
        cls, config: LexiRankConfig, index: Optional[LexicalIndex] = None
    ) -> "DocumentService":
        """Build a service (and, if needed, a fresh index) from configuration."""
        return cls(
            index if index is not None else LexicalIndex(),
            SentenceChunker(
                chunk_size=config.chunking.chunk_size,
                chunk_overlap=config.chunking.chunk_overlap,
            ),
            default_limit=config.retrieval.limit,
            snippet_chars=config.retrieval.snippet_chars,
        )

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    def ingest_text(
        self,
        text: str,
        filename: str,
        document_id: Optional[str] = None,
    ) -> Document:
        """
        Chunk `text` and index it as one document.

        Args:
            text: Full source text
            filename: Name reported back in search results
            document_id: Optional id; a random hex id is generated otherwise

        Returns:
            The recorded Document

        Raises:
            IngestionError: If the text yields no chunks or the id is taken
        """
        document_id = document_id or uuid.uuid4().hex
        if document_id in self._documents:
            raise IngestionError(f"Document already ingested: {document_id!r}")

        pieces = self.chunker.split(text)
        if not pieces:
            raise IngestionError(f"No text to index in {filename!r}")

        chunks = [
            Chunk(
                id=f"{document_id}-chunk-{i}",
                content=piece,
                metadata=ChunkMetadata(
                    document_id=document_id,
                    filename=filename,
                    chunk_index=i,
                    total_chunks=len(pieces),
                ),
            )
            for i, piece in enumerate(pieces)
        ]
        self.index.insert_chunks(chunks)

        document = Document(id=document_id, filename=filename, chunk_count=len(chunks))
        self._documents[document_id] = document

        logger.info(
            f"{INGEST} Indexed {filename!r} as {document_id} "
            f"({len(chunks)} chunks, {self.chunker.chunker_id})"
        )
        return document

    def ingest_file(self, path: Union[str, Path], document_id: Optional[str] = None) -> Document:
        """
        Read a UTF-8 text file and ingest it.

        Raises:
            IngestionError: If the file can't be read or holds no text
        """
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {p}: {e}") from e

        return self.ingest_text(text, filename=p.name, document_id=document_id)

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def list_documents(self) -> List[Document]:
        """Ingested documents, oldest first."""
        return list(self._documents.values())

    def get_document(self, document_id: str) -> Document:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def delete_document(self, document_id: str) -> None:
        """
        Remove a document and all of its chunks.

        Raises:
            DocumentNotFoundError: If the id was never ingested
        """
        document = self.get_document(document_id)
        removed = self.index.delete_chunks(document_id)
        del self._documents[document_id]

        logger.info(f"{INGEST} Deleted {document.filename!r} ({removed} chunks)")

    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------

    def query(self, question: str, limit: Optional[int] = None) -> List[SearchResult]:
        """Raw index results for `question`."""
        if limit is None:
            limit = self.default_limit
        return self.index.query(question, limit=limit)

    def search(self, question: str, limit: Optional[int] = None) -> List[Source]:
        """
        Ranked sources for `question`, with content trimmed to a snippet.

        An empty list means nothing is indexed yet.
        """
        results = self.query(question, limit=limit)
        logger.debug(f"{RETRIEVER} {len(results)} sources for {question!r}")
        return [self._to_source(result) for result in results]

    def _to_source(self, result: SearchResult) -> Source:
        content = result.content
        if len(content) > self.snippet_chars:
            content = content[: self.snippet_chars] + "..."
        return Source(
            filename=result.metadata.filename,
            document_id=result.metadata.document_id,
            chunk_index=result.metadata.chunk_index,
            snippet=content,
            score=result.score,
        )

    @staticmethod
    def build_context(results: Sequence[SearchResult]) -> str:
        """
        Format results as the context block handed to an answer generator.

        Example:
            [Source 1 - cats.txt]
            The cat sat on the mat.
        """
        return CONTEXT_SEPARATOR.join(
            f"[Source {i} - {result.metadata.filename}]\n{result.content}"
            for i, result in enumerate(results, start=1)
        )


__all__ = ["CONTEXT_SEPARATOR", "DocumentService"]

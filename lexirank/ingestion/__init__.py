# lexirank/ingestion/__init__.py
"""
Document-level ingestion on top of a LexicalIndex.

- SentenceChunker: splits raw text into overlapping passages
- DocumentService: ingests, lists, deletes and searches documents
"""

from .chunker import SentenceChunker
from .models import Document, Source
from .service import DocumentService

__all__ = ["Document", "DocumentService", "SentenceChunker", "Source"]

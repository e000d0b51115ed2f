# lexirank/ingestion/models.py
"""Records kept by the document service."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class Document(BaseModel):
    """An ingested source document."""

    id: str = Field(..., description="Document ID, shared by all of its chunks")
    filename: str = Field(..., description="Original file name")
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    chunk_count: int = Field(..., ge=1, description="Number of chunks indexed")


class Source(BaseModel):
    """A search hit trimmed for display."""

    filename: str
    document_id: str
    chunk_index: int
    snippet: str
    score: float = 0.0


__all__ = ["Document", "Source"]

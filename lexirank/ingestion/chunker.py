# lexirank/ingestion/chunker.py
"""
Sentence-aware sliding-window chunker.

Collapses whitespace, then cuts the text into windows of at most
`chunk_size` characters. A window prefers to end right after a period,
then at a space, as long as that boundary lies in the second half of the
window. Consecutive windows share `chunk_overlap` characters.

Chunker ID format: "sentence:{chunk_size}:{chunk_overlap}"
Example: "sentence:800:200"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class SentenceChunker:
    """
    Overlapping character windows that break at sentence or word ends.

    Example:
        >>> chunker = SentenceChunker(chunk_size=800, chunk_overlap=200)
        >>> chunker.chunker_id
        'sentence:800:200'
        >>> chunker.split("Short text.")
        ['Short text.']
    """

    plugin_name: str = field(default="sentence", repr=False)
    chunk_size: int = 800
    chunk_overlap: int = 200

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must be >= 0, got {self.chunk_overlap}")
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be < chunk_size ({self.chunk_size})"
            )

    @property
    def chunker_id(self) -> str:
        """Unique identifier for this chunker configuration."""
        return f"{self.plugin_name}:{self.chunk_size}:{self.chunk_overlap}"

    def split(self, text: str) -> List[str]:
        """
        Split text into ordered, overlapping passages.

        Returns:
            List of non-empty passages. Empty list if the text is blank.
        """
        cleaned = _WHITESPACE_RE.sub(" ", text).strip()
        if not cleaned:
            return []
        if len(cleaned) <= self.chunk_size:
            return [cleaned]

        half = self.chunk_size / 2
        pieces: List[str] = []
        start = 0
        while start < len(cleaned):
            end = start + self.chunk_size

            if end < len(cleaned):
                last_period = cleaned.rfind(".", start, end)
                last_space = cleaned.rfind(" ", start, end + 1)
                if last_period > start + half:
                    end = last_period + 1
                elif last_space > start + half:
                    end = last_space

            pieces.append(cleaned[start:end].strip())

            # Always move forward, even when the overlap exceeds the step
            start = max(end - self.chunk_overlap, start + 1)
            if start >= len(cleaned) - self.chunk_overlap:
                break

        return [piece for piece in pieces if piece]


__all__ = ["SentenceChunker"]

# lexirank/retrieval/lexical/similarity.py
"""
Cosine similarity between sparse term vectors, and top-K ranking.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple


@dataclass
class SimilarityHit:
    """A single ranked candidate."""

    chunk_id: str
    score: float


def _squared_norm(vector: Mapping[str, float]) -> float:
    return sum(weight * weight for weight in vector.values())


def cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """
    Cosine of the angle between two sparse vectors.

    The dot product runs over the terms both vectors share; each norm runs
    over its own vector. Returns 0.0 when either vector has zero norm.
    """
    norm_a = _squared_norm(a)
    norm_b = _squared_norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    # Sorted so the summation order does not depend on argument order
    dot = sum(a[term] * b[term] for term in sorted(a.keys() & b.keys()))
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


def rank(
    query_vector: Mapping[str, float],
    candidates: Iterable[Tuple[str, Mapping[str, float]]],
    limit: int = 5,
) -> List[SimilarityHit]:
    """
    Score every candidate against the query and keep the best `limit`.

    Sorting is stable, so candidates with equal scores stay in the order
    they were supplied.

    Args:
        query_vector: Vectorized query
        candidates: (chunk_id, term_vector) pairs
        limit: Maximum number of hits to return

    Returns:
        Hits sorted by descending score
    """
    if limit < 1:
        return []

    scored = [
        SimilarityHit(chunk_id=chunk_id, score=cosine_similarity(query_vector, vector))
        for chunk_id, vector in candidates
    ]
    scored.sort(key=lambda hit: hit.score, reverse=True)
    return scored[:limit]


__all__ = ["SimilarityHit", "cosine_similarity", "rank"]

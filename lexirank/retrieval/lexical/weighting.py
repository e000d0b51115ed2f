# lexirank/retrieval/lexical/weighting.py
"""
TF-IDF weighting.

Three pieces, used in this order:
- compute_tf: length-normalized term frequencies of one token sequence
- DocumentFrequencyRegistry: how many chunks each term has appeared in
- vectorize: combines both into a sparse TF-IDF vector

The same vectorize() serves insertion and query time; only the `total_docs`
the caller passes in differs.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable, Iterator, Mapping, Sequence

from lexirank.core.chunk import TermVector


def compute_tf(tokens: Sequence[str]) -> Dict[str, float]:
    """
    Count each distinct term and divide by the total token count.

    Values sum to 1.0 for any non-empty input. An empty sequence yields an
    empty mapping.
    """
    if not tokens:
        return {}

    total = len(tokens)
    return {term: count / total for term, count in Counter(tokens).items()}


class DocumentFrequencyRegistry:
    """
    Number of chunks each term has ever appeared in.

    Counts only grow: deleting chunks from an index does not decrement
    them, so idf denominators keep the mass of deleted chunks.

    Example:
        >>> registry = DocumentFrequencyRegistry()
        >>> registry.observe({"cat", "mat"})
        >>> registry.observe({"cat"})
        >>> registry.lookup("cat"), registry.lookup("never-seen")
        (2, 1)
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}

    def observe(self, terms: Iterable[str]) -> None:
        """Count one chunk for every distinct term in `terms`."""
        for term in set(terms):
            self._counts[term] = self._counts.get(term, 0) + 1

    def lookup(self, term: str) -> int:
        """Document frequency of `term`; unseen terms count as 1."""
        return self._counts.get(term, 1)

    def __contains__(self, term: object) -> bool:
        return term in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)


def vectorize(
    tf: Mapping[str, float],
    total_docs: int,
    registry: DocumentFrequencyRegistry,
) -> TermVector:
    """
    Weight term frequencies by smoothed inverse document frequency.

    idf = ln(total_docs / df(term)) + 1, weight = tf * idf.

    Args:
        tf: Output of compute_tf()
        total_docs: Corpus size the idf is computed against
        registry: Current document frequencies

    Returns:
        Sparse term -> weight mapping (empty when `tf` is empty)
    """
    if not tf:
        return {}
    if total_docs < 1:
        raise ValueError(f"total_docs must be >= 1, got {total_docs}")

    return {
        term: freq * (math.log(total_docs / registry.lookup(term)) + 1)
        for term, freq in tf.items()
    }


__all__ = ["DocumentFrequencyRegistry", "compute_tf", "vectorize"]

# lexirank/retrieval/lexical/__init__.py
"""
Lexical (TF-IDF) retrieval.

Pipeline, leaves first:
    tokenize -> compute_tf -> DocumentFrequencyRegistry -> vectorize
    -> cosine_similarity / rank -> LexicalIndex
"""

from .index import LexicalIndex
from .similarity import SimilarityHit, cosine_similarity, rank
from .tokenizer import MIN_TOKEN_LENGTH, tokenize
from .weighting import DocumentFrequencyRegistry, compute_tf, vectorize

__all__ = [
    "DocumentFrequencyRegistry",
    "LexicalIndex",
    "MIN_TOKEN_LENGTH",
    "SimilarityHit",
    "compute_tf",
    "cosine_similarity",
    "rank",
    "tokenize",
    "vectorize",
]

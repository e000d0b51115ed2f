# lexirank/retrieval/__init__.py
"""
Retrieval for lexirank.

Relevance is purely lexical: chunks and questions are compared as sparse
TF-IDF term vectors. See lexirank.retrieval.lexical.
"""

from .lexical import LexicalIndex

__all__ = ["LexicalIndex"]

# lexirank/retrieval/lexical/tokenizer.py
"""Word tokenizer shared by insertion and query time."""

from __future__ import annotations

import re
from typing import List

# Anything that is not [A-Za-z0-9_] or whitespace becomes a separator
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)

# Tokens must be strictly longer than two characters
MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> List[str]:
    """
    Turn raw text into a list of normalized terms.

    Lower-cases, replaces punctuation with spaces, splits on whitespace and
    drops tokens of two characters or fewer. Order is preserved.

    Examples:
        >>> tokenize("Hello, World! foo")
        ['hello', 'world', 'foo']
        >>> tokenize("go to it")
        []
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


__all__ = ["MIN_TOKEN_LENGTH", "tokenize"]

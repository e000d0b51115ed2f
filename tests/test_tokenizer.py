# tests/test_tokenizer.py
"""
Tests for the word tokenizer.

Verifies:
1. Case folding and punctuation stripping
2. Tokens of two characters or fewer are dropped
3. Order and repeats are preserved
"""

import pytest

from lexirank.retrieval.lexical.tokenizer import MIN_TOKEN_LENGTH, tokenize

pytestmark = pytest.mark.tier1


class TestTokenize:
    """Tests for tokenize()"""

    def test_basic_sentence(self):
        """Case-folded, punctuation stripped."""
        assert tokenize("Hello, World! foo") == ["hello", "world", "foo"]

    def test_short_tokens_dropped(self):
        """Two-letter words never survive."""
        assert tokenize("go to it") == []
        assert tokenize("to be or not") == ["not"]

    def test_min_length_is_three(self):
        assert MIN_TOKEN_LENGTH == 3
        assert tokenize("ab abc") == ["abc"]

    def test_underscore_is_word_character(self):
        assert tokenize("snake_case value") == ["snake_case", "value"]

    def test_apostrophe_splits_word(self):
        """Punctuation inside a word becomes a separator."""
        assert tokenize("can't stop") == ["can", "stop"]

    def test_digits_kept(self):
        assert tokenize("Revenue 2024 grew 15%") == ["revenue", "2024", "grew"]

    def test_non_ascii_letters_are_separators(self):
        assert tokenize("café crème") == ["caf"]

    def test_order_and_repeats_preserved(self):
        assert tokenize("cat dog cat") == ["cat", "dog", "cat"]

    def test_whitespace_runs(self):
        assert tokenize("  alpha\t\tbeta\n\ngamma  ") == ["alpha", "beta", "gamma"]

    @pytest.mark.parametrize("text", ["", "   ", "!!! ??? ...", "a b c"])
    def test_degenerate_input_yields_nothing(self, text):
        assert tokenize(text) == []

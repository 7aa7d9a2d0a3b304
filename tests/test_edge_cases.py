"""
Edge case tests for stringmetric.

Tests cover:
- Empty strings across every algorithm
- Unicode edge cases (CJK, combining chars, emoji)
- Longer strings
- Adversarial inputs (repeated patterns)
"""

import pytest

import stringmetric as sm
from stringmetric import Algorithm, AlgorithmSelector


class TestEmptyStrings:
    """Empty sequences are valid input everywhere."""

    def test_distances(self):
        assert sm.levenshtein("", "") == 0
        assert sm.damerau_levenshtein("", "") == 0
        assert sm.hamming("", "") == 0

    def test_similarities(self):
        assert sm.jaro_winkler_similarity("", "") == 1.0
        assert sm.levenshtein_similarity("", "") == 1.0
        assert sm.most_frequent_characters_normalized("", "", 2) == 0.0

    @pytest.mark.parametrize(
        "selector",
        [
            AlgorithmSelector.damerau_levenshtein(),
            AlgorithmSelector.hamming(),
            AlgorithmSelector.jaro_winkler(),
            AlgorithmSelector.levenshtein(),
            AlgorithmSelector.most_frequent_k(2),
            AlgorithmSelector.most_frequent_k_normalized(2),
        ],
    )
    def test_dispatch_accepts_empty(self, selector):
        assert isinstance(sm.similarity("", "", selector), float)


class TestUnicode:
    """Code points are the unit of comparison."""

    def test_cjk(self):
        assert sm.levenshtein("君子和而不同", "小人同而不和") == 4
        assert sm.hamming("君子和而不同", "小人同而不和") == 4

    def test_combining_character_counts_separately(self):
        # "e" + COMBINING ACUTE ACCENT is two code points
        assert sm.levenshtein("e\u0301", "e") == 1

    def test_emoji(self):
        assert sm.levenshtein("😀😃", "😀😄") == 1
        assert sm.most_frequent_k_hashing("😀😀😃", 1) == {"😀": 2}

    def test_jaro_winkler_cjk_prefix(self):
        assert sm.jaro_winkler_similarity("日本語", "日本人") > sm.jaro_similarity("日本語", "日本人")


class TestLongStrings:
    """Longer inputs still produce exact answers."""

    def test_levenshtein_long(self):
        a = "a" * 500
        b = "a" * 499 + "b"
        assert sm.levenshtein(a, b) == 1

    def test_damerau_long_transposition(self):
        a = "x" * 200 + "ab" + "y" * 200
        b = "x" * 200 + "ba" + "y" * 200
        assert sm.damerau_levenshtein(a, b) == 1

    def test_hamming_long(self):
        assert sm.hamming("ab" * 1000, "ba" * 1000) == 2000


class TestAdversarial:
    """Repeated patterns."""

    def test_repeated_characters_jaro(self):
        assert sm.jaro_winkler_similarity("aaaa", "aaaa") == 1.0
        assert 0.0 < sm.jaro_winkler_similarity("aaaa", "aaab") < 1.0

    def test_repeated_characters_most_frequent(self):
        assert sm.most_frequent_characters("aaaa", "aaaa", 1) == 6
        assert sm.most_frequent_characters_normalized("aaaa", "aaaa", 1) == 1.0

    def test_all_distinct_with_large_k(self):
        assert sm.most_frequent_characters_normalized("abc", "cba", 100) == 1.0

    def test_string_algorithm_names(self):
        assert sm.similarity("abab", "baba", "hamming") == 4.0
        assert sm.similarity("abab", "baba", Algorithm.DAMERAU_LEVENSHTEIN) == 2.0

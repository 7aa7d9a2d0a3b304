"""
Parameter validation tests for stringmetric.

Tests cover:
- k parameter validation for the most frequent K algorithms
- Length precondition for Hamming
- Type validation (non-string inputs)
- Exception hierarchy
"""

import pytest

import stringmetric as sm


class TestParameterValidation:
    """Tests for parameter boundary validation."""

    def test_negative_k(self):
        """Negative k should raise ValidationError."""
        with pytest.raises(sm.ValidationError, match="k must be non-negative"):
            sm.most_frequent_characters("hello", "world", k=-1)
        with pytest.raises(sm.ValidationError, match="k must be non-negative"):
            sm.most_frequent_characters_normalized("hello", "world", k=-1)

    def test_float_k(self):
        """Non-integer k should raise ValidationError."""
        with pytest.raises(sm.ValidationError, match="k must be an int"):
            sm.most_frequent_characters("hello", "world", k=2.0)

    def test_bool_k(self):
        """bool is not accepted as k."""
        with pytest.raises(sm.ValidationError):
            sm.most_frequent_characters_normalized("hello", "world", k=True)

    def test_float_max_distance(self):
        with pytest.raises(sm.ValidationError, match="max_distance must be an int"):
            sm.most_frequent_characters("hello", "world", 2, max_distance=2.5)

    def test_bool_max_distance(self):
        with pytest.raises(sm.ValidationError, match="max_distance must be an int"):
            sm.most_frequent_characters("hello", "world", 2, max_distance=True)

    def test_hamming_length_mismatch(self):
        """Mismatched lengths should raise LengthMismatchError."""
        with pytest.raises(sm.LengthMismatchError, match="got 5 and 4"):
            sm.hamming("hello", "help")

    def test_unknown_algorithm(self):
        with pytest.raises(sm.AlgorithmError):
            sm.similarity("a", "b", "cosine")

    def test_k_for_algorithm_without_k(self):
        with pytest.raises(sm.ValidationError):
            sm.similarity("a", "b", "levenshtein", k=2)


class TestTypeValidation:
    """Non-string inputs raise TypeError."""

    @pytest.mark.parametrize(
        "func",
        [
            sm.levenshtein,
            sm.damerau_levenshtein,
            sm.hamming,
            sm.jaro_similarity,
            sm.jaro_winkler_similarity,
            sm.similarity,
            sm.normalized_similarity,
        ],
    )
    def test_none_raises(self, func):
        with pytest.raises(TypeError):
            func(None, "hello")
        with pytest.raises(TypeError):
            func("hello", None)
        with pytest.raises(TypeError):
            func(None, None)

    def test_most_frequent_none_raises(self):
        with pytest.raises(TypeError):
            sm.most_frequent_characters(None, "hello", 2)
        with pytest.raises(TypeError):
            sm.most_frequent_characters_normalized("hello", None, 2)
        with pytest.raises(TypeError):
            sm.most_frequent_k_hashing(None, 2)

    def test_list_input_raises(self):
        with pytest.raises(TypeError, match="must be str"):
            sm.levenshtein(["a", "b"], "ab")

    def test_messages_name_the_argument(self):
        with pytest.raises(TypeError, match="^s must be str, got NoneType$"):
            sm.most_frequent_k_hashing(None, 2)
        with pytest.raises(TypeError, match="^a must be str, got int$"):
            sm.most_frequent_characters(3, "hello", 2)
        with pytest.raises(TypeError, match="^b must be str, got bytes$"):
            sm.levenshtein("hello", b"hello")


class TestExceptionHierarchy:
    """All library errors derive from StringMetricError."""

    def test_subclasses(self):
        assert issubclass(sm.ValidationError, sm.StringMetricError)
        assert issubclass(sm.LengthMismatchError, sm.ValidationError)
        assert issubclass(sm.AlgorithmError, sm.StringMetricError)

    def test_value_error_compatible(self):
        assert issubclass(sm.ValidationError, ValueError)
        assert issubclass(sm.AlgorithmError, ValueError)

    def test_catch_base(self):
        with pytest.raises(sm.StringMetricError):
            sm.hamming("a", "ab")

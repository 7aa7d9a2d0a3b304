"""Enums for stringmetric API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available string metric algorithms.

    This enum provides type-safe algorithm selection for the dispatch
    functions. String values are accepted anywhere an Algorithm is.

    Example:
        >>> from stringmetric import Algorithm, similarity
        >>> similarity("kitten", "sitting", Algorithm.LEVENSHTEIN)
        3.0
        >>> similarity("research", "seeking", Algorithm.MOST_FREQUENT_K, k=2)
        8.0
    """

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including transpositions (e.g., 'ca' -> 'ac' is 1 edit)"""

    HAMMING = "hamming"
    """Hamming distance (for equal-length strings)"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    MOST_FREQUENT_K = "most_frequent_k"
    """Most frequent K characters distance (needs k)"""

    MOST_FREQUENT_K_NORMALIZED = "most_frequent_k_normalized"
    """Normalized most frequent K characters similarity (needs k)"""

    @property
    def label(self) -> str:
        """Human-readable name, without any k parameter."""
        return _LABELS[self]

    @property
    def takes_k(self) -> bool:
        """Whether the algorithm is parameterised by k."""
        return self in (Algorithm.MOST_FREQUENT_K, Algorithm.MOST_FREQUENT_K_NORMALIZED)


_LABELS = {
    Algorithm.DAMERAU_LEVENSHTEIN: "Damerau-Levenshtein",
    Algorithm.HAMMING: "Hamming",
    Algorithm.JARO_WINKLER: "Jaro-Winkler",
    Algorithm.LEVENSHTEIN: "Levenshtein",
    Algorithm.MOST_FREQUENT_K: "Most Frequent K Characters",
    Algorithm.MOST_FREQUENT_K_NORMALIZED: "Normalized Most Frequent K Characters",
}


__all__ = ["Algorithm"]

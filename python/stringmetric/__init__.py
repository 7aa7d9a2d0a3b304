"""
stringmetric - String similarity and distance metrics

A pure Python library for scoring how alike two strings are with
Levenshtein, Damerau-Levenshtein, Hamming, Jaro-Winkler and most frequent
K characters.

Example usage:
    >>> import stringmetric as sm

    # Simple similarity (Jaro-Winkler by default)
    >>> sm.jaro_winkler_similarity("MARTHA", "MARHTA")
    0.961...

    # Edit distances
    >>> sm.levenshtein("kitten", "sitting")
    3
    >>> sm.damerau_levenshtein("specter", "spectre")
    1

    # Pick the algorithm at runtime
    >>> selector = sm.AlgorithmSelector.most_frequent_k_normalized(3)
    >>> selector.describe()
    'Normalized Most Frequent K Characters (k=3)'
    >>> sm.similarity("aabbbcc", "bbccddee", selector)
    0.6
"""

from importlib.metadata import version as _get_version

from stringmetric.dispatch import (
    AlgorithmComparison,
    compare_algorithms,
    normalized_similarity,
    similarity,
)
from stringmetric.edit import (
    damerau_levenshtein,
    damerau_levenshtein_similarity,
    hamming,
    hamming_similarity,
    levenshtein,
    levenshtein_similarity,
)
from stringmetric.enums import Algorithm
from stringmetric.exceptions import (
    AlgorithmError,
    LengthMismatchError,
    StringMetricError,
    ValidationError,
)
from stringmetric.frequency import (
    most_frequent_characters,
    most_frequent_characters_normalized,
    most_frequent_k_hashing,
)
from stringmetric.jaro import jaro_similarity, jaro_winkler_similarity
from stringmetric.selector import AlgorithmSelector

__version__ = _get_version("stringmetric")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "StringMetricError",
    "ValidationError",
    "LengthMismatchError",
    "AlgorithmError",
    # Algorithm selection
    "Algorithm",
    "AlgorithmSelector",
    # Dispatch
    "similarity",
    "normalized_similarity",
    "compare_algorithms",
    "AlgorithmComparison",
    # Distance/similarity functions
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "hamming",
    "hamming_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "most_frequent_characters",
    "most_frequent_characters_normalized",
    "most_frequent_k_hashing",
    # Convenience aliases
    "edit_distance",
]


# Convenience aliases
edit_distance = levenshtein

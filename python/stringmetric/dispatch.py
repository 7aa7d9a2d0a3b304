"""Single entry point for all string metric algorithms.

Both accessors accept the same algorithm spellings: an AlgorithmSelector,
an Algorithm enum value, or its string name (with ``k`` passed by keyword
for the most-frequent-K algorithms).

Example usage:
    >>> import stringmetric as sm

    # Jaro-Winkler is the default
    >>> sm.similarity("MARTHA", "MARHTA")
    0.961...

    # Raw scores are widened to float
    >>> sm.similarity("kitten", "sitting", sm.Algorithm.LEVENSHTEIN)
    3.0
    >>> sm.similarity("research", "seeking", "most_frequent_k", k=2)
    8.0

    # The same choice, scaled to 0.0 - 1.0
    >>> sm.normalized_similarity("kitten", "sitting", sm.Algorithm.LEVENSHTEIN)
    0.571...

    # Score one pair under several algorithms
    >>> results = sm.compare_algorithms("hello", "hallo")
    >>> [(r.label, round(r.score, 2)) for r in results]
    [('Jaro-Winkler', 0.88), ('Levenshtein', 0.8), ('Damerau-Levenshtein', 0.8), ('Hamming', 0.8)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from stringmetric._utils import check_strings
from stringmetric.edit import (
    damerau_levenshtein,
    damerau_levenshtein_similarity,
    hamming,
    hamming_similarity,
    levenshtein,
    levenshtein_similarity,
)
from stringmetric.enums import Algorithm
from stringmetric.frequency import (
    most_frequent_characters,
    most_frequent_characters_normalized,
)
from stringmetric.jaro import jaro_winkler_similarity
from stringmetric.selector import AlgorithmSelector, normalize_algorithm

AlgorithmLike = Union[str, Algorithm, AlgorithmSelector]

__all__ = [
    "similarity",
    "normalized_similarity",
    "compare_algorithms",
    "AlgorithmComparison",
]


@dataclass(frozen=True)
class AlgorithmComparison:
    """Result from multi-algorithm comparison."""

    algorithm: AlgorithmSelector
    label: str
    score: float


def similarity(
    a: str,
    b: str,
    algorithm: AlgorithmLike = Algorithm.JARO_WINKLER,
    *,
    k: Optional[int] = None,
) -> float:
    """Score two strings with the chosen algorithm.

    Distances are returned as they are, only widened to float, so for
    Levenshtein, Damerau-Levenshtein, Hamming and raw most-frequent-K a
    lower score means more similar.

    Args:
        a: First string.
        b: Second string.
        algorithm: Algorithm to use (default Jaro-Winkler). Options:
            - "damerau_levenshtein": Damerau-Levenshtein distance
            - "hamming": Hamming distance (equal lengths only)
            - "jaro_winkler": Jaro-Winkler similarity (default)
            - "levenshtein": Levenshtein distance
            - "most_frequent_k": Most frequent K characters distance
            - "most_frequent_k_normalized": Normalized most frequent K similarity
        k: Number of characters for the most-frequent-K algorithms when
            ``algorithm`` is not an AlgorithmSelector.

    Returns:
        The algorithm's score as a float.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        ValidationError: If k is missing, superfluous or negative.
        LengthMismatchError: For Hamming on unequal-length strings.
    """
    selector = normalize_algorithm(algorithm, k)
    check_strings(a, b)
    algo = selector.algorithm
    if algo is Algorithm.JARO_WINKLER:
        return jaro_winkler_similarity(a, b)
    if algo is Algorithm.DAMERAU_LEVENSHTEIN:
        return float(damerau_levenshtein(a, b))
    if algo is Algorithm.HAMMING:
        return float(hamming(a, b))
    if algo is Algorithm.LEVENSHTEIN:
        return float(levenshtein(a, b))
    if algo is Algorithm.MOST_FREQUENT_K:
        return float(most_frequent_characters(a, b, selector.k))
    return most_frequent_characters_normalized(a, b, selector.k)


def normalized_similarity(
    a: str,
    b: str,
    algorithm: AlgorithmLike = Algorithm.JARO_WINKLER,
    *,
    k: Optional[int] = None,
) -> float:
    """Score two strings with the chosen algorithm on a 0.0 - 1.0 scale.

    1.0 always means identical. Edit distances are divided by the longer
    length and subtracted from 1.0; both most-frequent-K variants use the
    normalized overlap.

    Args:
        a: First string.
        b: Second string.
        algorithm: Algorithm to use (default Jaro-Winkler), as for
            :func:`similarity`.
        k: Number of characters for the most-frequent-K algorithms.

    Returns:
        Similarity score between 0.0 and 1.0.
    """
    selector = normalize_algorithm(algorithm, k)
    check_strings(a, b)
    algo = selector.algorithm
    if algo is Algorithm.JARO_WINKLER:
        return jaro_winkler_similarity(a, b)
    if algo is Algorithm.DAMERAU_LEVENSHTEIN:
        return damerau_levenshtein_similarity(a, b)
    if algo is Algorithm.HAMMING:
        return hamming_similarity(a, b)
    if algo is Algorithm.LEVENSHTEIN:
        return levenshtein_similarity(a, b)
    return most_frequent_characters_normalized(a, b, selector.k)


def compare_algorithms(
    a: str,
    b: str,
    algorithms: Optional[Iterable[AlgorithmLike]] = None,
    normalized: bool = True,
) -> List[AlgorithmComparison]:
    """Compare two strings using multiple algorithms.

    Args:
        a: First string.
        b: Second string.
        algorithms: Algorithms to use. Defaults to Jaro-Winkler, Levenshtein
            and Damerau-Levenshtein, plus Hamming when the lengths match.
            Most-frequent-K algorithms must be given as AlgorithmSelector.
        normalized: Score with :func:`normalized_similarity` (default) or
            with the raw :func:`similarity`.

    Returns:
        List of AlgorithmComparison objects. Normalized scores are sorted
        descending, ties keeping the order in which the algorithms were
        given. Raw scores mix distances (lower is closer) with similarities,
        so they are returned in the given order, unsorted.

    Example:
        >>> results = compare_algorithms("kitten", "sitting")
        >>> for r in results:
        ...     print(f"{r.label}: {r.score:.3f}")
        Jaro-Winkler: 0.746
        Levenshtein: 0.571
        Damerau-Levenshtein: 0.571
    """
    check_strings(a, b)
    if algorithms is None:
        selectors = [
            AlgorithmSelector.jaro_winkler(),
            AlgorithmSelector.levenshtein(),
            AlgorithmSelector.damerau_levenshtein(),
        ]
        if len(a) == len(b):
            selectors.append(AlgorithmSelector.hamming())
    else:
        selectors = [normalize_algorithm(algorithm) for algorithm in algorithms]

    score = normalized_similarity if normalized else similarity
    results = [
        AlgorithmComparison(
            algorithm=selector,
            label=selector.describe(),
            score=score(a, b, selector),
        )
        for selector in selectors
    ]
    if normalized:
        results.sort(key=lambda result: result.score, reverse=True)
    return results

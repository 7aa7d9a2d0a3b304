"""Algorithm selection with an optional ``k`` payload.

An :class:`AlgorithmSelector` pairs an :class:`~stringmetric.enums.Algorithm`
with the parameter the two most-frequent-K variants need, so a single value
names exactly one scoring function.

Example usage:
    >>> from stringmetric import AlgorithmSelector
    >>> AlgorithmSelector.most_frequent_k(2).describe()
    'Most Frequent K Characters (k=2)'
    >>> str(AlgorithmSelector.jaro_winkler())
    'Jaro-Winkler'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from stringmetric._utils import check_k
from stringmetric.enums import Algorithm
from stringmetric.exceptions import AlgorithmError, ValidationError


@dataclass(frozen=True)
class AlgorithmSelector:
    """A fully specified algorithm choice.

    Attributes:
        algorithm: The algorithm to run.
        k: Number of most frequent characters, required for
            ``MOST_FREQUENT_K`` and ``MOST_FREQUENT_K_NORMALIZED`` and
            forbidden for every other algorithm.
    """

    algorithm: Algorithm
    k: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.algorithm, Algorithm):
            raise TypeError(
                f"algorithm must be an Algorithm enum, got {type(self.algorithm).__name__}"
            )
        if self.algorithm.takes_k:
            if self.k is None:
                raise ValidationError(f"{self.algorithm.value} requires k")
            check_k(self.k)
        elif self.k is not None:
            raise ValidationError(f"{self.algorithm.value} does not take k")

    @classmethod
    def damerau_levenshtein(cls) -> AlgorithmSelector:
        return cls(Algorithm.DAMERAU_LEVENSHTEIN)

    @classmethod
    def hamming(cls) -> AlgorithmSelector:
        return cls(Algorithm.HAMMING)

    @classmethod
    def jaro_winkler(cls) -> AlgorithmSelector:
        return cls(Algorithm.JARO_WINKLER)

    @classmethod
    def levenshtein(cls) -> AlgorithmSelector:
        return cls(Algorithm.LEVENSHTEIN)

    @classmethod
    def most_frequent_k(cls, k: int) -> AlgorithmSelector:
        return cls(Algorithm.MOST_FREQUENT_K, k)

    @classmethod
    def most_frequent_k_normalized(cls, k: int) -> AlgorithmSelector:
        return cls(Algorithm.MOST_FREQUENT_K_NORMALIZED, k)

    def describe(self) -> str:
        """Human-readable label, e.g. ``"Normalized Most Frequent K Characters (k=2)"``."""
        if self.k is None:
            return self.algorithm.label
        return f"{self.algorithm.label} (k={self.k})"

    def __str__(self) -> str:
        return self.describe()


def normalize_algorithm(
    algorithm: Union[str, Algorithm, AlgorithmSelector],
    k: Optional[int] = None,
) -> AlgorithmSelector:
    """Convert any accepted algorithm spelling to an AlgorithmSelector.

    Args:
        algorithm: An AlgorithmSelector, an Algorithm enum value or a string
            algorithm name (case-insensitive).
        k: Parameter for the most-frequent-K algorithms when ``algorithm``
            is an enum or a string.

    Returns:
        The equivalent AlgorithmSelector.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        ValidationError: If k is missing, superfluous or invalid.
        TypeError: If algorithm is not a string, Algorithm or AlgorithmSelector.

    Example:
        >>> normalize_algorithm("Levenshtein")
        AlgorithmSelector(algorithm=<Algorithm.LEVENSHTEIN: 'levenshtein'>, k=None)
        >>> normalize_algorithm(Algorithm.MOST_FREQUENT_K, k=2).describe()
        'Most Frequent K Characters (k=2)'
    """
    if isinstance(algorithm, AlgorithmSelector):
        if k is not None:
            raise ValidationError(
                "k must not be given separately when passing an AlgorithmSelector"
            )
        return algorithm

    # Algorithm is a str subclass, so check it first
    if isinstance(algorithm, Algorithm):
        return AlgorithmSelector(algorithm, k)

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        enum_values = {a.value: a for a in Algorithm}
        if algo_lower not in enum_values:
            raise AlgorithmError(
                f"Unknown algorithm: '{algorithm}'. "
                f"Valid options: {sorted(enum_values)}"
            )
        return AlgorithmSelector(enum_values[algo_lower], k)

    raise TypeError(
        "algorithm must be str, Algorithm or AlgorithmSelector, "
        f"got {type(algorithm).__name__}"
    )


__all__ = ["AlgorithmSelector", "normalize_algorithm"]

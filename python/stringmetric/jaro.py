"""Jaro and Jaro-Winkler similarity."""

from typing import Tuple

from stringmetric._utils import check_strings

MAX_PREFIX_LENGTH = 4
"""Longest common prefix rewarded by the Winkler adjustment."""

PREFIX_SCALE = 0.1
"""Winkler prefix scaling factor; above 0.25 scores could exceed 1.0."""


def _match(a: str, b: str) -> Tuple[int, int, int, int]:
    """Count matching characters and transpositions between a and b.

    Returns:
        ``(matches, transpositions, len_shorter, len_longer)``.
    """
    shorter, longer = (b, a) if len(a) > len(b) else (a, b)
    len_longer = len(longer)
    radius = len_longer // 2

    matched = [False] * len_longer
    matches = 0
    transpositions = 0
    previous = -1
    for i, char in enumerate(shorter):
        for j in range(max(0, i - radius), min(len_longer, i + radius)):
            if matched[j] or longer[j] != char:
                continue
            matched[j] = True
            matches += 1
            if previous != -1 and j < previous:
                transpositions += 1
            previous = j
            # First match in index order wins, not the closest one.
            break

    return matches, transpositions, len(shorter), len_longer


def _jaro(a: str, b: str) -> float:
    if a == b:
        return 1.0
    matches, transpositions, len_shorter, len_longer = _match(a, b)
    if matches == 0:
        return 0.0
    return (
        matches / len_shorter
        + matches / len_longer
        + (matches - transpositions) / matches
    ) / 3


def jaro_similarity(a: str, b: str) -> float:
    """
    Compute Jaro similarity (0.0 to 1.0).

    Good for short strings and name matching.

    Complexity:
        Time: O(m*n) worst case, typically O(m+n) for similar strings.
        Space: O(n) for matching character tracking.

    Example:
        >>> jaro_similarity("MARTHA", "MARHTA")
        0.944...
    """
    check_strings(a, b)
    return _jaro(a, b)


def jaro_winkler_similarity(a: str, b: str) -> float:
    """
    Compute Jaro-Winkler similarity (0.0 to 1.0).

    Extends Jaro similarity by giving extra weight to a common prefix of up
    to four characters, scaled by 0.1. Excellent for name matching.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity score where 1.0 means identical strings. Two empty strings
        score 1.0; an empty string against a non-empty one scores 0.0.

    Complexity:
        Time: O(m*n) worst case, typically O(m+n) for similar strings.
        Space: O(n) for matching character tracking.

    Example:
        >>> jaro_winkler_similarity("MARTHA", "MARHTA")
        0.961...
        >>> jaro_winkler_similarity("search", "find")
        0.0
    """
    check_strings(a, b)
    jaro = _jaro(a, b)
    if jaro == 0.0 or jaro == 1.0:
        return jaro

    prefix = 0
    for char_a, char_b in zip(a[:MAX_PREFIX_LENGTH], b[:MAX_PREFIX_LENGTH]):
        if char_a != char_b:
            break
        prefix += 1

    return jaro + prefix * PREFIX_SCALE * (1 - jaro)


__all__ = ["jaro_similarity", "jaro_winkler_similarity", "MAX_PREFIX_LENGTH", "PREFIX_SCALE"]

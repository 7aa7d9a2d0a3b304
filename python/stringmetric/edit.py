"""Edit distance algorithms: Levenshtein, Damerau-Levenshtein and Hamming.

All functions operate on Unicode code points, so a CJK ideograph or an
accented letter counts as one character.

Example usage:
    >>> from stringmetric import levenshtein, damerau_levenshtein, hamming
    >>> levenshtein("kitten", "sitting")
    3
    >>> damerau_levenshtein("ca", "ac")  # One transposition
    1
    >>> hamming("karolin", "kathrin")
    3
"""

from stringmetric._utils import check_strings
from stringmetric.exceptions import LengthMismatchError


def levenshtein(a: str, b: str) -> int:
    """Compute Levenshtein (edit) distance between two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        The minimum number of single-character insertions, deletions and
        substitutions needed to transform a into b.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(n) using two-row optimization.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("", "sitting")
        7
    """
    check_strings(a, b)
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Row i-1 of the cost matrix; row 0 is the distance from the empty prefix.
    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)
    for i, char_a in enumerate(a):
        current[0] = i + 1
        for j, char_b in enumerate(b):
            cost = 0 if char_a == char_b else 1
            current[j + 1] = min(
                current[j] + 1,  # insertion
                previous[j + 1] + 1,  # deletion
                previous[j] + cost,  # substitution
            )
        previous, current = current, previous

    return previous[len(b)]


def damerau_levenshtein(a: str, b: str) -> int:
    """Compute Damerau-Levenshtein distance (includes transpositions).

    Like Levenshtein but also counts a swap of two characters as a single
    edit. This is the unrestricted variant: a substring may be edited after
    being transposed, so ``"ca" -> "abc"`` costs 2.

    Args:
        a: First string
        b: Second string

    Returns:
        The edit distance.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(m*n) for the full DP matrix (transposition tracking requires it).

    Example:
        >>> damerau_levenshtein("ca", "ac")  # One transposition
        1
        >>> levenshtein("ca", "ac")  # Two edits without transposition
        2
    """
    check_strings(a, b)
    len_a = len(a)
    len_b = len(b)
    if a == b:
        return 0
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    # Row index in d of the last occurrence of each character of a.
    last_row = {}

    max_dist = len_a + len_b
    d = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    d[0][0] = max_dist
    for i in range(1, len_a + 2):
        d[i][0] = max_dist
        d[i][1] = i - 1
    for j in range(1, len_b + 2):
        d[0][j] = max_dist
        d[1][j] = j - 1

    for i in range(2, len_a + 2):
        char_a = a[i - 2]
        # Column in d of the last match of char_a in this row.
        last_match_col = 1
        for j in range(2, len_b + 2):
            char_b = b[j - 2]
            k = last_row.get(char_b, 1)
            l = last_match_col

            if char_a == char_b:
                cost = 0
                last_match_col = j
            else:
                cost = 1

            d[i][j] = min(
                d[i - 1][j - 1] + cost,  # substitution
                d[i][j - 1] + 1,  # insertion
                d[i - 1][j] + 1,  # deletion
                d[k - 1][l - 1] + (i - k - 1) + 1 + (j - l - 1),  # transposition
            )

        last_row[char_a] = i

    return d[len_a + 1][len_b + 1]


def hamming(a: str, b: str) -> int:
    """Compute Hamming distance between two equal-length strings.

    Raises:
        LengthMismatchError: If strings have different lengths.

    Complexity:
        Time: O(n) where n is the string length.
        Space: O(1) constant.

    Example:
        >>> hamming("karolin", "kathrin")
        3
    """
    check_strings(a, b)
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return sum(1 for char_a, char_b in zip(a, b) if char_a != char_b)


def _normalize_distance(distance: int, length: int) -> float:
    if length == 0:
        return 1.0
    return 1.0 - distance / length


def levenshtein_similarity(a: str, b: str) -> float:
    """Compute normalized Levenshtein similarity (0.0 to 1.0).

    Defined as ``1 - levenshtein(a, b) / max(len(a), len(b))``; two empty
    strings are identical and score 1.0.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    return _normalize_distance(levenshtein(a, b), max(len(a), len(b)))


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    """Compute normalized Damerau-Levenshtein similarity (0.0 to 1.0)."""
    return _normalize_distance(damerau_levenshtein(a, b), max(len(a), len(b)))


def hamming_similarity(a: str, b: str) -> float:
    """Compute normalized Hamming similarity (0.0 to 1.0).

    Raises:
        LengthMismatchError: If strings have different lengths.

    Example:
        >>> hamming_similarity("abc", "axc")
        0.666...  # 2 out of 3 match
    """
    return _normalize_distance(hamming(a, b), len(a))


__all__ = [
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "hamming",
    "hamming_similarity",
]

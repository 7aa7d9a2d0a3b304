"""Most frequent K characters similarity.

Both variants compare the top-k character histograms of two strings. The
raw variant subtracts the overlap from a fixed ``max_distance``; the
normalized variant divides the overlap by the combined string length.

Example usage:
    >>> from stringmetric import most_frequent_characters, most_frequent_characters_normalized
    >>> most_frequent_characters("research", "seeking", k=2)
    8
    >>> most_frequent_characters_normalized("aabbbcc", "bbccddee", k=3)
    0.6
"""

from typing import Dict

from stringmetric._utils import check_k, check_max_distance, check_string, check_strings

DEFAULT_MAX_DISTANCE = 10
"""Upper bound the raw most-frequent-K score is measured from."""


def most_frequent_k_hashing(s: str, k: int) -> Dict[str, int]:
    """Return the k most frequent characters of s with their counts.

    Characters with equal counts are ranked by their first occurrence in
    s. If s has fewer than k distinct characters, all of them are returned.

    Args:
        s: String to analyse.
        k: Maximum number of characters to keep.

    Returns:
        Dict of character to occurrence count, most frequent first.

    Raises:
        ValidationError: If k is negative.

    Example:
        >>> most_frequent_k_hashing("research", 2)
        {'r': 2, 'e': 2}
    """
    check_string(s, "s")
    check_k(k)

    counts: Dict[str, int] = {}
    first_index: Dict[str, int] = {}
    for index, char in enumerate(s):
        counts[char] = counts.get(char, 0) + 1
        first_index.setdefault(char, index)

    ranked = sorted(counts, key=lambda char: (-counts[char], first_index[char]))
    return {char: counts[char] for char in ranked[:k]}


def most_frequent_characters(
    a: str,
    b: str,
    k: int,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> int:
    """
    Compute the most frequent K characters distance.

    The overlap is the sum of a's counts for every character present in both
    top-k histograms. Only a's side is summed.

    Args:
        a: First string
        b: Second string
        k: Number of most frequent characters to compare.
        max_distance: Value returned when the histograms share nothing
            (default 10).

    Returns:
        ``max_distance - overlap``. Can be negative for long strings with a
        large overlap.

    Raises:
        ValidationError: If k is negative or max_distance is not an int.

    Example:
        >>> most_frequent_characters("night", "nacht", k=2)
        9
        >>> most_frequent_characters("my", "a", k=2)
        10
    """
    check_strings(a, b)
    check_max_distance(max_distance)
    hash_a = most_frequent_k_hashing(a, k)
    hash_b = most_frequent_k_hashing(b, k)
    overlap = sum(hash_a[char] for char in hash_a.keys() & hash_b.keys())
    return max_distance - overlap


def most_frequent_characters_normalized(a: str, b: str, k: int) -> float:
    """
    Compute normalized most frequent K characters similarity (0.0 to 1.0).

    Sums both strings' counts for every character in both top-k histograms
    and divides by ``len(a) + len(b)``.

    Raises:
        ValidationError: If k is negative.

    Example:
        >>> most_frequent_characters_normalized("night", "nacht", k=2)
        0.2
        >>> most_frequent_characters_normalized("my", "a", k=2)
        0.0
    """
    check_strings(a, b)
    hash_a = most_frequent_k_hashing(a, k)
    hash_b = most_frequent_k_hashing(b, k)
    common = hash_a.keys() & hash_b.keys()
    if not common:
        return 0.0
    shared = sum(hash_a[char] + hash_b[char] for char in common)
    return shared / (len(a) + len(b))


__all__ = [
    "most_frequent_k_hashing",
    "most_frequent_characters",
    "most_frequent_characters_normalized",
    "DEFAULT_MAX_DISTANCE",
]

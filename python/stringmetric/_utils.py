"""Internal utilities for stringmetric."""

from stringmetric.exceptions import ValidationError


def check_string(value: str, name: str) -> None:
    """Validate that a single input is a string.

    Raises:
        TypeError: If value is not a str (None included).
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def check_strings(a: str, b: str) -> None:
    """Validate that both inputs are strings.

    Raises:
        TypeError: If either argument is not a str (None included).
    """
    check_string(a, "a")
    check_string(b, "b")


def _check_int(value: int, name: str) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    return value


def check_k(k: int) -> int:
    """Validate a most-frequent-K ``k`` parameter.

    Args:
        k: Number of most frequent characters to keep.

    Returns:
        The validated k.

    Raises:
        ValidationError: If k is not an int or is negative.

    Example:
        >>> check_k(2)
        2
    """
    _check_int(k, "k")
    if k < 0:
        raise ValidationError(f"k must be non-negative, got {k}")
    return k


def check_max_distance(max_distance: int) -> int:
    """Validate the ``max_distance`` of the raw most-frequent-K score.

    Any int is accepted, negative ones included, since the score is only
    ever ``max_distance`` minus an overlap.

    Raises:
        ValidationError: If max_distance is not an int.
    """
    return _check_int(max_distance, "max_distance")


__all__ = ["check_string", "check_strings", "check_k", "check_max_distance"]

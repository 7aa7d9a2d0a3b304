"""Exceptions raised by stringmetric."""


class StringMetricError(Exception):
    """Base exception for all stringmetric errors."""


class ValidationError(StringMetricError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class LengthMismatchError(ValidationError):
    """Raised when an algorithm that needs equal-length strings gets unequal ones.

    Attributes:
        len_a: Length of the first string.
        len_b: Length of the second string.
    """

    def __init__(self, len_a: int, len_b: int) -> None:
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"strings must have equal length, got {len_a} and {len_b}"
        )


class AlgorithmError(StringMetricError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = [
    "StringMetricError",
    "ValidationError",
    "LengthMismatchError",
    "AlgorithmError",
]

"""Custom exceptions for labeled-vector."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

__all__ = [
    "CoefficientsIssue",
    "DimensionMismatchError",
    "InvalidCoefficientsError",
    "InvalidLabelError",
    "MissingCoefficientsError",
    "VectorError",
]


class CoefficientsIssue(StrEnum):
    """Why a coefficient sequence was rejected."""

    NOT_A_SEQUENCE = "not_a_sequence"
    NON_NUMERIC = "non_numeric"
    OUT_OF_RANGE = "out_of_range"
    EMPTY = "empty"


class VectorError(Exception):
    """Base exception for all labeled-vector errors."""


class InvalidCoefficientsError(VectorError):
    """Raised when a coefficient sequence fails validation.

    ``reason`` tells the cases apart.  For ``NON_NUMERIC`` and
    ``OUT_OF_RANGE`` the position and value of the first offending element
    are attached.
    """

    def __init__(
        self,
        message: str,
        reason: CoefficientsIssue,
        *,
        index: int | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.index = index
        self.value = value


class InvalidLabelError(VectorError):
    """Raised when a label is missing, not a string, or empty."""


class MissingCoefficientsError(VectorError):
    """Raised when a dot product operand exposes no coefficients at all."""


class DimensionMismatchError(VectorError):
    """Raised when two coefficient sequences have different lengths."""

    def __init__(self, message: str, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual

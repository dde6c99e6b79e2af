"""Input validation for coefficient sequences and labels.

Predicates return plain booleans; the ``validate_*`` helpers raise the
matching :mod:`labeled_vector.exceptions` error.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

from labeled_vector.exceptions import (
    CoefficientsIssue,
    InvalidCoefficientsError,
    InvalidLabelError,
)

_TEXT_TYPES = (str, bytes, bytearray)


def is_number(value: Any) -> bool:
    """Real numbers only. ``bool`` is excluded; ``nan`` and infinities are numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_coefficient_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def validate_coefficients(value: Any) -> tuple[float, ...]:
    """Check that ``value`` is a sequence of numbers and return it as floats.

    Integers too large for a float are rejected with ``OUT_OF_RANGE``.
    An empty sequence is accepted here; rejecting it is left to the caller.
    """
    if not is_coefficient_sequence(value):
        msg = f"coefficients must be a sequence, got {type(value).__name__}"
        raise InvalidCoefficientsError(msg, CoefficientsIssue.NOT_A_SEQUENCE)
    coefficients: list[float] = []
    for index, element in enumerate(value):
        if not is_number(element):
            msg = f"all the coefficients must be numbers (found {element!r} at index {index})"
            raise InvalidCoefficientsError(
                msg, CoefficientsIssue.NON_NUMERIC, index=index, value=element
            )
        try:
            coefficients.append(float(element))
        except OverflowError as exc:
            msg = f"coefficient at index {index} is too large to be represented as a float"
            raise InvalidCoefficientsError(
                msg, CoefficientsIssue.OUT_OF_RANGE, index=index, value=element
            ) from exc
    return tuple(coefficients)


def validate_not_empty(coefficients: Sequence[float]) -> None:
    if len(coefficients) == 0:
        msg = "coefficients must not be empty"
        raise InvalidCoefficientsError(msg, CoefficientsIssue.EMPTY)


def validate_label(value: Any) -> str:
    if not isinstance(value, str) or not value:
        msg = f"label must be a non-empty string, got {value!r}"
        raise InvalidLabelError(msg)
    return value

"""Shared math utilities for labeled-vector."""

from __future__ import annotations

import math
from collections.abc import Sequence

from labeled_vector.exceptions import DimensionMismatchError


def l2_norm(coefficients: Sequence[float]) -> float:
    """Euclidean norm of a coefficient sequence. ``0.0`` for an empty one."""
    return math.sqrt(sum((c * c for c in coefficients), 0.0))


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute the component-wise product-sum of two sequences.

    Raises ``DimensionMismatchError`` if the sequences have different lengths.
    """
    if len(b) != len(a):
        msg = "vectors must have the same dimensions to have a dot product"
        raise DimensionMismatchError(msg, expected=len(a), actual=len(b))
    return sum((x * y for x, y in zip(a, b, strict=True)), 0.0)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ``ZeroDivisionError``.

    ``0 / 0`` and ``nan / 0`` give ``nan``; any other ``x / 0`` gives an
    infinity carrying the combined sign of both operands.
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

"""Shared fixtures for labeled-vector tests."""

from __future__ import annotations

import math

import pytest

from labeled_vector import Vector


def make_coefficients(seed: int, dim: int = 16) -> list[float]:
    """Create deterministic, non-zero coefficients using math.sin.

    The same seed always returns the same sequence.
    """
    return [math.sin(seed * 1000 + i) + 2.0 for i in range(dim)]


class RawOperand:
    """A bare object exposing only ``coefficients`` and ``get_norm``.

    Stands in for third-party vector types that satisfy the protocols
    without inheriting from anything.
    """

    def __init__(self, coefficients: list[float] | None) -> None:
        self.coefficients = coefficients

    def get_norm(self) -> float:
        return math.sqrt(sum(c * c for c in self.coefficients or []))


@pytest.fixture
def v123() -> Vector:
    """Return Vector('v1', [1, 2, 3])."""
    return Vector("v1", [1, 2, 3])


@pytest.fixture
def v456() -> Vector:
    """Return Vector('v2', [4, 5, 6])."""
    return Vector("v2", [4, 5, 6])

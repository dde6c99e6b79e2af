"""The labeled vector entity."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any

from labeled_vector._math import dot_product, ieee_divide, l2_norm
from labeled_vector._validation import (
    is_coefficient_sequence,
    validate_coefficients,
    validate_label,
    validate_not_empty,
)
from labeled_vector.exceptions import MissingCoefficientsError
from labeled_vector.models import VectorSnapshot
from labeled_vector.protocols import HasCoefficients, VectorLike

logger = logging.getLogger(__name__)


class Vector:
    """A labeled point in n-dimensional real space with a cached L2 norm.

    The coefficients and their norm are stored as one pair guarded by a
    single lock: every mutation replaces both together and every read takes
    both together, so the norm is never stale, even across threads.

    Construction requires at least one coefficient, while
    ``set_coefficients`` later accepts an empty sequence (the norm then
    becomes ``0.0``).  The label is informational and never takes part in
    arithmetic.

    Parameters:
        label: Non-empty identifier used for display.
        coefficients: Sequence of real numbers (``bool`` is not a number).

    Raises:
        InvalidCoefficientsError: ``coefficients`` is not a sequence, holds a
            non-numeric or out-of-range element, or is empty.
        InvalidLabelError: ``label`` is not a non-empty string.
    """

    __slots__ = ("_coefficients", "_label", "_lock", "_norm")

    def __init__(self, label: str, coefficients: Sequence[float]) -> None:
        self._lock = threading.Lock()
        self._coefficients: tuple[float, ...] = ()
        self._norm: float = 0.0
        self._label: str = ""
        # Order matters: the emptiness check only runs once the label is valid.
        self._replace_coefficients(coefficients)
        self.set_label(label)
        validate_not_empty(self._coefficients)
        logger.debug(
            "Vector %r created (dimension=%d, norm=%g)", label, len(self._coefficients), self._norm
        )

    # -- read surface ------------------------------------------------------

    @property
    def coefficients(self) -> list[float]:
        """A copy of the current coefficients."""
        with self._lock:
            return list(self._coefficients)

    @property
    def label(self) -> str:
        with self._lock:
            return self._label

    @property
    def norm(self) -> float:
        with self._lock:
            return self._norm

    @property
    def dimension(self) -> int:
        with self._lock:
            return len(self._coefficients)

    def get_coefficients(self) -> list[float]:
        return self.coefficients

    def get_norm(self) -> float:
        return self.norm

    def snapshot(self) -> VectorSnapshot:
        """Capture label and coefficients as one consistent, frozen view."""
        with self._lock:
            label, coefficients = self._label, self._coefficients
        return VectorSnapshot(label=label, coefficients=coefficients)

    def _read_state(self) -> tuple[tuple[float, ...], float]:
        with self._lock:
            return self._coefficients, self._norm

    # -- pairwise operations -----------------------------------------------

    def get_dot_product(self, other: HasCoefficients) -> float:
        """Sum of component-wise products with ``other``.

        ``other`` only needs a ``coefficients`` attribute; it is never mutated.

        Raises:
            MissingCoefficientsError: ``other`` has no coefficient sequence.
            InvalidCoefficientsError: ``other`` holds a non-numeric coefficient.
            DimensionMismatchError: the two vectors differ in length.
        """
        coefficients, _ = self._read_state()
        other_coefficients = coefficients if other is self else _operand_coefficients(other)
        return dot_product(coefficients, other_coefficients)

    def get_cosine_similarity(self, other: VectorLike) -> float:
        """Dot product divided by the product of both norms.

        Result is in ``[-1, 1]`` for non-zero vectors: ``1`` for the same
        direction, ``0`` for orthogonal, ``-1`` for opposite.  A zero-norm
        operand is not guarded against; the division follows IEEE-754 and
        yields ``nan`` or an infinity.

        Errors raised by :meth:`get_dot_product` propagate unchanged.
        """
        coefficients, norm = self._read_state()
        if other is self:
            dot, other_norm = dot_product(coefficients, coefficients), norm
        elif isinstance(other, Vector):
            other_coefficients, other_norm = other._read_state()
            dot = dot_product(coefficients, other_coefficients)
        else:
            dot = dot_product(coefficients, _operand_coefficients(other))
            other_norm = other.get_norm()

        denominator = norm * other_norm
        if denominator == 0:
            logger.debug(
                "Cosine similarity of %r with a zero-norm operand is undefined", self._label
            )
        return ieee_divide(dot, denominator)

    # -- mutation ----------------------------------------------------------

    def set_coefficients(self, new_coefficients: Sequence[float]) -> None:
        """Replace the coefficients and recompute the norm in one step.

        An empty sequence is accepted and leaves the vector with norm ``0.0``.

        Raises:
            InvalidCoefficientsError: not a sequence, a non-numeric element, or
                an integer too large for a float.
        """
        coefficients, norm = self._replace_coefficients(new_coefficients)
        if coefficients:
            logger.debug("Vector coefficients set (dimension=%d, norm=%g)", len(coefficients), norm)
        else:
            logger.debug("Vector coefficients cleared, norm is now 0")

    def _replace_coefficients(
        self, new_coefficients: Sequence[float]
    ) -> tuple[tuple[float, ...], float]:
        coefficients = validate_coefficients(new_coefficients)
        norm = l2_norm(coefficients)
        with self._lock:
            self._coefficients = coefficients
            self._norm = norm
        return coefficients, norm

    def set_label(self, new_label: str) -> None:
        """Raises ``InvalidLabelError`` for ``None``, non-strings and ``""``."""
        label = validate_label(new_label)
        with self._lock:
            self._label = label

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}(label={self._label!r}, dimension={len(self._coefficients)})"


def _operand_coefficients(other: Any) -> Sequence[float]:
    if isinstance(other, Vector):
        return other._read_state()[0]
    coefficients = getattr(other, "coefficients", None)
    if coefficients is None or not is_coefficient_sequence(coefficients):
        msg = "other vector must have coefficients"
        raise MissingCoefficientsError(msg)
    return validate_coefficients(coefficients)

"""Protocol definitions for vector operands.

Dot products and cosine similarities accept any object that matches these
interfaces using structural subtyping (PEP 544) -- no inheritance required.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class HasCoefficients(Protocol):
    """Anything exposing an ordered sequence of real coefficients.

    This is all ``Vector.get_dot_product`` needs from its operand.
    """

    @property
    def coefficients(self) -> Sequence[float]:
        """The positionally significant components of the vector."""
        ...


@runtime_checkable
class VectorLike(HasCoefficients, Protocol):
    """A coefficient holder that also reports its own L2 norm.

    Required by ``Vector.get_cosine_similarity``, which divides by the
    operand's norm instead of recomputing it.
    """

    def get_norm(self) -> float:
        """Return the Euclidean (L2) norm of ``coefficients``.

        Returns:
            A non-negative float (``nan`` if a coefficient is ``nan``).
        """
        ...

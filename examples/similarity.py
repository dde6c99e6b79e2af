"""Example: comparing labeled vectors. Run with: python examples/similarity.py

Builds a few vectors, ranks them by cosine similarity to a query, and
shows that any object with ``coefficients`` and ``get_norm()`` can be
used as an operand -- no inheritance needed.
"""

from __future__ import annotations

import math

from labeled_vector import InvalidCoefficientsError, Vector

# ---------------------------------------------------------------------------
# A foreign vector type that satisfies the VectorLike protocol
# ---------------------------------------------------------------------------


class Direction:
    """A unit direction in the plane, given by an angle in degrees."""

    def __init__(self, degrees: float) -> None:
        radians = math.radians(degrees)
        self.coefficients = [math.cos(radians), math.sin(radians)]

    def get_norm(self) -> float:
        return 1.0


def main() -> None:
    query = Vector("query", [3, 4])
    candidates = [
        Vector("same", [6, 8]),
        Vector("close", [4, 3]),
        Vector("orthogonal", [-4, 3]),
        Vector("opposite", [-3, -4]),
    ]

    print(f"{query!r}: norm={query.get_norm()}")
    ranked = sorted(candidates, key=query.get_cosine_similarity, reverse=True)
    for candidate in ranked:
        score = query.get_cosine_similarity(candidate)
        dot = query.get_dot_product(candidate)
        print(f"  {candidate.label:<11} cos={score:+.4f} dot={dot:+.1f}")

    print(f"  45 degrees  cos={query.get_cosine_similarity(Direction(45)):+.4f}")

    # Clearing is allowed after construction; similarity is then undefined.
    query.set_coefficients([])
    print(f"cleared: norm={query.get_norm()} dimension={query.dimension}")

    try:
        Vector("broken", [1, "two", 3])
    except InvalidCoefficientsError as exc:
        print(f"rejected: {exc} (reason={exc.reason})")


if __name__ == "__main__":
    main()

"""Immutable models for labeled-vector."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from labeled_vector._math import l2_norm


class VectorSnapshot(BaseModel):
    """A consistent, read-only view of a vector at one point in time.

    ``label`` and ``coefficients`` are taken under the vector's lock, and
    ``norm`` is derived from exactly these ``coefficients``, so it can never
    disagree with them.  Snapshots satisfy ``VectorLike`` and can be used as
    operands of dot products and cosine similarities.
    """

    label: str = Field(min_length=1)
    coefficients: tuple[float, ...] = ()

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def norm(self) -> float:
        return l2_norm(self.coefficients)

    @property
    def dimension(self) -> int:
        return len(self.coefficients)

    def get_coefficients(self) -> list[float]:
        return list(self.coefficients)

    def get_norm(self) -> float:
        return self.norm

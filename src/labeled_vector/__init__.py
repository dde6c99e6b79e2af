"""labeled-vector: a labeled numeric vector value type.

Core:
    Vector, VectorSnapshot

Protocols (operand interfaces):
    HasCoefficients, VectorLike

Exceptions:
    VectorError, InvalidCoefficientsError, CoefficientsIssue,
    InvalidLabelError, MissingCoefficientsError, DimensionMismatchError
"""

from importlib.metadata import PackageNotFoundError, version

from labeled_vector.exceptions import (
    CoefficientsIssue,
    DimensionMismatchError,
    InvalidCoefficientsError,
    InvalidLabelError,
    MissingCoefficientsError,
    VectorError,
)
from labeled_vector.models import VectorSnapshot
from labeled_vector.protocols import HasCoefficients, VectorLike
from labeled_vector.vector import Vector

try:
    __version__ = version("labeled-vector")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "CoefficientsIssue",
    "DimensionMismatchError",
    "HasCoefficients",
    "InvalidCoefficientsError",
    "InvalidLabelError",
    "MissingCoefficientsError",
    "Vector",
    "VectorError",
    "VectorLike",
    "VectorSnapshot",
]

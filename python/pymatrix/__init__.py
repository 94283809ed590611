"""Dense matrices whose shape is part of their type, with elementary row operations."""
from __future__ import annotations

from typing import Any

from ._version import version as __version__
from ._internal import interop as _interop
from ._internal.dtypes import HasIdentityElements, normalize_coefficient
from ._internal.errors import (
    DimensionMismatch,
    MatrixError,
    OutOfBounds,
    ShapeError,
    WrongOperation,
)
from ._internal.matrix import Matrix
from ._internal.row_view import CoefficientRef, RowView
from ._internal.square import SquareMatrix, identity, nil
from ._internal.warnings import (
    PyMatrixDTypeWarning,
    PyMatrixWarning,
)

_interop.patch_interop(Matrix)


def matrix(data: Any) -> Matrix[Any]:
    """Build a matrix from nested sequences, a 2D NumPy array or another matrix."""
    return Matrix(data)


__all__ = [
    "__version__",
    "CoefficientRef",
    "DimensionMismatch",
    "HasIdentityElements",
    "Matrix",
    "MatrixError",
    "OutOfBounds",
    "PyMatrixDTypeWarning",
    "PyMatrixWarning",
    "RowView",
    "ShapeError",
    "SquareMatrix",
    "WrongOperation",
    "identity",
    "matrix",
    "nil",
    "normalize_coefficient",
]

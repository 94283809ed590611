from __future__ import annotations

import warnings
from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .dtypes import coefficient_kind
from .errors import ShapeError
from .warnings import PyMatrixDTypeWarning

_INEXACT_KINDS = frozenset({"float", "complex"})


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence, a 2D NumPy array "
            "or a matrix-like object."
        )
    rows: list[list[Any]] = []
    for row in candidate:
        if not is_sequence_like(row):
            raise TypeError("Each matrix row must be a sequence of coefficients.")
        rows.append(list(row))
    if not rows or not rows[0]:
        raise ShapeError("Matrix data must not be empty.")
    cols = len(rows[0])
    for row in rows:
        if len(row) != cols:
            raise ShapeError("Matrix data must be rectangular (every row the same length).")
    return len(rows), cols, rows


def coerce_general_matrix(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    """Return `(rows, cols, data)` for any supported matrix source.

    `data` is always a freshly built list of lists, never aliasing the input.
    """

    rows_attr: Any = getattr(candidate, "rows", None)
    cols_attr: Any = getattr(candidate, "cols", None)
    get_attr: Any = getattr(candidate, "get", None)
    if callable(rows_attr) and callable(cols_attr) and callable(get_attr):
        r = int(rows_attr())
        c = int(cols_attr())
        if r <= 0 or c <= 0:
            raise ShapeError("Matrix data must not be empty.")
        data = [[get_attr(i, j) for j in range(c)] for i in range(r)]
        return r, c, data

    if isinstance(candidate, np.ndarray):
        if candidate.ndim != 2:
            raise ShapeError(f"Matrix input must be a 2D array, got {candidate.ndim}D.")
        if candidate.shape[0] == 0 or candidate.shape[1] == 0:
            raise ShapeError("Matrix data must not be empty.")
        return int(candidate.shape[0]), int(candidate.shape[1]), candidate.tolist()

    return coerce_sequence_rows(candidate)


def warn_on_mixed_kinds(data: list[list[Any]], *, stacklevel: int = 3) -> None:
    kinds = {coefficient_kind(value) for row in data for value in row}
    if "exact" in kinds and kinds & _INEXACT_KINDS:
        warnings.warn(
            "Matrix data mixes exact (Fraction/Decimal) and floating-point coefficients; "
            "arithmetic will silently lose exactness.",
            PyMatrixDTypeWarning,
            stacklevel=stacklevel,
        )

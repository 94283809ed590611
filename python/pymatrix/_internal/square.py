from __future__ import annotations

import operator
from typing import Any

from .dtypes import one_of, zero_of
from .errors import OutOfBounds, WrongOperation
from .matrix import C, Matrix, matrix_type


def _row_index(value: Any, size: int) -> int:
    if isinstance(value, bool):
        raise TypeError("row index must be an int, not bool")
    index = operator.index(value)
    if not 0 <= index < size:
        raise OutOfBounds()
    return index


class SquareMatrix(Matrix[C]):
    """Base of every `SIZE x SIZE` matrix class.

    Adds the identity/nil factories and the elementary row operations used
    by Gaussian elimination. Row operations validate their indices before
    touching any coefficient, so a failed call leaves the matrix unchanged.
    """

    @classmethod
    def _size(cls) -> int:
        if cls.ROWS is None:
            raise TypeError(
                "SquareMatrix has no size; use Matrix.shaped(n, n) or pymatrix.identity(n)"
            )
        return cls.ROWS

    @classmethod
    def nil(cls, coefficient: Any = int) -> SquareMatrix[Any]:
        """Return the `SIZE x SIZE` matrix filled with the additive identity."""
        size = cls._size()
        return cls._from_trusted([[zero_of(coefficient) for _ in range(size)] for _ in range(size)])

    @classmethod
    def identity(cls, coefficient: Any = int) -> SquareMatrix[Any]:
        """Return the `SIZE x SIZE` identity matrix."""
        m = cls.nil(coefficient)
        for i in range(cls._size()):
            m._data[i][i] = one_of(coefficient)
        return m

    def permute(self, source: int, target: int) -> None:
        """Swap rows `source` and `target`. Swapping a row with itself is a no-op."""
        size = self.rows()
        source = _row_index(source, size)
        target = _row_index(target, size)
        data = self._data
        data[source], data[target] = data[target], data[source]

    def dilate(self, row: int, factor: Any) -> None:
        """Multiply every coefficient of `row` by `factor`."""
        index = _row_index(row, self.rows())
        line = self._data[index]
        line[:] = [operator.imul(c, factor) for c in line]

    def transvect(self, source: int, other: int) -> None:
        """Add row `other` into row `source`, coefficient-wise.

        Raises `OutOfBounds` for an invalid index and `WrongOperation` when
        both indices name the same row (use `dilate` to scale a row).
        """
        size = self.rows()
        source = _row_index(source, size)
        other = _row_index(other, size)
        if source == other:
            raise WrongOperation()
        addend = tuple(self._data[other])
        line = self._data[source]
        line[:] = [operator.iadd(c, a) for c, a in zip(line, addend)]


def nil(size: int, coefficient: Any = int) -> SquareMatrix[Any]:
    return matrix_type(size, size).nil(coefficient)


def identity(size: int, coefficient: Any = int) -> SquareMatrix[Any]:
    return matrix_type(size, size).identity(coefficient)

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, ClassVar, Generic, Iterator, TypeVar

from . import coercion as _coercion
from .errors import DimensionMismatch, ShapeError
from .formatting import MatrixMixin
from .row_view import CoefficientRef, RowView

C = TypeVar("C")


_SHAPED: dict[tuple[int, int], type] = {}


def _check_dimension(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ShapeError(f"{name} must be positive, got {value}")
    return value


def matrix_type(rows: int, cols: int) -> type:
    """Return the (cached) matrix class for a `rows x cols` shape.

    Square shapes also derive from `SquareMatrix`, which carries the
    identity/nil factories and the row operations.
    """

    key = (_check_dimension(rows, "rows"), _check_dimension(cols, "cols"))
    cls = _SHAPED.get(key)
    if cls is None:
        if rows == cols:
            from .square import SquareMatrix

            bases: tuple[type, ...] = (SquareMatrix,)
        else:
            bases = (Matrix,)
        name = f"Matrix{rows}x{cols}"
        cls = type(name, bases, {"ROWS": rows, "COLS": cols, "__module__": "pymatrix"})
        _SHAPED[key] = cls
    return cls


def _bounded_index(index: Any, bound: int) -> int | None:
    """Normalized index when `0 <= index < bound`, else None."""
    if isinstance(index, bool):
        raise TypeError("index must be an int, not bool")
    i = operator.index(index)
    return i if 0 <= i < bound else None


def _is_operand_array(value: Any) -> bool:
    # Arrays and sequences are never treated as scalars.
    if _coercion.is_sequence_like(value):
        return True
    shape = getattr(value, "shape", None)
    return isinstance(shape, tuple) and len(shape) > 0


class Matrix(MatrixMixin, Generic[C]):
    """Dense row-major matrix whose shape is part of its class.

    `Matrix(data)` infers the shape and returns an instance of
    `Matrix.shaped(rows, cols)`; calling a shaped class checks that the data
    matches its `ROWS x COLS` exactly. Instances never change shape.
    """

    ROWS: ClassVar[int | None] = None
    COLS: ClassVar[int | None] = None

    _data: list[list[C]]

    def __new__(cls, data: Any) -> Matrix[C]:
        rows, cols, values = _coercion.coerce_general_matrix(data)
        if cls.ROWS is None:
            target = matrix_type(rows, cols)
        else:
            if (rows, cols) != (cls.ROWS, cls.COLS):
                raise ShapeError(
                    f"{cls.__name__} expects {cls.ROWS}x{cls.COLS} data, got {rows}x{cols}"
                )
            target = cls
        if not issubclass(target, cls):
            raise ShapeError(f"{cls.__name__} cannot hold {rows}x{cols} data")
        _coercion.warn_on_mixed_kinds(values)
        return target._from_trusted(values)

    @classmethod
    def _from_trusted(cls, data: list[list[Any]]) -> Any:
        # `data` must already be a fresh ROWS x COLS list of lists.
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def shaped(cls, rows: int, cols: int) -> type:
        return matrix_type(rows, cols)

    @classmethod
    def from_rows(cls, data: Any) -> Matrix[C]:
        return cls(data)

    # --- shape ---

    def rows(self) -> int:
        return type(self).ROWS  # type: ignore[return-value]

    def cols(self) -> int:
        return type(self).COLS  # type: ignore[return-value]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    @property
    def is_square(self) -> bool:
        return self.rows() == self.cols()

    # --- access ---

    def get(self, row: int, col: int) -> C | None:
        """Coefficient at (row, col), or None when either index is out of range."""
        i, j = _bounded_index(row, self.rows()), _bounded_index(col, self.cols())
        if i is None or j is None:
            return None
        return self._data[i][j]

    def get_mut(self, row: int, col: int) -> CoefficientRef | None:
        i, j = _bounded_index(row, self.rows()), _bounded_index(col, self.cols())
        if i is None or j is None:
            return None
        return CoefficientRef(self, i, j)

    def get_line(self, index: int) -> RowView | None:
        """Read-only view of row `index`, or None when out of range."""
        i = _bounded_index(index, self.rows())
        return None if i is None else RowView(self, i)

    def get_mut_line(self, index: int) -> RowView | None:
        i = _bounded_index(index, self.rows())
        return None if i is None else RowView(self, i, writable=True)

    def lines(self) -> Iterator[RowView]:
        return (RowView(self, i) for i in range(self.rows()))

    def mut_lines(self) -> Iterator[RowView]:
        return (RowView(self, i, writable=True) for i in range(self.rows()))

    def __iter__(self) -> Iterator[RowView]:
        return self.lines()

    def __len__(self) -> int:
        return self.rows()

    def _checked_key(self, key: Any) -> tuple[int, int]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i = _bounded_index(key[0], self.rows())
        j = _bounded_index(key[1], self.cols())
        if i is None or j is None:
            raise IndexError(f"index {key!r} out of range for shape {self.shape}")
        return i, j

    def __getitem__(self, key: Any) -> C:
        i, j = self._checked_key(key)
        return self._data[i][j]

    def __setitem__(self, key: Any, value: C) -> None:
        i, j = self._checked_key(key)
        self._data[i][j] = value

    def to_list(self) -> list[list[C]]:
        return [list(row) for row in self._data]

    def copy(self) -> Matrix[C]:
        return type(self)._from_trusted(self.to_list())

    __copy__ = copy

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (Matrix, (self.to_list(),))

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.shape != self.shape:
            return False
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    # --- arithmetic ---

    def _require_same_shape(self, other: Matrix[Any], op: str) -> None:
        if other.shape != self.shape:
            raise DimensionMismatch(
                f"{op} requires operands of the same shape, got {self.shape} and {other.shape}"
            )

    def __imul__(self, scalar: Any) -> Matrix[C]:
        if isinstance(scalar, Matrix) or _is_operand_array(scalar):
            return NotImplemented
        # Stage every product first so a failing coefficient leaves self untouched.
        staged = [[operator.imul(c, scalar) for c in row] for row in self._data]
        for row, new_row in zip(self._data, staged):
            row[:] = new_row
        return self

    def __iadd__(self, other: Any) -> Matrix[C]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        staged = [
            [operator.iadd(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        ]
        for row, new_row in zip(self._data, staged):
            row[:] = new_row
        return self

    def __add__(self, other: Any) -> Matrix[C]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        data = [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(self._data, other._data)]
        return type(self)._from_trusted(data)

    def __matmul__(self, other: Any) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        rows, inner = self.shape
        inner_other, cols = other.shape
        if inner != inner_other:
            raise DimensionMismatch(
                f"matrix product needs left.cols == right.rows, got {self.shape} @ {other.shape}"
            )
        right = other._data
        # Rows are built completely before the result object exists.
        data = [
            [
                reduce(operator.add, (left_row[p] * right[p][j] for p in range(inner)))
                for j in range(cols)
            ]
            for left_row in self._data
        ]
        return matrix_type(rows, cols)._from_trusted(data)

    def __mul__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if _is_operand_array(other):
            return NotImplemented
        data = [[c * other for c in row] for row in self._data]
        return type(self)._from_trusted(data)

    def __rmul__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix) or _is_operand_array(other):
            return NotImplemented
        data = [[other * c for c in row] for row in self._data]
        return type(self)._from_trusted(data)

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Iterator


class RowView(Sequence):
    """A no-copy view onto one row of a matrix.

    The view addresses the row by index, so it always reflects the row that
    currently sits at that position in the matrix. Its length is fixed: rows
    can be read (and written, for writable views) but never resized.
    """

    __slots__ = ("_matrix", "_index", "_writable")

    def __init__(self, matrix: Any, index: int, *, writable: bool = False) -> None:
        self._matrix = matrix
        self._index = index
        self._writable = writable

    @property
    def position(self) -> int:
        return self._index

    @property
    def writable(self) -> bool:
        return self._writable

    def _row(self) -> list[Any]:
        return self._matrix._data[self._index]

    def __len__(self) -> int:
        return len(self._row())

    def _column(self, key: Any) -> int:
        col = operator.index(key)
        if not 0 <= col < len(self):
            raise IndexError(f"column {col} out of range for a row of {len(self)}")
        return col

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, slice):
            return tuple(self._row()[key])
        return self._row()[self._column(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        if not self._writable:
            raise TypeError("row view is read-only; use get_mut_line() for a writable row")
        if isinstance(key, slice):
            row = self._row()
            values = list(value)
            if len(range(*key.indices(len(row)))) != len(values):
                raise ValueError("row views cannot change the number of coefficients")
            row[key] = values
            return
        self._row()[self._column(key)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._row())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RowView):
            return self._row() == other._row()
        if isinstance(other, (list, tuple)):
            return self._row() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> list[Any]:
        return list(self._row())

    def __repr__(self) -> str:
        kind = "mut " if self._writable else ""
        return f"RowView({kind}row={self._index}, {self._row()!r})"


class CoefficientRef:
    """Writable handle onto a single matrix cell (`ref.value`)."""

    __slots__ = ("_matrix", "_row", "_col")

    def __init__(self, matrix: Any, row: int, col: int) -> None:
        self._matrix = matrix
        self._row = row
        self._col = col

    @property
    def position(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def value(self) -> Any:
        return self._matrix._data[self._row][self._col]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._matrix._data[self._row][self._col] = new_value

    def __repr__(self) -> str:
        return f"CoefficientRef(position={self.position}, value={self.value!r})"

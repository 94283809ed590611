from __future__ import annotations

from typing import Any

import numpy as np

EDGE_ITEMS = 4
_ELLIPSIS = "..."


def _visible(length: int, edge_items: int) -> list[int | None]:
    # Indices to show; None marks the elided middle.
    if length <= 2 * edge_items:
        return list(range(length))
    return [*range(edge_items), None, *range(length - edge_items, length)]


def _cell_text(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_matrix(matrix: Any, *, edge_items: int = EDGE_ITEMS) -> str:
    """Render `matrix` as a right-aligned grid.

    At most `edge_items` leading and trailing rows/columns are shown; the rest
    is replaced by "...".
    """

    if isinstance(edge_items, bool) or not isinstance(edge_items, int) or edge_items < 1:
        raise ValueError(f"edge_items must be a positive integer, got {edge_items!r}")

    rows = _visible(matrix.rows(), edge_items)
    cols = _visible(matrix.cols(), edge_items)

    grid: list[list[str] | None] = []
    for i in rows:
        if i is None:
            grid.append(None)
            continue
        grid.append([_ELLIPSIS if j is None else _cell_text(matrix.get(i, j)) for j in cols])

    widths = [
        max(len(cells[k]) for cells in grid if cells is not None) for k in range(len(cols))
    ]

    lines = [f"{type(matrix).__name__}(shape={matrix.shape})", "["]
    for cells in grid:
        if cells is None:
            lines.append(f" {_ELLIPSIS}")
        else:
            lines.append(" [" + " ".join(c.rjust(w) for c, w in zip(cells, widths)) + "]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def format(self, *, edge_items: int = EDGE_ITEMS) -> str:
        return format_matrix(self, edge_items=edge_items)

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"  # type: ignore[attr-defined]

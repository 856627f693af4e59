"""
Cursors that walk grid indices for the map iterators.

A slicer only knows indices. It exposes the current index (``None`` once it
is exhausted), moves forward with ``advance`` and rewinds with ``reset`` so the
owning iterator can replay it for the next layer.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

from ..models import GridIndex


# region Cells
class Cells:
    """Row-major walk over every cell of a (rows, cols) grid."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._row = 0
        self._col = 0

    def reset(self) -> None:
        self._row, self._col = 0, 0

    def index(self) -> Optional[GridIndex]:
        if self._row >= self.rows or self.cols <= 0:
            return None
        return self._row, self._col

    def advance(self) -> None:
        self._col += 1
        if self._col >= self.cols:
            self._col = 0
            self._row += 1

    def __len__(self) -> int:
        return self.rows * self.cols
# endregion


# region Windows
class Windows:
    """Row-major walk over every anchor whose (2r+1)x(2r+1) window fits in the grid."""

    def __init__(self, rows: int, cols: int, radius: int):
        self.radius = radius
        self.rows = rows
        self.cols = cols
        self._inner = Cells(max(0, rows - 2 * radius), max(0, cols - 2 * radius))

    def reset(self) -> None:
        self._inner.reset()

    def index(self) -> Optional[GridIndex]:
        idx = self._inner.index()
        if idx is None:
            return None
        return idx[0] + self.radius, idx[1] + self.radius

    def advance(self) -> None:
        self._inner.advance()

    def bounds(self, anchor: GridIndex) -> Tuple[slice, slice]:
        """Row and column slices of the window around ``anchor``."""
        r = self.radius
        row, col = anchor
        return slice(row - r, row + r + 1), slice(col - r, col + r + 1)

    def __len__(self) -> int:
        return len(self._inner)
# endregion


# region Line
class Line:
    """
    Cells crossed by a segment, walked from the start cell to the end cell
    (Amanatides & Woo voxel traversal in continuous grid coordinates).

    ``start`` and ``end`` are fractional (row, col) pairs; both must lie in cells
    inside the grid.
    """

    def __init__(self, start: Tuple[float, float], end: Tuple[float, float],
                 start_cell: GridIndex, end_cell: GridIndex):
        self._start = start
        self._end = end
        self._start_cell = start_cell
        self._end_cell = end_cell
        self.reset()

    def reset(self) -> None:
        (r0, c0), (r1, c1) = self._start, self._end
        dr, dc = r1 - r0, c1 - c0
        self._cell: Optional[GridIndex] = self._start_cell
        self._step_r = 1 if dr > 0 else -1
        self._step_c = 1 if dc > 0 else -1
        self._t_max_r, self._t_delta_r = self._axis_params(r0, dr, self._start_cell[0])
        self._t_max_c, self._t_delta_c = self._axis_params(c0, dc, self._start_cell[1])

    @staticmethod
    def _axis_params(origin: float, delta: float, cell: int):
        if delta == 0:
            return math.inf, math.inf
        boundary = cell + 1 if delta > 0 else cell
        return (boundary - origin) / delta, 1.0 / abs(delta)

    def index(self) -> Optional[GridIndex]:
        return self._cell

    def advance(self) -> None:
        if self._cell is None:
            return
        if self._cell == self._end_cell:
            self._cell = None
            return

        row, col = self._cell
        end_row, end_col = self._end_cell
        # never step an axis past the end cell; guarantees termination
        if row == end_row:
            step_col = True
        elif col == end_col:
            step_col = False
        else:
            step_col = self._t_max_c < self._t_max_r

        if step_col:
            col += self._step_c
            self._t_max_c += self._t_delta_c
        else:
            row += self._step_r
            self._t_max_r += self._t_delta_r
        self._cell = (row, col)
# endregion

# region Imports
import math
from typing import Optional, Tuple

import numpy as np

from .config import CELL_BOUNDARY_PRECISION
from .models import Bounds, GridIndex, GridParams, WorldPosition
# endregion

# Axis convention: col <-> x, row <-> y. Cell (0, 0) is at (min_x, min_y).


# region Index Helpers
def in_bounds(index: GridIndex, params: GridParams) -> bool:
    row, col = index
    return 0 <= row < params.rows and 0 <= col < params.cols


def world_to_continuous(position: WorldPosition, params: GridParams) -> Tuple[float, float]:
    """Fractional (row, col) of ``position``; cell (r, c) spans [r, r+1) x [c, c+1)."""
    x, y = position
    col = (x - params.centre[0]) / params.cell_size[0] + params.num_cells[0] / 2.0
    row = (y - params.centre[1]) / params.cell_size[1] + params.num_cells[1] / 2.0
    return row, col
# endregion


# region Grid <-> World
def grid_to_world(index: GridIndex, params: GridParams) -> WorldPosition:
    """Centre of cell ``index`` in the world frame."""
    row, col = index
    x = params.centre[0] + (col - params.num_cells[0] / 2.0 + 0.5) * params.cell_size[0]
    y = params.centre[1] + (row - params.num_cells[1] / 2.0 + 0.5) * params.cell_size[1]
    return x, y


def world_to_grid(position: WorldPosition, params: GridParams) -> Optional[GridIndex]:
    """Cell containing ``position``, or None if it falls outside the map."""
    row_f, col_f = world_to_continuous(position, params)
    if not (math.isfinite(row_f) and math.isfinite(col_f)):
        return None
    row = math.floor(row_f + CELL_BOUNDARY_PRECISION)
    col = math.floor(col_f + CELL_BOUNDARY_PRECISION)
    if not in_bounds((row, col), params):
        return None
    return row, col
# endregion


# region Vectorised Coordinates
def cell_centre_axes(params: GridParams):
    """1D centre coordinates along x (per col) and y (per row)."""
    cols = np.arange(params.cols, dtype=np.float64)
    rows = np.arange(params.rows, dtype=np.float64)
    xs = params.centre[0] + (cols - params.cols / 2.0 + 0.5) * params.cell_size[0]
    ys = params.centre[1] + (rows - params.rows / 2.0 + 0.5) * params.cell_size[1]
    return xs, ys


def cell_centres(params: GridParams):
    """(X, Y) arrays of shape (rows, cols) holding the centre of every cell."""
    xs, ys = cell_centre_axes(params)
    return np.tile(xs, (params.rows, 1)), np.repeat(ys[:, None], params.cols, axis=1)


def map_bounds(params: GridParams) -> Bounds:
    half_x = params.num_cells[0] * params.cell_size[0] / 2.0
    half_y = params.num_cells[1] * params.cell_size[1] / 2.0
    return (
        params.centre[0] - half_x,
        params.centre[1] - half_y,
        params.centre[0] + half_x,
        params.centre[1] + half_y,
    )
# endregion

import math

import numpy as np
import pytest

from cellmap.config import ROUND_TRIP_TOL
from cellmap.grid import (
    cell_centres,
    grid_to_world,
    in_bounds,
    map_bounds,
    world_to_grid,
)
from cellmap.models import GridParams


def _close(a, b, tol=ROUND_TRIP_TOL):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def test_centred_map_positions(params_5x5):
    assert _close(grid_to_world((2, 2), params_5x5), (0.0, 0.0))
    assert _close(grid_to_world((0, 0), params_5x5), (-2.0, -2.0))
    # col runs along x, row along y
    assert _close(grid_to_world((0, 4), params_5x5), (2.0, -2.0))
    assert _close(grid_to_world((4, 0), params_5x5), (-2.0, 2.0))


def test_unit_cells_offset_frame():
    params = GridParams(cell_size=(1.0, 1.0), num_cells=(10, 10), centre=(5.0, 5.0))
    assert _close(grid_to_world((0, 0), params), (0.5, 0.5))
    assert _close(grid_to_world((5, 5), params), (5.5, 5.5))

    assert world_to_grid((0.7, 0.1), params) == (0, 0)
    assert world_to_grid((7.0, 1.0), params) == (1, 7)
    assert world_to_grid((2.6, 3.999999), params) == (3, 2)
    assert world_to_grid((2.6, 4.0), params) == (4, 2)


def test_scaled_cells():
    params = GridParams(cell_size=(0.1, 0.1), num_cells=(10, 10), centre=(0.5, 0.5))
    assert _close(grid_to_world((0, 0), params), (0.05, 0.05))
    assert _close(grid_to_world((5, 5), params), (0.55, 0.55))

    assert world_to_grid((0.7, 0.1), params) == (1, 7)
    assert world_to_grid((0.26, 0.3999999), params) == (3, 2)
    assert world_to_grid((0.26, 0.4), params) == (4, 2)


@pytest.mark.parametrize("position", [(-2.6, 0.0), (0.0, 2.5), (2.5, 2.5), (100.0, -100.0), (float("nan"), 0.0)])
def test_outside_positions_map_to_none(params_5x5, position):
    assert world_to_grid(position, params_5x5) is None


@pytest.mark.parametrize(
    "params",
    [
        GridParams(cell_size=(1.0, 1.0), num_cells=(5, 5), centre=(0.0, 0.0)),
        GridParams(cell_size=(0.1, 0.3), num_cells=(7, 4), centre=(-3.2, 11.7)),
        GridParams(cell_size=(2.5, 0.05), num_cells=(1, 13), centre=(1e3, -1e3)),
    ],
)
def test_round_trip(params):
    for row in range(params.rows):
        for col in range(params.cols):
            assert world_to_grid(grid_to_world((row, col), params), params) == (row, col)


def test_cell_centres_match_grid_to_world():
    params = GridParams(cell_size=(0.5, 2.0), num_cells=(4, 3), centre=(1.0, -1.0))
    X, Y = cell_centres(params)
    assert X.shape == Y.shape == (3, 4)
    for row in range(3):
        for col in range(4):
            x, y = grid_to_world((row, col), params)
            assert np.isclose(X[row, col], x) and np.isclose(Y[row, col], y)


def test_bounds_and_in_bounds():
    params = GridParams(cell_size=(0.5, 2.0), num_cells=(4, 3), centre=(1.0, -1.0))
    assert _close(map_bounds(params), (0.0, -4.0, 2.0, 2.0))
    assert in_bounds((2, 3), params)
    assert not in_bounds((3, 0), params)
    assert not in_bounds((0, -1), params)

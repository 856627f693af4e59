import pytest

from cellmap import CellMap, GridParams
from cellmap.terrain import TerrainLayer


@pytest.fixture
def params_5x5():
    return GridParams(cell_size=(1.0, 1.0), num_cells=(5, 5), centre=(0.0, 0.0))


@pytest.fixture
def unit_map(params_5x5):
    """5x5 map of ones over HEIGHT, GRADIENT and ROUGHNESS."""
    return CellMap(TerrainLayer, params_5x5, 1.0)

import pytest

from cellmap import CellMap, GridParams, PositionOutsideMap
from cellmap.terrain import TerrainLayer


@pytest.fixture
def map_6x6():
    # centred so world coordinates equal fractional (col, row) grid coordinates
    return CellMap(TerrainLayer, GridParams(cell_size=(1.0, 1.0), num_cells=(6, 6), centre=(3.0, 3.0)), 1.0)


def _line(m, start, end):
    return [idx for (_, idx), _ in m.line_iter(start, end).layer(TerrainLayer.HEIGHT).indexed()]


def test_straight_line(map_6x6):
    assert _line(map_6x6, (1.1, 1.1), (3.3, 1.1)) == [(1, 1), (1, 2), (1, 3)]


def test_off_diagonal_line(map_6x6):
    assert _line(map_6x6, (1.1, 1.1), (4.3, 2.1)) == [(1, 1), (1, 2), (1, 3), (2, 3), (2, 4)]


def test_reversed_line(map_6x6):
    assert _line(map_6x6, (4.3, 2.1), (1.1, 1.1)) == [(2, 4), (2, 3), (1, 3), (1, 2), (1, 1)]


def test_vertical_and_single_cell_lines(map_6x6):
    assert _line(map_6x6, (2.5, 0.5), (2.5, 3.5)) == [(0, 2), (1, 2), (2, 2), (3, 2)]
    assert _line(map_6x6, (2.2, 2.2), (2.8, 2.9)) == [(2, 2)]


def test_line_visits_every_layer(map_6x6):
    assert sum(1 for _ in map_6x6.line_iter((0.5, 0.5), (5.5, 0.5))) == 3 * 6


def test_line_outside_map(map_6x6):
    with pytest.raises(PositionOutsideMap):
        map_6x6.line_iter((-0.5, 1.0), (2.0, 2.0))
    with pytest.raises(PositionOutsideMap):
        map_6x6.line_iter_mut((1.0, 1.0), (2.0, 6.0))
    # nothing left borrowed
    assert map_6x6.guard.shared_count == 0
    assert not map_6x6.guard.exclusive


def test_line_iter_mut_marks_cells(map_6x6):
    start, end = (0.5, 0.5), (5.5, 2.5)
    expected = _line(map_6x6, start, end)
    for cell in map_6x6.line_iter_mut(start, end).layer(TerrainLayer.ROUGHNESS):
        cell.value = 0.0

    marked = [key for key, v in map_6x6.iter().indexed() if v == 0.0]
    assert marked == [(TerrainLayer.ROUGHNESS, idx) for idx in sorted(expected)]
    assert expected[0] == (0, 0) and expected[-1] == (2, 5)

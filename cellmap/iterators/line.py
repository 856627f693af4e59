"""Iteration over the cells crossed by a straight segment between two world positions."""

from ..errors import PositionOutsideMap
from ..grid import world_to_continuous, world_to_grid
from .cells import CellIter, CellIterMut
from .slicers import Line


def _line_slicer(cell_map, start, end) -> Line:
    start_cell = world_to_grid(start, cell_map.params)
    if start_cell is None:
        raise PositionOutsideMap("start", start)
    end_cell = world_to_grid(end, cell_map.params)
    if end_cell is None:
        raise PositionOutsideMap("end", end)
    return Line(
        world_to_continuous(start, cell_map.params),
        world_to_continuous(end, cell_map.params),
        start_cell,
        end_cell,
    )


class LineIter(CellIter):
    def __init__(self, cell_map, start, end):
        super().__init__(cell_map, _line_slicer(cell_map, start, end))


class LineIterMut(CellIterMut):
    def __init__(self, cell_map, start, end):
        super().__init__(cell_map, _line_slicer(cell_map, start, end))

"""Full-map iteration: every cell of every layer, layer by layer, row-major."""

from .base import MapIter
from .slicers import Cells
from .views import CellRef


class CellIter(MapIter):
    """Yields the value of each cell."""

    def __init__(self, cell_map, slicer=None):
        rows, cols = cell_map.shape
        super().__init__(cell_map, slicer if slicer is not None else Cells(rows, cols))

    def _produce(self, slot, layer, index):
        return self._store.read(slot, index[0], index[1])


class CellIterMut(CellIter):
    """Yields a CellRef per cell; each one is released when the iterator advances."""
    mutable = True

    def _produce(self, slot, layer, index):
        return CellRef(layer, index, self._store.layer(slot))

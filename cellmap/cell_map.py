"""
CellMap: a many-layer 2D map of cells with a world frame laid over it.

Each layer is a numpy array of shape (rows, cols); every layer shares the
same shape and frame. Layers are named by an Enum (see ``cellmap.layer``).

    params = GridParams(cell_size=(1.0, 1.0), num_cells=(5, 5), centre=(0.0, 0.0))
    m = CellMap(MyLayer, params, 1.0)

    for window in m.window_iter_mut(1):
        for layer in window:
            window[layer][1, 1] = 2.0

    for cell in m.iter_mut().layer(MyLayer.ROUGHNESS):
        cell.value = 0.0
"""

from __future__ import annotations
import logging
import math
from numbers import Integral, Real
from typing import Optional, Sequence, Type

import numpy as np

from .config import DEFAULT_CELL_VALUE
from .errors import ConstructionError, IndexOutsideMap, LayerMismatchError
from .grid import grid_to_world, in_bounds, map_bounds, world_to_grid
from .guard import BorrowGuard
from .iterators import (
    CellIter,
    CellIterMut,
    LineIter,
    LineIterMut,
    WindowIter,
    WindowIterMut,
)
from .layer import all_layers, index_of, layer_at, layer_count
from .models import Bounds, GridIndex, GridParams, WorldPosition
from .store import LayerStore

logger = logging.getLogger(__name__)


# region Validation
def check_params(params: GridParams) -> GridParams:
    """Return ``params`` normalised to plain tuples; raise ConstructionError if invalid."""
    try:
        (sx, sy), (nx, ny), (cx, cy) = params.cell_size, params.num_cells, params.centre
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"GridParams fields must be (x, y) pairs: {params}") from exc

    for n in (nx, ny):
        if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
            raise ConstructionError(f"num_cells must be positive integers, got {(nx, ny)}")
    for s in (sx, sy):
        if not isinstance(s, Real) or not math.isfinite(s) or s <= 0:
            raise ConstructionError(f"cell_size must be positive and finite, got {(sx, sy)}")
    for c in (cx, cy):
        if not isinstance(c, Real) or not math.isfinite(c):
            raise ConstructionError(f"centre must be finite, got {(cx, cy)}")

    return GridParams(
        cell_size=(float(sx), float(sy)),
        num_cells=(int(nx), int(ny)),
        centre=(float(cx), float(cy)),
    )


def _check_layer_type(layer_type) -> int:
    try:
        n = layer_count(layer_type)
    except TypeError as exc:
        raise ConstructionError(str(exc)) from exc
    if n == 0:
        raise ConstructionError(f"Layer enum {layer_type.__name__} has no members")
    return n
# endregion


class CellMap:
    """Many-layer 2D map; see the module docstring."""

    def __init__(self, layer_type: Type, params: GridParams, default=DEFAULT_CELL_VALUE, dtype=None):
        n_layers = _check_layer_type(layer_type)
        checked = check_params(params)
        store = LayerStore.filled(n_layers, checked.shape, default, dtype)
        self._setup(layer_type, checked, store, default)

    def _setup(self, layer_type, params: GridParams, store: LayerStore, default) -> None:
        self._params = params
        self._layer_type = layer_type
        self._default = default
        self._store = store
        self._guard = BorrowGuard()
        logger.debug("created %r", self)

    @classmethod
    def from_data(cls, layer_type: Type, params: GridParams, arrays: Sequence) -> "CellMap":
        """Build a map from one (rows, cols) array per layer, in slot order (data is copied)."""
        n_layers = _check_layer_type(layer_type)
        checked = check_params(params)
        store = LayerStore.from_arrays(arrays, n_layers, checked.shape)

        cell_map = cls.__new__(cls)
        cell_map._setup(layer_type, checked, store, None)
        return cell_map

    # region Properties
    @property
    def params(self) -> GridParams:
        return self._params

    @property
    def layer_type(self) -> Type:
        return self._layer_type

    @property
    def layers(self):
        return all_layers(self._layer_type)

    @property
    def cell_size(self):
        return self._params.cell_size

    @property
    def num_cells(self):
        return self._params.num_cells

    @property
    def centre(self):
        return self._params.centre

    @property
    def shape(self):
        """(rows, cols) of every layer."""
        return self._params.shape

    @property
    def default(self):
        return self._default

    @property
    def dtype(self) -> np.dtype:
        return self._store.dtype

    @property
    def store(self) -> LayerStore:
        return self._store

    @property
    def guard(self) -> BorrowGuard:
        return self._guard
    # endregion

    # region Layers
    def slot_of(self, layer) -> int:
        if not isinstance(layer, self._layer_type):
            raise LayerMismatchError(
                f"{layer!r} is not a layer of {self._layer_type.__name__}"
            )
        return index_of(layer)

    def layer_at(self, slot: int):
        return layer_at(self._layer_type, slot)

    def layer_array(self, layer) -> np.ndarray:
        """The whole (rows, cols) array of ``layer``; writes go into the map."""
        self._guard.check_readable()
        return self._store.layer(self.slot_of(layer))

    def __getitem__(self, layer) -> np.ndarray:
        return self.layer_array(layer)
    # endregion

    # region Direct Access
    def _check_index(self, index: GridIndex) -> GridIndex:
        row, col = index
        if not in_bounds((row, col), self._params):
            raise IndexOutsideMap((row, col), self.shape)
        return row, col

    def get(self, layer, index: GridIndex):
        self._guard.check_readable()
        row, col = self._check_index(index)
        return self._store.read(self.slot_of(layer), row, col)

    def set(self, layer, index: GridIndex, value) -> None:
        self._guard.check_readable()
        row, col = self._check_index(index)
        self._store.write(self.slot_of(layer), row, col, value)
    # endregion

    # region Frame
    def contains(self, index: GridIndex) -> bool:
        return in_bounds(index, self._params)

    def position(self, index: GridIndex) -> WorldPosition:
        """World position of the centre of cell ``index``."""
        return grid_to_world(self._check_index(index), self._params)

    def index(self, position: WorldPosition) -> Optional[GridIndex]:
        """Cell containing ``position``, or None when it lies outside the map."""
        return world_to_grid(position, self._params)

    def contains_position(self, position: WorldPosition) -> bool:
        return self.index(position) is not None

    def bounds(self) -> Bounds:
        return map_bounds(self._params)
    # endregion

    # region Iterators
    def iter(self) -> CellIter:
        """Every cell of every layer, layer by layer in slot order, row-major within a layer."""
        return CellIter(self)

    def iter_mut(self) -> CellIterMut:
        return CellIterMut(self)

    def window_iter(self, radius: int) -> WindowIter:
        """
        Every (2r+1)x(2r+1) window that fits in the map, anchored row-major.
        Anchors closer than ``radius`` to the border are skipped.
        """
        return WindowIter(self, radius)

    def window_iter_mut(self, radius: int) -> WindowIterMut:
        return WindowIterMut(self, radius)

    def line_iter(self, start: WorldPosition, end: WorldPosition) -> LineIter:
        """Cells crossed by the segment ``start`` -> ``end``, in order."""
        return LineIter(self, start, end)

    def line_iter_mut(self, start: WorldPosition, end: WorldPosition) -> LineIterMut:
        return LineIterMut(self, start, end)

    def __iter__(self):
        return self.iter()
    # endregion

    def __repr__(self) -> str:
        return (
            f"CellMap(layers={self._layer_type.__name__}, num_cells={self._params.num_cells}, "
            f"cell_size={self._params.cell_size}, centre={self._params.centre})"
        )

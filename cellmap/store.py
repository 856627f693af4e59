# region Imports
import copy
import logging
from typing import Sequence, Tuple

import numpy as np

from .config import OBJECT_DTYPE_KINDS, WIDENED_DTYPE, WIDENED_DTYPE_KINDS
from .errors import LayerWrongShape, WrongNumberOfLayers
# endregion

logger = logging.getLogger(__name__)


# region dtype Helpers
def infer_dtype(default, dtype=None) -> np.dtype:
    """
    dtype for a store filled with ``default``. Fixed-width text becomes object;
    int and bool defaults are widened to float64 unless ``dtype`` is given.
    """
    if dtype is not None:
        return np.dtype(dtype)
    if np.ndim(default) != 0:
        return np.dtype(object)
    inferred = np.asarray(default).dtype
    if inferred.kind in OBJECT_DTYPE_KINDS:
        return np.dtype(object)
    if inferred.kind in WIDENED_DTYPE_KINDS:
        return np.dtype(WIDENED_DTYPE)
    return inferred


def check_value(value, dtype: np.dtype) -> None:
    """Raise TypeError if storing ``value`` under ``dtype`` would change its kind."""
    if dtype == object:
        return
    if not np.can_cast(np.min_scalar_type(value), dtype, casting="same_kind"):
        raise TypeError(f"Cannot store {value!r} in a {dtype} layer without losing data")
# endregion


# region Layer Store
class LayerStore:
    """
    ``num_layers`` equally shaped 2D arrays, held as one (num_layers, rows, cols)
    block. ``store.layer(i)`` is a view, so whole-layer writes land in the store.
    """

    def __init__(self, data: np.ndarray):
        if data.ndim != 3:
            raise ValueError(f"Layer store needs a 3D block, got shape {data.shape}")
        self._data = data

    @classmethod
    def filled(cls, num_layers: int, shape: Tuple[int, int], default, dtype=None) -> "LayerStore":
        dt = infer_dtype(default, dtype)
        data = np.empty((num_layers,) + tuple(shape), dtype=dt)
        if dt == object:
            # one copy per cell; object defaults are never shared between cells
            flat = data.reshape(-1)
            for i in range(flat.size):
                flat[i] = copy.copy(default)
        else:
            data.fill(default)
        logger.debug("allocated %d layers of %s (%s)", num_layers, tuple(shape), dt)
        return cls(data)

    @classmethod
    def from_arrays(cls, arrays: Sequence, num_layers: int, shape: Tuple[int, int]) -> "LayerStore":
        arrays = [np.asarray(a) for a in arrays]
        if len(arrays) != num_layers:
            raise WrongNumberOfLayers(num_layers, len(arrays))
        for a in arrays:
            if a.shape != tuple(shape):
                raise LayerWrongShape(shape, a.shape)
        return cls(np.stack(arrays).copy())

    # ------------------------------------------------------------------
    @property
    def num_layers(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape[1], self._data.shape[2]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        return self._data

    def layer(self, slot: int) -> np.ndarray:
        return self._data[slot]

    def read(self, slot: int, row: int, col: int):
        return self._data.item(slot, row, col)

    def write(self, slot: int, row: int, col: int, value) -> None:
        check_value(value, self._data.dtype)
        self._data[slot, row, col] = value
# endregion

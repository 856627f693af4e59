"""Items handed out by mutable iterators, valid until the iterator advances."""

from __future__ import annotations
from typing import Dict, List, Tuple

import numpy as np

from ..errors import StaleReferenceError
from ..models import GridIndex
from ..store import check_value


# region Cell Reference
class CellRef:
    """Exclusive handle on one cell of one layer."""

    __slots__ = ("layer", "index", "_array", "_live")

    def __init__(self, layer, index: GridIndex, array: np.ndarray):
        self.layer = layer
        self.index = index
        self._array = array
        self._live = True

    def _check(self) -> None:
        if not self._live:
            raise StaleReferenceError(
                f"Cell {self.index} on layer {self.layer} was released when the iterator advanced"
            )

    def get(self):
        self._check()
        return self._array.item(self.index)

    def set(self, value) -> None:
        self._check()
        check_value(value, self._array.dtype)
        self._array[self.index] = value

    value = property(get, set)

    @property
    def live(self) -> bool:
        return self._live

    def release(self) -> None:
        self._live = False

    def __repr__(self) -> str:
        state = repr(self.get()) if self._live else "released"
        return f"CellRef({self.layer}, {self.index}, {state})"
# endregion


# region View Helpers
def readonly_view(view: np.ndarray) -> np.ndarray:
    """Make a handed-out view read-only; the store itself stays writable."""
    view.flags.writeable = False
    return view
# endregion


# region Window
class Window:
    """
    Local (2r+1)x(2r+1) neighbourhood around ``anchor`` across several layers.

    ``window[layer]`` is a view into that layer; ``window[layer][r, r]`` is the
    anchor cell. Views of a mutable window are writable until the iterator
    advances, after which they (and the window) are read-only.
    """

    def __init__(self, anchor: GridIndex, radius: int, views: Dict, writable: bool):
        self.anchor = anchor
        self.radius = radius
        self._views = views
        self._writable = writable
        self._live = True
        if not writable:
            for v in views.values():
                readonly_view(v)

    @property
    def shape(self) -> Tuple[int, int]:
        side = 2 * self.radius + 1
        return side, side

    @property
    def live(self) -> bool:
        return self._live

    @property
    def writable(self) -> bool:
        return self._writable and self._live

    def layers(self) -> List:
        return list(self._views)

    def __getitem__(self, layer) -> np.ndarray:
        try:
            return self._views[layer]
        except KeyError:
            raise KeyError(f"Layer {layer} is not part of this window") from None

    def __contains__(self, layer) -> bool:
        return layer in self._views

    def __iter__(self):
        return iter(self._views)

    def __len__(self) -> int:
        return len(self._views)

    def centre(self, layer):
        """Value of the anchor cell on ``layer``."""
        return self._views[layer].item(self.radius, self.radius)

    def set_centre(self, layer, value) -> None:
        if not self._live:
            raise StaleReferenceError(f"Window at {self.anchor} was released")
        check_value(value, self._views[layer].dtype)
        self._views[layer][self.radius, self.radius] = value

    def release(self) -> None:
        self._live = False
        for v in self._views.values():
            readonly_view(v)

    def __repr__(self) -> str:
        names = ", ".join(str(l) for l in self._views)
        return f"Window(anchor={self.anchor}, radius={self.radius}, layers=[{names}])"
# endregion

"""
Windowed iteration.

Anchors are the cells whose full (2r+1)x(2r+1) neighbourhood fits in the map,
visited row-major; cells closer than ``r`` to the border are skipped. Without
a restriction every item is a Window spanning all layers at once. After
``.layer(L)`` every item is the bare 2D view of L around the anchor.
"""

from .base import MapIter
from .slicers import Windows
from .views import Window, readonly_view


class WindowIter(MapIter):
    def __init__(self, cell_map, radius: int):
        if isinstance(radius, bool) or int(radius) != radius or radius < 0:
            raise ValueError(f"Window radius must be a non-negative integer, got {radius!r}")
        rows, cols = cell_map.shape
        super().__init__(cell_map, Windows(rows, cols, int(radius)))
        self._single = False

    @property
    def radius(self) -> int:
        return self._slicer.radius

    def layer(self, layer):
        """Only visit ``layer``; items become (2r+1, 2r+1) views."""
        super().layers([layer])
        self._single = True
        return self

    def layers(self, layers):
        """Only include ``layers`` in each Window."""
        super().layers(layers)
        self._single = False
        return self

    def _next_item(self):
        if self._single:
            return super()._next_item()
        if not self._slots:
            return None
        anchor = self._slicer.index()
        if anchor is None:
            return None
        self._slicer.advance()
        rows, cols = self._slicer.bounds(anchor)
        views = {
            self._map.layer_at(slot): self._store.layer(slot)[rows, cols]
            for slot in self._slots
        }
        return anchor, Window(anchor, self.radius, views, writable=self.mutable)

    def _produce(self, slot, layer, index):
        rows, cols = self._slicer.bounds(index)
        view = self._store.layer(slot)[rows, cols]
        return view if self.mutable else readonly_view(view)


class WindowIterMut(WindowIter):
    """
    Mutable windows. Only one window is live at a time: the previous window's
    views turn read-only before the next window is produced.
    """
    mutable = True

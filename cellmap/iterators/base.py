"""
Shared machinery of the map iterators.

An iterator owns a borrow of its map for its whole life (shared for read
iterators, exclusive for mutable ones) and a slicer that walks grid indices.
Layers are visited in slot order; the slicer is replayed once per layer.

The adapters ``layer``, ``layers`` and ``indexed`` configure the iterator in
place and return it, so they chain:

    for (layer, index), value in cell_map.iter().layer(MyLayer.HEIGHT).indexed():
        ...

They must be applied before the first item is pulled.
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple

import numpy as np

from ..layer import layer_at
from .views import readonly_view


class MapIter:
    mutable = False

    def __init__(self, cell_map, slicer):
        # set first so close() works even if the borrow is refused
        self._borrow = None
        self._current = None
        self._done = False

        guard = cell_map.guard
        self._borrow = guard.exclusive_borrow() if self.mutable else guard.shared_borrow()
        self._map = cell_map
        self._store = cell_map.store
        self._slicer = slicer
        self._slots: Tuple[int, ...] = tuple(range(self._store.num_layers))
        self._pos = 0
        self._indexed = False
        self._started = False

    # region Adapters
    def layer(self, layer):
        """Only visit cells of ``layer``."""
        return self.layers([layer])

    def layers(self, layers: Iterable):
        """Only visit cells of ``layers`` (visited in slot order, duplicates dropped)."""
        self._check_fresh("layers")
        self._slots = tuple(sorted({self._map.slot_of(l) for l in layers}))
        return self

    def indexed(self):
        """Yield ``((layer, index), item)`` instead of ``item``."""
        self._check_fresh("indexed")
        self._indexed = True
        return self

    def _check_fresh(self, name: str) -> None:
        if self._started or self._done:
            raise RuntimeError(f"Cannot apply .{name}() to an iterator that has already been advanced")
    # endregion

    # region Iterator Protocol
    def __iter__(self):
        return self

    def __next__(self):
        self._release_current()
        if self._done:
            raise StopIteration
        self._started = True

        produced = self._next_item()
        if produced is None:
            self.close()
            raise StopIteration

        key, item = produced
        if self.mutable:
            self._current = item
        return (key, item) if self._indexed else item

    def _next_item(self) -> Optional[tuple]:
        """Next ``(key, item)`` walking layer by layer, or None when exhausted."""
        while self._pos < len(self._slots):
            idx = self._slicer.index()
            if idx is None:
                self._pos += 1
                self._slicer.reset()
                continue
            slot = self._slots[self._pos]
            self._slicer.advance()
            layer = layer_at(self._map.layer_type, slot)
            return (layer, idx), self._produce(slot, layer, idx)
        return None

    def _produce(self, slot: int, layer, index):
        raise NotImplementedError
    # endregion

    # region Lifetime
    def _release_current(self) -> None:
        current, self._current = self._current, None
        if current is None:
            return
        if isinstance(current, np.ndarray):
            readonly_view(current)
        else:
            current.release()

    @property
    def closed(self) -> bool:
        return self._done

    def close(self) -> None:
        """Stop iterating and give the map back."""
        self._release_current()
        self._done = True
        if self._borrow is not None:
            self._borrow.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __del__(self):
        if getattr(self, "_borrow", None) is not None:
            self.close()
    # endregion

    def __repr__(self) -> str:
        layers = [str(layer_at(self._map.layer_type, s)) for s in self._slots]
        state = "closed" if self._done else ("started" if self._started else "fresh")
        return f"{type(self).__name__}(layers={layers}, indexed={self._indexed}, {state})"

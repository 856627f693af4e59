"""Lazy iterators over a CellMap."""

from .cells import CellIter, CellIterMut
from .line import LineIter, LineIterMut
from .slicers import Cells, Line, Windows
from .views import CellRef, Window
from .windows import WindowIter, WindowIterMut

__all__ = [
    "CellIter",
    "CellIterMut",
    "CellRef",
    "Cells",
    "Line",
    "LineIter",
    "LineIterMut",
    "Window",
    "WindowIter",
    "WindowIterMut",
    "Windows",
]

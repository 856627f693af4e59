"""
cellmap: many-layer 2D cellular maps.

A CellMap stores one numpy array per layer (layers are named by an Enum), lays
a world frame over the grid, and offers lazy full, windowed and line iteration
with mutable variants.
"""

from .cell_map import CellMap
from .errors import (
    CellMapError,
    ConstructionError,
    IndexOutsideMap,
    IterationConflictError,
    LayerMismatchError,
    LayerWrongShape,
    PositionOutsideMap,
    StaleReferenceError,
    WrongNumberOfLayers,
)
from .grid import grid_to_world, world_to_grid
from .iterators import CellRef, Window
from .layer import Layer, all_layers, define_layers, index_of, layer_at, layer_count
from .models import GridIndex, GridParams, WorldPosition

__all__ = [
    "CellMap",
    "CellMapError",
    "CellRef",
    "ConstructionError",
    "GridIndex",
    "GridParams",
    "IndexOutsideMap",
    "IterationConflictError",
    "Layer",
    "LayerMismatchError",
    "LayerWrongShape",
    "PositionOutsideMap",
    "StaleReferenceError",
    "Window",
    "WorldPosition",
    "WrongNumberOfLayers",
    "all_layers",
    "define_layers",
    "grid_to_world",
    "index_of",
    "layer_at",
    "layer_count",
    "world_to_grid",
]

__version__ = "0.1.0"

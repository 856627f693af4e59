# terrain.py
# ----------------
# Terrain layers built on a CellMap.
#
# Exposes:
#   - TerrainLayer             (HEIGHT, GRADIENT, ROUGHNESS)
#   - make_synthetic_terrain(num_cells, cell_size, centre, seed)
#   - compute_terrain_layers(terrain)
#
# Dependencies: numpy

from __future__ import annotations
from enum import auto
import logging
from typing import Tuple

import numpy as np

from .cell_map import CellMap
from .layer import Layer
from .models import GridParams

logger = logging.getLogger(__name__)


class TerrainLayer(Layer):
    HEIGHT = auto()      # metres
    GRADIENT = auto()    # slope, degrees
    ROUGHNESS = auto()   # [0..1]


# -----------------------------
# Per-window terrain metrics
# -----------------------------

def _slope_deg(height: np.ndarray, cell_size: Tuple[float, float]) -> float:
    """
    Slope at the centre of a 3x3 height window using central differences.
      slope = arctan( sqrt( (dz/dx)^2 + (dz/dy)^2 ) )  [degrees]
    Rows run along y, cols along x.
    """
    sx, sy = cell_size
    gx = (height[1, 2] - height[1, 0]) / (2.0 * sx)
    gy = (height[2, 1] - height[0, 1]) / (2.0 * sy)
    return float(np.degrees(np.arctan(np.hypot(gx, gy))))


def compute_terrain_layers(terrain: CellMap) -> None:
    """
    Fill GRADIENT and ROUGHNESS from HEIGHT with one 3x3 window pass.

    ROUGHNESS is the local height standard deviation, normalised to [0..1] over
    the interior. Border cells (no full window) keep their current values.
    """
    sizes = terrain.cell_size
    visited = 0
    for window in terrain.window_iter_mut(1):
        h = window[TerrainLayer.HEIGHT]
        window.set_centre(TerrainLayer.GRADIENT, _slope_deg(h, sizes))
        window.set_centre(TerrainLayer.ROUGHNESS, float(np.std(h)))
        visited += 1

    if visited == 0:
        logger.debug("map %s too small for 3x3 windows; terrain layers untouched", terrain.shape)
        return

    # Local normalize to [0..1]
    rough = terrain[TerrainLayer.ROUGHNESS]
    interior = rough[1:-1, 1:-1]
    g = interior - interior.min()
    vmax = g.max()
    if vmax > 1e-12:
        g = g / vmax
    interior[...] = np.nan_to_num(g, nan=0.0)
    logger.debug("computed terrain layers over %d interior cells", visited)


# -----------------------------
# Synthetic terrain (for tests)
# -----------------------------

def make_synthetic_terrain(
    num_cells: Tuple[int, int] = (64, 64),
    cell_size: Tuple[float, float] = (5.0, 5.0),
    centre: Tuple[float, float] = (0.0, 0.0),
    seed: int = 0,
) -> CellMap:
    """
    Generates a synthetic "Mars-like" height field with gentle undulations and
    craters, then derives its gradient and roughness layers.
    """
    terrain = CellMap(
        TerrainLayer,
        GridParams(cell_size=cell_size, num_cells=num_cells, centre=centre),
        0.0,
        dtype=np.float64,
    )
    H, W = terrain.shape

    rng = np.random.default_rng(seed)
    yy, xx = np.meshgrid(np.linspace(0, 6*np.pi, H), np.linspace(0, 6*np.pi, W), indexing='ij')

    base = 200 * np.sin(0.2*xx) * np.cos(0.15*yy)
    long_waves = 120 * np.sin(0.05*xx + 0.3) * np.cos(0.04*yy - 0.8)
    noise = rng.normal(0, 10.0, (H, W))
    height = base + long_waves + noise

    # a few "craters"
    for _ in range(6):
        r0 = rng.integers(0, H)
        c0 = rng.integers(0, W)
        rr, cc = np.ogrid[:H, :W]
        dist = np.hypot(rr - r0, cc - c0)
        height -= 150 * np.exp(-(dist**2) / (2*(rng.uniform(8, 18)**2)))

    terrain[TerrainLayer.HEIGHT][...] = height
    compute_terrain_layers(terrain)
    return terrain

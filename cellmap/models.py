# models.py
from dataclasses import dataclass
from typing import Tuple

# (row, col); row runs along y, col along x
GridIndex = Tuple[int, int]

# (x, y) in the map's physical frame
WorldPosition = Tuple[float, float]

# (min_x, min_y, max_x, max_y)
Bounds = Tuple[float, float, float, float]


@dataclass(frozen=True)
class GridParams:
    """Affine frame of a map. All pairs are ordered (x, y)."""
    cell_size: Tuple[float, float] = (1.0, 1.0)
    num_cells: Tuple[int, int] = (1, 1)   # (cols, rows)
    centre: Tuple[float, float] = (0.0, 0.0)

    @property
    def rows(self) -> int:
        return int(self.num_cells[1])

    @property
    def cols(self) -> int:
        return int(self.num_cells[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """numpy shape of one layer, (rows, cols)."""
        return self.rows, self.cols

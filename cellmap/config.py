# config.py

# Slack added before flooring a continuous grid coordinate, in cell units.
# Keeps positions like 3.9999999999 (float noise on a boundary) in the upper cell.
CELL_BOUNDARY_PRECISION = 1e-10

# Tolerance for grid -> world -> grid round trips
ROUND_TRIP_TOL = 1e-9

DEFAULT_CELL_VALUE = 0.0

# numpy dtype kinds stored as dtype=object so writes are never truncated
# (fixed-width unicode / bytes)
OBJECT_DTYPE_KINDS = ("U", "S")

# numpy dtype kinds of plain int / bool defaults; stored as float64 unless a
# dtype is given, so fractional writes are not truncated
WIDENED_DTYPE_KINDS = ("b", "i", "u")
WIDENED_DTYPE = "float64"

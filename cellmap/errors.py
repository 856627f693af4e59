"""
Exceptions raised by cellmap.

Each error also derives from the builtin a caller would naturally catch
(ValueError for bad construction input, IndexError for out-of-map indices, ...).
"""


class CellMapError(Exception):
    """Base class for every cellmap error."""


class ConstructionError(CellMapError, ValueError):
    """GridParams (or the layer enum) violate a map invariant."""


class WrongNumberOfLayers(CellMapError, ValueError):
    def __init__(self, expected: int, found: int):
        super().__init__(f"Expected {expected} layers but found {found}")
        self.expected = expected
        self.found = found


class LayerWrongShape(CellMapError, ValueError):
    def __init__(self, expected, found):
        super().__init__(f"Expected {tuple(expected)} cells in layer, but found {tuple(found)}")
        self.expected = tuple(expected)
        self.found = tuple(found)


class IndexOutsideMap(CellMapError, IndexError):
    def __init__(self, index, shape):
        super().__init__(f"The index {tuple(index)} is outside the map (rows, cols)={tuple(shape)}")
        self.index = tuple(index)


class PositionOutsideMap(CellMapError, ValueError):
    def __init__(self, name: str, position):
        super().__init__(f"Position {name} {tuple(position)} is outside the map")
        self.position = tuple(position)


class LayerMismatchError(CellMapError, TypeError):
    """A layer from a different enum was used to address the map."""


class IterationConflictError(CellMapError, RuntimeError):
    """A borrow of the map conflicts with a live mutable iterator (or vice versa)."""


class StaleReferenceError(CellMapError, RuntimeError):
    """A cell handle was used after its iterator moved past it."""

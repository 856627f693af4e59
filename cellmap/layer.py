"""
Layer registry: a fixed bijection between the members of a layer enum and the
storage slots 0..N-1 of a map.

Any ``enum.Enum`` can name the layers of a map; slots follow member definition
order (aliases are not members, so they never take a slot). The table for an
enum class is built once, on first use, and stored on the class itself.

Example:

    class MyLayer(Layer):
        HEIGHT = auto()
        GRADIENT = auto()
        ROUGHNESS = auto()

    MyLayer.ROUGHNESS.index        # 2
    MyLayer.from_index(0)          # MyLayer.HEIGHT
    MyLayer.count()                # 3

or, from a member list:

    MyLayer = define_layers("MyLayer", ["HEIGHT", "GRADIENT", "ROUGHNESS"])
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, Tuple, Type


# region Slot Table
_TABLE_ATTR = "__cellmap_slots__"


def _slot_table(layer_type: Type[Enum]) -> Tuple[Tuple[Enum, ...], Dict[Enum, int]]:
    if not (isinstance(layer_type, type) and issubclass(layer_type, Enum)):
        raise TypeError(f"Layer type must be an Enum class, got {layer_type!r}")
    # looked up in the class dict only, so a subclass never sees its base's table
    table = layer_type.__dict__.get(_TABLE_ATTR)
    if table is None:
        members = tuple(layer_type)
        table = members, {m: i for i, m in enumerate(members)}
        setattr(layer_type, _TABLE_ATTR, table)
    return table


def index_of(layer: Enum) -> int:
    """Storage slot of ``layer``."""
    return _slot_table(type(layer))[1][layer]


def layer_at(layer_type: Type[Enum], index: int) -> Enum:
    """Member stored in slot ``index``; raises IndexError outside [0, count)."""
    members = _slot_table(layer_type)[0]
    if not 0 <= index < len(members):
        raise IndexError(
            f"Got a layer index of {index} but there are only {len(members)} layers"
        )
    return members[index]


def layer_count(layer_type: Type[Enum]) -> int:
    return len(_slot_table(layer_type)[0])


def all_layers(layer_type: Type[Enum]) -> Tuple[Enum, ...]:
    return _slot_table(layer_type)[0]
# endregion


# region Layer Base
class Layer(Enum):
    """Enum base with the registry trio attached to it."""

    @property
    def index(self) -> int:
        return index_of(self)

    @classmethod
    def from_index(cls, index: int) -> "Layer":
        return layer_at(cls, index)

    @classmethod
    def count(cls) -> int:
        return layer_count(cls)

    @classmethod
    def all(cls) -> Tuple["Layer", ...]:
        return all_layers(cls)

    def __str__(self) -> str:
        return self.name
# endregion


# region Generation
def define_layers(name: str, members: Iterable[str]) -> Type[Layer]:
    """Build a Layer enum named ``name`` whose slots follow ``members``."""
    names = list(members)
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate layer names in {names}")
    return Layer(name, names=names)
# endregion

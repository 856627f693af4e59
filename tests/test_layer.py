import gc
import weakref
from enum import Enum

import pytest

from cellmap.layer import Layer, all_layers, define_layers, index_of, layer_at, layer_count
from cellmap.terrain import TerrainLayer


def test_terrain_layer_bijection():
    assert TerrainLayer.count() == 3
    for i, layer in enumerate(TerrainLayer.all()):
        assert layer.index == i
        assert TerrainLayer.from_index(i) is layer
    assert TerrainLayer.ROUGHNESS.index == 2


def test_from_index_out_of_range():
    with pytest.raises(IndexError):
        TerrainLayer.from_index(3)
    with pytest.raises(IndexError):
        layer_at(TerrainLayer, -1)


def test_define_layers_follows_member_order():
    Sensor = define_layers("Sensor", ["LIDAR", "CAMERA", "RADAR", "SONAR"])
    assert issubclass(Sensor, Layer)
    assert [m.name for m in Sensor.all()] == ["LIDAR", "CAMERA", "RADAR", "SONAR"]
    assert Sensor.RADAR.index == 2
    assert Sensor.from_index(3) is Sensor.SONAR
    assert Sensor.count() == 4


def test_define_layers_rejects_duplicates():
    with pytest.raises(ValueError):
        define_layers("Bad", ["A", "B", "A"])


def test_plain_enum_is_a_valid_layer_type():
    class Colour(Enum):
        RED = 10
        GREEN = 20
        CRIMSON = 10  # alias of RED, takes no slot

    assert layer_count(Colour) == 2
    assert index_of(Colour.GREEN) == 1
    assert index_of(Colour.CRIMSON) == 0
    assert all_layers(Colour) == (Colour.RED, Colour.GREEN)


def test_non_enum_rejected():
    with pytest.raises(TypeError):
        layer_count(int)


def test_generated_layer_types_can_be_freed():
    Scratch = define_layers("Scratch", ["A", "B"])
    assert Scratch.B.index == 1
    ref = weakref.ref(Scratch)
    del Scratch
    gc.collect()
    assert ref() is None


def test_subclass_does_not_reuse_base_table():
    assert Layer.count() == 0

    class Extra(Layer):
        ONE = 1
        TWO = 2

    assert Extra.count() == 2
    assert Extra.TWO.index == 1

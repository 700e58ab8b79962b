import pytest

from chromaspace import Color, InvalidColorValueError, MutableColor, ValidationPolicy


def test_updates_in_place():
    color = MutableColor.rgb(10, 20, 30)
    result = color.with_channels({"r": 100})
    assert result is color
    assert color.get_channel("r") == 100


def test_set_channel_chains():
    color = MutableColor.rgb(0, 0, 0)
    color.set_channel("r", 1).set_channel("g", 2).set_channel("b", 3)
    assert color.values == {"r": 1, "g": 2, "b": 3}


def test_without_channels_in_place():
    color = MutableColor.rgba(1, 2, 3, 4)
    assert color.without_channels(["a"]) is color
    assert color.get_channel("a") == 255


def test_conversion_in_place():
    color = MutableColor.hsl(210, 50, 40)
    assert color.to_rgb() is color
    assert color.space_name == "rgb"
    assert color.values == {"r": 51, "g": 102, "b": 153}


def test_filter_in_place():
    color = MutableColor.rgb(0, 0, 0)
    color.blend(Color.rgb(100, 200, 50))
    assert color.values == {"r": 50, "g": 100, "b": 25}


def test_copy_is_independent():
    color = MutableColor.rgb(1, 2, 3)
    clone = color.copy()
    clone.set_channel("r", 200)
    assert color.get_channel("r") == 1
    assert isinstance(clone, MutableColor)


def test_strict_rejects_without_changing_state():
    color = MutableColor.rgb(1, 2, 3, policy=ValidationPolicy.STRICT)
    with pytest.raises(InvalidColorValueError):
        color.set_channel("r", 999)
    assert color.get_channel("r") == 1


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(MutableColor.rgb(1, 2, 3))


def test_equality_with_immutable():
    assert MutableColor.rgb(1, 2, 3) == Color.rgb(1, 2, 3)


def test_set_channel_keeps_fractional_value():
    color = MutableColor.rgb(1, 2, 3)
    color.set_channel("g", 9.5)
    assert color.get_channel_raw("g") == 9.5

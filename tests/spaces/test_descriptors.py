import numpy as np
import pytest

from chromaspace import InvalidColorValueError
from chromaspace.spaces import CMYK, HSL, HSLA, HSV, LCh, Lab, RGB, RGBA, XYZ, YCbCr, built_in_spaces


def test_built_in_names_and_channels():
    spaces = built_in_spaces()
    assert list(spaces) == ["rgb", "rgba", "cmyk", "hsl", "hsla", "hsv", "lab", "lch", "xyz", "ycbcr"]
    assert RGB.channels == ("r", "g", "b")
    assert CMYK.channels == ("c", "m", "y", "k")
    assert YCbCr.channels == ("y", "cb", "cr")
    assert LCh.channels == ("l", "c", "h")


def test_channel_sets_match_defaults_and_ranges():
    for space in built_in_spaces().values():
        assert set(space.defaults) == set(space.channels)
        assert set(space.ranges) == set(space.channels)


def test_every_space_reaches_rgb():
    for space in built_in_spaces().values():
        assert "rgb" in space.converters
        assert "rgb" in space.inverse_converters


def test_alpha_and_cie_flags():
    assert RGBA.has_alpha() and HSLA.has_alpha()
    assert not RGB.has_alpha() and not HSV.has_alpha()
    assert RGBA.default("a") == 255
    for space in (Lab, LCh, XYZ):
        assert space.supports_illuminant and space.supports_observer
    for space in (RGB, CMYK, HSL, YCbCr):
        assert not space.supports_cie()


def test_value_types():
    assert RGB.value_type is int
    assert RGBA.value_type is int
    assert HSL.value_type is float


def test_defaults():
    assert YCbCr.default("cb") == 128
    assert YCbCr.default("y") == 0
    with pytest.raises(InvalidColorValueError):
        RGB.default("a")


def test_validate_in_range():
    for space in built_in_spaces().values():
        for channel in space.channels:
            lo, hi = space.ranges[channel]
            assert space.validate(channel, lo)
            assert space.validate(channel, hi)
            assert space.validate(channel, (lo + hi) / 2)


def test_validate_out_of_range():
    for space in built_in_spaces().values():
        for channel in space.channels:
            lo, hi = space.ranges[channel]
            with pytest.raises(InvalidColorValueError):
                space.validate(channel, hi + 1)
            with pytest.raises(InvalidColorValueError):
                space.validate(channel, lo - 0.5)


def test_validate_rejects_bad_input():
    with pytest.raises(InvalidColorValueError):
        RGB.validate("x", 10)
    with pytest.raises(InvalidColorValueError):
        RGB.validate("r", "10")
    with pytest.raises(InvalidColorValueError):
        RGB.validate("r", True)
    assert RGB.validate("r", np.float32(10.5))


def test_clamp_equals_min_max():
    for value in (-50, 0, 12.5, 255, 400):
        assert RGB.clamp("r", value) == min(max(value, 0), 255)
    assert Lab.clamp("a", -200) == -128
    assert HSL.clamp("h", 361) == 360
    assert RGB.is_within_range("g", 255)
    assert not RGB.is_within_range("g", 255.1)


def test_descriptors_are_not_instantiated():
    with pytest.raises(TypeError):
        RGB()

import numpy as np
import pytest

from chromaspace import (
    CIEIlluminant,
    CIEObserver,
    Color,
    ColorBase,
    ColorSpaceNotFoundError,
    InvalidColorValueError,
    UnsupportedColorSpaceError,
    ValidationPolicy,
)
from chromaspace.spaces import RGB, HSL


def test_construction_with_defaults():
    color = Color(RGB)
    assert color.raw_values == {"r": 0, "g": 0, "b": 0}
    assert color.illuminant is CIEIlluminant.D65
    assert color.observer is CIEObserver.TWO_DEGREE
    assert color.policy is ValidationPolicy.CLAMP
    assert not color.strict


def test_construction_by_name():
    color = Color("hsl", {"h": 120})
    assert color.space is HSL
    assert color.values == {"h": 120, "s": 0, "l": 0}
    assert Color("YCbCr").raw_values == {"y": 0, "cb": 128, "cr": 128}


def test_unknown_space_name():
    with pytest.raises(ColorSpaceNotFoundError):
        Color("nope")


def test_unknown_channel_rejected():
    with pytest.raises(InvalidColorValueError):
        Color(RGB, {"x": 1})


def test_non_numeric_rejected():
    with pytest.raises(InvalidColorValueError):
        Color.rgb("255", 0, 0)
    with pytest.raises(InvalidColorValueError):
        Color.rgb(True, 0, 0)
    with pytest.raises(InvalidColorValueError):
        Color.rgb(None, 0, 0)


def test_numpy_scalars_accepted():
    color = Color.rgb(np.int64(10), np.float64(20.5), 30)
    assert color.raw_values == {"r": 10, "g": 20.5, "b": 30}
    assert type(color.get_channel_raw("r")) is int


def test_out_of_range_kept_raw_and_clamped_on_read():
    color = Color.rgb(300, -20, 128)
    assert color.get_channel_raw("r") == 300
    assert color.get_channel_raw("g") == -20
    assert color.get_channel("r") == 255
    assert color.get_channel("g") == 0
    assert color.values == {"r": 255, "g": 0, "b": 128}


def test_strict_policy_rejects_out_of_range():
    with pytest.raises(InvalidColorValueError):
        Color.rgb(300, 0, 0, policy=ValidationPolicy.STRICT)
    color = Color.rgb(10, 20, 30, policy="strict")
    assert color.strict
    with pytest.raises(InvalidColorValueError):
        color.with_channels({"r": 256})


def test_immutable():
    color = Color.rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        color._values = {}
    with pytest.raises(AttributeError):
        color.anything = 1


def test_with_channels_returns_new_color():
    color = Color.rgb(1, 2, 3)
    updated = color.with_channels({"g": 200})
    assert updated is not color
    assert color.get_channel("g") == 2
    assert updated.get_channel("g") == 200
    assert isinstance(updated.get_channel_raw("g"), float)


def test_with_channels_keeps_raw():
    for channel in RGB.channels:
        assert Color.rgb(0, 0, 0).with_channels({channel: 999}).get_channel_raw(channel) == 999
        assert Color.rgb(0, 0, 0).with_channels({channel: 77}).get_channel(channel) == 77


def test_with_unknown_channel_rejected():
    with pytest.raises(InvalidColorValueError):
        Color.rgb(0, 0, 0).with_channels({"a": 1})


def test_without_channels_resets_defaults():
    color = Color.ycbcr(10, 20, 30)
    reset = color.without_channels(["cb", "cr"])
    assert reset.raw_values == {"y": 10, "cb": 128, "cr": 128}
    with pytest.raises(InvalidColorValueError):
        color.without_channels(["r"])


def test_factories():
    assert Color.rgba(1, 2, 3).get_channel("a") == 255
    assert Color.hsla(10, 20, 30, 40).alpha == 40
    assert Color.cmyk(1, 2, 3, 4).space_name == "cmyk"
    assert Color.hsv(1, 2, 3).space_name == "hsv"
    assert Color.lab(50, 10, -10).space_name == "lab"
    lch = Color.lch(50, 10, 200, illuminant=CIEIlluminant.D50, observer=CIEObserver.TEN_DEGREE)
    assert lch.illuminant is CIEIlluminant.D50
    assert lch.observer is CIEObserver.TEN_DEGREE
    assert Color.xyz(1, 2, 3, observer="10°").observer is CIEObserver.TEN_DEGREE


def test_hsl_to_rgb_fixture():
    rgb = Color.hsl(210, 50, 40).to_rgb()
    assert rgb.values == {"r": 51, "g": 102, "b": 153}


def test_conversion_results():
    red = Color.rgb(255, 0, 0)
    assert red.to_hsl().values == pytest.approx({"h": 0.0, "s": 100.0, "l": 50.0})
    assert red.to_hsv().values == pytest.approx({"h": 0.0, "s": 100.0, "v": 100.0})
    assert red.to_cmyk().values == pytest.approx({"c": 0.0, "m": 100.0, "y": 100.0, "k": 0.0})
    assert red.to_rgba().values == {"r": 255, "g": 0, "b": 0, "a": 255}
    assert red.to_rgba(128).get_channel("a") == 128
    assert red.to_hsla(7).get_channel("a") == 7
    assert red.to_ycbcr().get_channel("y") == pytest.approx(76.245)
    assert red.to_xyz().get_channel("x") == pytest.approx(41.2456, abs=1e-3)
    assert red.to_lab().get_channel("l") == pytest.approx(53.24, abs=0.05)
    assert red.to_lch().get_channel("h") == pytest.approx(39.99, abs=0.05)


def test_conversion_keeps_original():
    color = Color.rgb(255, 0, 0)
    converted = color.to_hsl()
    assert color.space_name == "rgb"
    assert converted.space_name == "hsl"


def test_same_space_conversion_keeps_raw_values():
    color = Color.rgb(300, 0, 0)
    same = color.to_rgb()
    assert same == color
    assert same is not color


def test_rgba_to_rgba_with_alpha_override():
    color = Color.rgba(1, 2, 3, 4)
    assert color.to_rgba(200).get_channel("a") == 200


def test_cie_override_is_carried():
    color = Color.rgb(50, 100, 200)
    xyz = color.to_xyz(illuminant=CIEIlluminant.D50)
    assert xyz.illuminant is CIEIlluminant.D50
    default_xyz = color.to_xyz()
    assert default_xyz.illuminant is CIEIlluminant.D65
    # D50 white is far less blue than D65
    assert xyz.get_channel("z") < default_xyz.get_channel("z") - 3


def test_lab_round_trip_under_other_illuminant():
    color = Color.rgb(12, 200, 99)
    back = color.to_lab(illuminant=CIEIlluminant.A, observer=CIEObserver.TEN_DEGREE).to_rgb()
    for channel, expected in color.values.items():
        assert abs(back.get_channel(channel) - expected) <= 2


def test_adapt_illuminant():
    lab = Color.lab(50, 20, -30)
    adapted = lab.adapt_illuminant(CIEIlluminant.D50)
    assert adapted.space_name == "lab"
    assert adapted.illuminant is CIEIlluminant.D50
    assert adapted.observer is CIEObserver.TWO_DEGREE
    # neutral colors stay neutral under a von Kries style transform
    gray = Color.lab(50, 0, 0).adapt_illuminant(CIEIlluminant.A)
    assert gray.get_channel("l") == pytest.approx(50.0, abs=1e-6)
    assert gray.get_channel("a") == pytest.approx(0.0, abs=1e-6)
    assert gray.get_channel("b") == pytest.approx(0.0, abs=1e-6)


def test_adapt_observer():
    xyz = Color.xyz(40, 50, 60)
    adapted = xyz.adapt_observer(CIEObserver.TEN_DEGREE)
    assert adapted.observer is CIEObserver.TEN_DEGREE
    assert adapted.space_name == "xyz"
    assert adapted != xyz


def test_adaptation_requires_cie_space():
    with pytest.raises(UnsupportedColorSpaceError):
        Color.rgb(1, 2, 3).adapt_illuminant(CIEIlluminant.D50)
    with pytest.raises(UnsupportedColorSpaceError):
        Color.hsl(1, 2, 3).adapt_observer(CIEObserver.TEN_DEGREE)


def test_equality_and_hash():
    a = Color.rgb(1, 2, 3)
    b = Color.rgb(1.0, 2.0, 3.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Color.rgb(1, 2, 4)
    assert a != Color.rgba(1, 2, 3)
    assert len({a, b}) == 1


def test_str_and_repr():
    assert str(Color.rgb(255, 100, 50)) == "rgb(255, 100, 50)"
    assert str(Color.rgb(300, -1, 50)) == "rgb(255, 0, 50)"
    assert str(Color.hsl(14.634146, 100, 59.8)) == "hsl(14.6341, 100, 59.8)"
    assert repr(Color.rgb(1, 2, 3)).startswith("Color(space='rgb'")


def test_adapt_to_same_illuminant_is_identity():
    lab = Color.lab(50, 0, -128)
    same = lab.adapt_illuminant(CIEIlluminant.D65)
    assert same.values == pytest.approx({"l": 50, "a": 0, "b": -128}, abs=1e-6)
    lch = Color.lch(60, 140, 300)
    assert lch.adapt_observer(CIEObserver.TWO_DEGREE).values == pytest.approx(lch.values, abs=1e-6)


def test_color_base_is_abstract():
    with pytest.raises(TypeError):
        ColorBase(RGB)

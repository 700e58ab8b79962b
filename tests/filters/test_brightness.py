import pytest

from chromaspace import BrightnessFilter, Color, ColorSpace, InvalidArgumentError, color_spaces


class Gray(ColorSpace):
    name = "gray"
    channels = ("v",)
    defaults = {"v": 0}
    ranges = {"v": (0, 1)}


def test_rgb_brightness():
    assert Color.rgb(100, 150, 200).brightness(20).values == {"r": 120, "g": 170, "b": 220}
    assert Color.rgb(100, 150, 200).brightness(-120).values == {"r": 0, "g": 30, "b": 80}


def test_rgb_brightness_clamps():
    assert Color.rgb(250, 10, 0).brightness(20).values == {"r": 255, "g": 30, "b": 20}


def test_rgba_alpha_untouched():
    result = Color.rgba(10, 10, 10, 77).brightness(100)
    assert result.values == {"r": 110, "g": 110, "b": 110, "a": 77}


def test_lightness_spaces():
    assert Color.hsl(120, 50, 50).brightness(10).values == pytest.approx({"h": 120, "s": 50, "l": 60})
    assert Color.hsla(120, 50, 50, 9).brightness(-60).get_channel("l") == 0
    assert Color.hsv(120, 50, 50).brightness(10).get_channel("v") == pytest.approx(60)
    assert Color.lab(50, 10, 10).brightness(5).get_channel("l") == pytest.approx(55)
    assert Color.lch(50, 10, 10).brightness(80).get_channel("l") == 100
    assert Color.ycbcr(100, 128, 128).brightness(10).values == pytest.approx({"y": 110, "cb": 128, "cr": 128})


def test_xyz_brightness():
    assert Color.xyz(10, 20, 30).brightness(5).values == pytest.approx({"x": 15, "y": 25, "z": 35})


def test_cmyk_brightness_removes_ink():
    result = Color.cmyk(10, 50, 30, 40).brightness(51)
    assert result.values == pytest.approx({"c": 0, "m": 30, "y": 10, "k": 40})
    darker = Color.cmyk(10, 50, 30, 40).brightness(-25.5)
    assert darker.get_channel("m") == pytest.approx(60)


def test_non_numeric_amount():
    with pytest.raises(InvalidArgumentError):
        Color.rgb(1, 2, 3).brightness("more")
    with pytest.raises(InvalidArgumentError):
        Color.rgb(1, 2, 3).apply_filter("brightness")


def test_unsupported_space():
    color_spaces.register(Gray)
    with pytest.raises(InvalidArgumentError):
        BrightnessFilter().apply(Color(Gray, {"v": 0.5}), 10)

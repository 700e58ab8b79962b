import json

import pytest

from chromaspace import (
    CIEIlluminant,
    CIEObserver,
    Color,
    ColorSpaceNotFoundError,
    InvalidColorValueError,
    InvalidFormatError,
    MutableColor,
    ValidationPolicy,
)


def test_to_dict():
    data = Color.lab(50, 10, -20, illuminant=CIEIlluminant.D50).to_dict()
    assert data == {
        "color-space": "lab",
        "values": {"l": 50, "a": 10, "b": -20},
        "illuminant": "D50",
        "observer": "2°",
    }


def test_to_dict_keeps_raw_values():
    assert Color.rgb(300, 0, 0).to_dict()["values"]["r"] == 300


def test_to_json_is_utf8():
    text = Color.xyz(1, 2, 3, observer=CIEObserver.TEN_DEGREE).to_json()
    assert "10°" in text
    assert json.loads(text)["observer"] == "10°"


def test_from_dict():
    color = Color.from_dict({"color-space": "hsl", "values": {"h": 120, "s": 50, "l": 25}})
    assert color == Color.hsl(120, 50, 25)
    assert color.illuminant is CIEIlluminant.D65


def test_from_dict_round_trip():
    original = Color.lch(40, 30, 300, illuminant=CIEIlluminant.F2, observer=CIEObserver.TEN_DEGREE)
    assert Color.from_dict(original.to_dict()) == original
    assert Color.from_json(original.to_json()) == original


def test_from_dict_builds_requested_variant():
    assert isinstance(MutableColor.from_dict(Color.rgb(1, 2, 3).to_dict()), MutableColor)


def test_from_dict_strict_policy():
    data = Color.rgb(300, 0, 0).to_dict()
    assert Color.from_dict(data).get_channel("r") == 255
    with pytest.raises(InvalidColorValueError):
        Color.from_dict(data, policy=ValidationPolicy.STRICT)


@pytest.mark.parametrize("data", [
    [],
    {"values": {"r": 1}},
    {"color-space": "rgb"},
    {"color-space": "rgb", "values": [1, 2, 3]},
    {"color-space": "rgb", "values": {}, "illuminant": "D99"},
    {"color-space": "rgb", "values": {}, "observer": "5°"},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(InvalidFormatError):
        Color.from_dict(data)


def test_from_dict_unknown_space():
    with pytest.raises(ColorSpaceNotFoundError):
        Color.from_dict({"color-space": "pantone", "values": {}})


def test_from_json_rejects_invalid_json():
    with pytest.raises(InvalidFormatError):
        Color.from_json("{not json")

"""
CIE L*a*b* and its cylindrical form L*C*h.

Lab is relative to the reference white of the (illuminant, observer) pair
it is evaluated under; LCh is the polar form of the same coordinates.
"""
from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple

from ..types.color_types import ChannelInput, ChannelValues
from ..utils import wrap_hue
from .cie_data import CIEParams, DEFAULT_CIE
from .xyz import rgb_to_xyz, xyz_to_rgb

EPSILON = (6 / 29) ** 3
KAPPA_SLOPE = 1 / (3 * (6 / 29) ** 2)
DELTA = 6 / 29


def _f(t: float) -> float:
    if t > EPSILON:
        return t ** (1 / 3)
    return t * KAPPA_SLOPE + 4 / 29


def _f_inv(t: float) -> float:
    if t > DELTA:
        return t ** 3
    return 3 * DELTA ** 2 * (t - 4 / 29)


def xyz_to_lab_tuple(x: float, y: float, z: float, white: Sequence[float]) -> Tuple[float, float, float]:
    """
    Convert XYZ to Lab against a reference white.

    Args:
        x, y, z: Tristimulus values (Y of white = 100)
        white: Reference white tristimulus values

    Returns:
        Tuple[float, float, float]: (L [0,100], a, b)
    """
    xn, yn, zn = white
    fx, fy, fz = _f(x / xn), _f(y / yn), _f(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz_tuple(l: float, a: float, b: float, white: Sequence[float]) -> Tuple[float, float, float]:
    xn, yn, zn = white
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return xn * _f_inv(fx), yn * _f_inv(fy), zn * _f_inv(fz)


def _white(cie: Optional[CIEParams]) -> Tuple[float, float, float]:
    return (cie or DEFAULT_CIE).white


def xyz_to_lab(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    l, a, b = xyz_to_lab_tuple(values["x"], values["y"], values["z"], _white(cie))
    return {"l": l, "a": a, "b": b}


def lab_to_xyz(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    x, y, z = lab_to_xyz_tuple(values["l"], values["a"], values["b"], _white(cie))
    return {"x": x, "y": y, "z": z}


def lab_to_lch(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    a, b = values["a"], values["b"]
    c = math.hypot(a, b)
    h = wrap_hue(math.degrees(math.atan2(b, a))) if c > 0 else 0.0
    return {"l": float(values["l"]), "c": c, "h": h}


def lch_to_lab(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    rad = math.radians(values["h"])
    c = values["c"]
    return {"l": float(values["l"]), "a": c * math.cos(rad), "b": c * math.sin(rad)}


def rgb_to_lab(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return xyz_to_lab(rgb_to_xyz(values, cie), cie)


def lab_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return xyz_to_rgb(lab_to_xyz(values, cie), cie)


def rgb_to_lch(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return lab_to_lch(rgb_to_lab(values, cie))


def lch_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return lab_to_rgb(lch_to_lab(values), cie)


def xyz_to_lch(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return lab_to_lch(xyz_to_lab(values, cie))


def lch_to_xyz(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return lab_to_xyz(lch_to_lab(values), cie)

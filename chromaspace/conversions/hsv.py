from __future__ import annotations
from typing import Optional, Tuple

from ..types.color_types import ChannelInput, ChannelValues
from .cie_data import CIEParams
from .hsl import chroma_to_unit_rgb, hue_from_rgb
from .rgb import normalize_rgb, scale_rgb


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    saturation = 0.0 if max_c <= 0 else delta / max_c
    return hue_from_rgb(r, g, b, max_c, delta), saturation, max_c


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    chroma = v * s
    return chroma_to_unit_rgb(h, chroma, v - chroma)


def hsl_to_hsv_unit(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to HSV with s, l, v in [0, 1]."""
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, s_v, v


def rgb_to_hsv(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    h, s, v = unit_rgb_to_hsv(*normalize_rgb(values))
    return {"h": h, "s": s * 100.0, "v": v * 100.0}


def hsv_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return scale_rgb(*hsv_to_unit_rgb(values["h"], values["s"] / 100.0, values["v"] / 100.0))


def hsl_to_hsv(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    h, s, v = hsl_to_hsv_unit(values["h"], values["s"] / 100.0, values["l"] / 100.0)
    return {"h": float(h), "s": s * 100.0, "v": v * 100.0}

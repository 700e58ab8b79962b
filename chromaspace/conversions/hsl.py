from __future__ import annotations
from typing import Optional, Tuple

from ..types.color_types import ChannelInput, ChannelValues
from ..utils import wrap_hue
from .cie_data import CIEParams
from .rgb import ALPHA_MAX, normalize_rgb, scale_rgb

## Unit-float kernels

def hue_from_rgb(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hexcone hue in degrees for unit RGB with ``delta = max - min``."""
    if delta == 0:
        return 0.0
    if max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240
    return wrap_hue(hue)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # out-of-gamut input can push lightness to the ends of the range
    denominator = 1 - abs(2 * lightness - 1)
    if delta == 0 or denominator <= 0:
        saturation = 0.0
    else:
        saturation = delta / denominator

    return hue_from_rgb(r, g, b, max_c, delta), saturation, lightness


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    return chroma_to_unit_rgb(h, chroma, l - chroma / 2)


def chroma_to_unit_rgb(h: float, chroma: float, m: float) -> Tuple[float, float, float]:
    """Shared hexcone step: place ``chroma`` in the hue sector and lift by ``m``."""
    h_prime = wrap_hue(h) / 60.0
    x = chroma * (1 - abs(h_prime % 2 - 1))
    sector = int(h_prime) % 6

    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsv_to_hsl_unit(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to HSL with s, v, l in [0, 1]."""
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)
    return h, s_l, l


## Channel-dict converters (h in degrees, s and l in percent)

def rgb_to_hsl(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    h, s, l = unit_rgb_to_hsl(*normalize_rgb(values))
    return {"h": h, "s": s * 100.0, "l": l * 100.0}


def hsl_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return scale_rgb(*hsl_to_unit_rgb(values["h"], values["s"] / 100.0, values["l"] / 100.0))


def rgb_to_hsla(values: ChannelInput, cie: Optional[CIEParams] = None, alpha: float = ALPHA_MAX) -> ChannelValues:
    out = rgb_to_hsl(values)
    out["a"] = float(alpha)
    return out


def hsla_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return hsl_to_rgb(values)


def hsl_to_hsla(values: ChannelInput, cie: Optional[CIEParams] = None, alpha: float = ALPHA_MAX) -> ChannelValues:
    return {"h": float(values["h"]), "s": float(values["s"]), "l": float(values["l"]), "a": float(alpha)}


def hsla_to_hsl(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return {"h": float(values["h"]), "s": float(values["s"]), "l": float(values["l"])}


def hsv_to_hsl(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    h, s, l = hsv_to_hsl_unit(values["h"], values["s"] / 100.0, values["v"] / 100.0)
    return {"h": float(h), "s": s * 100.0, "l": l * 100.0}

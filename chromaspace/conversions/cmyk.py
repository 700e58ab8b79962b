from __future__ import annotations
from typing import Optional

from ..types.color_types import ChannelInput, ChannelValues
from .cie_data import CIEParams
from .rgb import normalize_rgb, scale_rgb


def rgb_to_cmyk(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    """
    Convert 0..255 RGB to CMYK percentages.

    Pure black has no defined chromatic ink; c, m and y are 0 there.
    """
    r, g, b = normalize_rgb(values)
    k = 1 - max(r, g, b)
    if k >= 1:
        return {"c": 0.0, "m": 0.0, "y": 0.0, "k": 100.0}
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return {"c": c * 100.0, "m": m * 100.0, "y": y * 100.0, "k": k * 100.0}


def cmyk_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    c, m, y, k = (values[ch] / 100.0 for ch in ("c", "m", "y", "k"))
    return scale_rgb((1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k))

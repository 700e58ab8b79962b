from __future__ import annotations
from typing import Optional

from ..types.color_types import ChannelInput, ChannelValues
from .cie_data import CIEParams

RGB_MAX = 255.0
ALPHA_MAX = 255.0


def rgb_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return {"r": float(values["r"]), "g": float(values["g"]), "b": float(values["b"])}


def rgb_to_rgba(values: ChannelInput, cie: Optional[CIEParams] = None, alpha: float = ALPHA_MAX) -> ChannelValues:
    out = rgb_to_rgb(values)
    out["a"] = float(alpha)
    return out


def rgba_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    return rgb_to_rgb(values)


def normalize_rgb(values: ChannelInput) -> tuple[float, float, float]:
    """Scale 0..255 RGB channels to unit floats."""
    return values["r"] / RGB_MAX, values["g"] / RGB_MAX, values["b"] / RGB_MAX


def scale_rgb(r: float, g: float, b: float) -> ChannelValues:
    """Scale unit floats back to 0..255 RGB channels (unrounded)."""
    return {"r": r * RGB_MAX, "g": g * RGB_MAX, "b": b * RGB_MAX}

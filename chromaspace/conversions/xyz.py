from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from ..types.color_types import ChannelInput, ChannelValues
from .adaptation import adapt_xyz
from .cie_data import CIEParams, DEFAULT_CIE
from .rgb import normalize_rgb, scale_rgb

# Linear sRGB -> XYZ (D65, 2°), Y of white = 1
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

XYZ_SCALE = 100.0


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """sRGB in [0, 1] to D65/2° XYZ with Y of white = 100."""
    linear = np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])
    x, y, z = SRGB_TO_XYZ @ linear * XYZ_SCALE
    return float(x), float(y), float(z)


def xyz_to_unit_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """D65/2° XYZ (Y of white = 100) to sRGB in [0, 1]."""
    linear = XYZ_TO_SRGB @ (np.array([x, y, z], dtype=float) / XYZ_SCALE)
    r, g, b = (linear_to_srgb(float(c)) for c in linear)
    return r, g, b


def rgb_to_xyz(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    """
    Convert 0..255 RGB to XYZ under ``cie``.

    XYZ under anything but D65/2° is Bradford-adapted from the sRGB white.
    """
    xyz = unit_rgb_to_xyz(*normalize_rgb(values))
    if cie is not None and not cie.is_default:
        xyz = adapt_xyz(xyz, DEFAULT_CIE.white, cie.white)
    x, y, z = xyz
    return {"x": x, "y": y, "z": z}


def xyz_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    xyz = (values["x"], values["y"], values["z"])
    if cie is not None and not cie.is_default:
        xyz = adapt_xyz(xyz, cie.white, DEFAULT_CIE.white)
    return scale_rgb(*xyz_to_unit_rgb(*xyz))

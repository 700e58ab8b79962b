"""
Chromaspace Conversions
=======================

Pure per-space conversion formulas operating on channel dictionaries, the
CIE reference white table, chromatic adaptation, and the engine that picks a
conversion path between two registered spaces.

Channel units
-------------
- RGB, alpha, YCbCr: 0..255
- CMYK, HSL/HSV saturation, lightness and value: percent (0..100)
- Hue: degrees in [0, 360)
- XYZ: Y of the reference white = 100
- Lab/LCh: L in 0..100, a/b/c unbounded by the formulas

Every converter has the signature ``fn(values, cie=None)``; converters that
produce an alpha-carrying space also take ``alpha``.

Examples
--------
>>> from chromaspace.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl({"r": 51, "g": 102, "b": 153})
>>> hsl_to_rgb({"h": 210, "s": 50, "l": 40})
"""

from .cie_data import CIEParams, DEFAULT_CIE, REFERENCE_WHITES, reference_white
from .adaptation import ADAPTATION_MATRICES, adaptation_matrix, adapt_xyz

from .rgb import rgb_to_rgb, rgb_to_rgba, rgba_to_rgb
from .hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsla,
    hsla_to_rgb,
    hsl_to_hsla,
    hsla_to_hsl,
    hsv_to_hsl,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
)
from .hsv import rgb_to_hsv, hsv_to_rgb, hsl_to_hsv, unit_rgb_to_hsv, hsv_to_unit_rgb
from .cmyk import rgb_to_cmyk, cmyk_to_rgb
from .xyz import rgb_to_xyz, xyz_to_rgb, srgb_to_linear, linear_to_srgb
from .lab import (
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    rgb_to_lab,
    lab_to_rgb,
    rgb_to_lch,
    lch_to_rgb,
    xyz_to_lch,
    lch_to_xyz,
)
from .ycbcr import rgb_to_ycbcr, ycbcr_to_rgb

from .engine import ConversionEngine

__all__ = [
    # CIE
    'CIEParams',
    'DEFAULT_CIE',
    'REFERENCE_WHITES',
    'reference_white',
    'ADAPTATION_MATRICES',
    'adaptation_matrix',
    'adapt_xyz',

    # RGB / RGBA
    'rgb_to_rgb',
    'rgb_to_rgba',
    'rgba_to_rgb',

    # HSL / HSLA / HSV
    'rgb_to_hsl',
    'hsl_to_rgb',
    'rgb_to_hsla',
    'hsla_to_rgb',
    'hsl_to_hsla',
    'hsla_to_hsl',
    'hsv_to_hsl',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'hsl_to_hsv',
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',

    # CMYK
    'rgb_to_cmyk',
    'cmyk_to_rgb',

    # XYZ / Lab / LCh
    'rgb_to_xyz',
    'xyz_to_rgb',
    'srgb_to_linear',
    'linear_to_srgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'rgb_to_lab',
    'lab_to_rgb',
    'rgb_to_lch',
    'lch_to_rgb',
    'xyz_to_lch',
    'lch_to_xyz',

    # YCbCr
    'rgb_to_ycbcr',
    'ycbcr_to_rgb',

    # Engine
    'ConversionEngine',
]

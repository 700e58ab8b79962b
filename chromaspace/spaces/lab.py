from ..conversions.lab import (
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    lch_to_rgb,
    lch_to_xyz,
    rgb_to_lab,
    rgb_to_lch,
    xyz_to_lab,
    xyz_to_lch,
)
from .base import ColorSpace


class Lab(ColorSpace):
    """CIE L*a*b*, relative to the reference white of its illuminant and observer."""
    name = "lab"
    channels = ("l", "a", "b")
    defaults = {"l": 0, "a": 0, "b": 0}
    ranges = {"l": (0, 100), "a": (-128, 127), "b": (-128, 127)}
    supports_illuminant = True
    supports_observer = True
    converters = {"rgb": lab_to_rgb, "xyz": lab_to_xyz, "lch": lab_to_lch}
    inverse_converters = {"rgb": rgb_to_lab, "xyz": xyz_to_lab, "lch": lch_to_lab}


class LCh(ColorSpace):
    """Cylindrical L*a*b*: lightness, chroma and hue angle."""
    name = "lch"
    channels = ("l", "c", "h")
    defaults = {"l": 0, "c": 0, "h": 0}
    ranges = {"l": (0, 100), "c": (0, 150), "h": (0, 360)}
    supports_illuminant = True
    supports_observer = True
    converters = {"rgb": lch_to_rgb, "lab": lch_to_lab, "xyz": lch_to_xyz}
    inverse_converters = {"rgb": rgb_to_lch, "lab": lab_to_lch, "xyz": xyz_to_lch}

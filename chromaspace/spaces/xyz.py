from ..conversions.lab import lab_to_xyz, xyz_to_lab
from ..conversions.xyz import rgb_to_xyz, xyz_to_rgb
from .base import ColorSpace


class XYZ(ColorSpace):
    """CIE 1931 XYZ tristimulus values, Y of the reference white = 100."""
    name = "xyz"
    channels = ("x", "y", "z")
    defaults = {"x": 0, "y": 0, "z": 0}
    ranges = {"x": (0, 150), "y": (0, 150), "z": (0, 150)}
    supports_illuminant = True
    supports_observer = True
    converters = {"rgb": xyz_to_rgb, "lab": xyz_to_lab}
    inverse_converters = {"rgb": rgb_to_xyz, "lab": lab_to_xyz}

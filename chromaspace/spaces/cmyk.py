from ..conversions.cmyk import cmyk_to_rgb, rgb_to_cmyk
from .base import ColorSpace


class CMYK(ColorSpace):
    """Subtractive ink model, every channel in percent."""
    name = "cmyk"
    channels = ("c", "m", "y", "k")
    defaults = {"c": 0, "m": 0, "y": 0, "k": 0}
    ranges = {"c": (0, 100), "m": (0, 100), "y": (0, 100), "k": (0, 100)}
    converters = {"rgb": cmyk_to_rgb}
    inverse_converters = {"rgb": rgb_to_cmyk}

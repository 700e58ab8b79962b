from ..conversions.hsl import hsv_to_hsl
from ..conversions.hsv import hsl_to_hsv, hsv_to_rgb, rgb_to_hsv
from .base import ColorSpace


class HSV(ColorSpace):
    """Hue in degrees, saturation and value in percent."""
    name = "hsv"
    channels = ("h", "s", "v")
    defaults = {"h": 0, "s": 0, "v": 0}
    ranges = {"h": (0, 360), "s": (0, 100), "v": (0, 100)}
    converters = {"rgb": hsv_to_rgb, "hsl": hsv_to_hsl}
    inverse_converters = {"rgb": rgb_to_hsv, "hsl": hsl_to_hsv}

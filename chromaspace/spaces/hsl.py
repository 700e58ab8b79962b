from ..conversions.hsl import (
    hsl_to_hsla,
    hsl_to_rgb,
    hsla_to_hsl,
    hsla_to_rgb,
    hsv_to_hsl,
    rgb_to_hsl,
    rgb_to_hsla,
)
from ..conversions.hsv import hsl_to_hsv
from .base import ColorSpace


class HSL(ColorSpace):
    """Hue in degrees, saturation and lightness in percent."""
    name = "hsl"
    channels = ("h", "s", "l")
    defaults = {"h": 0, "s": 0, "l": 0}
    ranges = {"h": (0, 360), "s": (0, 100), "l": (0, 100)}
    converters = {"rgb": hsl_to_rgb, "hsla": hsl_to_hsla, "hsv": hsl_to_hsv}
    inverse_converters = {"rgb": rgb_to_hsl, "hsla": hsla_to_hsl, "hsv": hsv_to_hsl}


class HSLA(ColorSpace):
    """HSL with an 8-bit alpha channel."""
    name = "hsla"
    channels = ("h", "s", "l", "a")
    defaults = {"h": 0, "s": 0, "l": 0, "a": 255}
    ranges = {"h": (0, 360), "s": (0, 100), "l": (0, 100), "a": (0, 255)}
    alpha_channel = "a"
    converters = {"rgb": hsla_to_rgb, "hsl": hsla_to_hsl}
    inverse_converters = {"rgb": rgb_to_hsla, "hsl": hsl_to_hsla}

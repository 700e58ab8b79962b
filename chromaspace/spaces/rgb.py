from ..conversions.rgb import rgb_to_rgb, rgb_to_rgba, rgba_to_rgb
from .base import ColorSpace


class RGB(ColorSpace):
    """sRGB with 8-bit channels."""
    name = "rgb"
    channels = ("r", "g", "b")
    defaults = {"r": 0, "g": 0, "b": 0}
    ranges = {"r": (0, 255), "g": (0, 255), "b": (0, 255)}
    value_type = int
    converters = {"rgb": rgb_to_rgb, "rgba": rgb_to_rgba}
    inverse_converters = {"rgb": rgb_to_rgb, "rgba": rgba_to_rgb}


class RGBA(ColorSpace):
    """sRGB with an 8-bit alpha channel."""
    name = "rgba"
    channels = ("r", "g", "b", "a")
    defaults = {"r": 0, "g": 0, "b": 0, "a": 255}
    ranges = {"r": (0, 255), "g": (0, 255), "b": (0, 255), "a": (0, 255)}
    alpha_channel = "a"
    value_type = int
    converters = {"rgb": rgba_to_rgb}
    inverse_converters = {"rgb": rgb_to_rgba}

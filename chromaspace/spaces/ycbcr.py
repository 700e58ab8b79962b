from ..conversions.ycbcr import rgb_to_ycbcr, ycbcr_to_rgb
from .base import ColorSpace


class YCbCr(ColorSpace):
    """Full-range BT.601 luma and chroma, chroma centred on 128."""
    name = "ycbcr"
    channels = ("y", "cb", "cr")
    defaults = {"y": 0, "cb": 128, "cr": 128}
    ranges = {"y": (0, 255), "cb": (0, 255), "cr": (0, 255)}
    converters = {"rgb": ycbcr_to_rgb}
    inverse_converters = {"rgb": rgb_to_ycbcr}

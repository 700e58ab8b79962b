from .base import ColorSpace
from .rgb import RGB, RGBA
from .cmyk import CMYK
from .hsl import HSL, HSLA
from .hsv import HSV
from .lab import Lab, LCh
from .xyz import XYZ
from .ycbcr import YCbCr
from .registry import ColorSpaceRegistry, color_spaces, build_registry, built_in_spaces

__all__ = [
    "ColorSpace",
    "RGB",
    "RGBA",
    "CMYK",
    "HSL",
    "HSLA",
    "HSV",
    "Lab",
    "LCh",
    "XYZ",
    "YCbCr",
    "ColorSpaceRegistry",
    "color_spaces",
    "build_registry",
    "built_in_spaces",
]

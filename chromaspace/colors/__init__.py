from .color_base import ColorBase, engine
from .color import Color
from .mutable import MutableColor
from .hex import parse_hex, format_hex

__all__ = [
    "ColorBase",
    "Color",
    "MutableColor",
    "engine",
    "parse_hex",
    "format_hex",
]

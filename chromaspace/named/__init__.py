from .registry import (
    NamedColorRegistry,
    DictNamedColors,
    NamedColorRegistries,
    named_colors,
)
from .vga import VGANamedColors, VGA_COLORS
from .resolve import resolve

__all__ = [
    "NamedColorRegistry",
    "DictNamedColors",
    "NamedColorRegistries",
    "named_colors",
    "VGANamedColors",
    "VGA_COLORS",
    "resolve",
]

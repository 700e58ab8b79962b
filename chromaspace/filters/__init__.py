from .base import Filter, UnaryFilter, ParameterizedFilter, BinaryFilter
from .registry import FilterRegistry, filters
from .blend import BlendFilter, MixFilter
from .brightness import BrightnessFilter
from .complementary import ComplementaryFilter, ComplementMethod

__all__ = [
    "Filter",
    "UnaryFilter",
    "ParameterizedFilter",
    "BinaryFilter",
    "FilterRegistry",
    "filters",
    "BlendFilter",
    "MixFilter",
    "BrightnessFilter",
    "ComplementaryFilter",
    "ComplementMethod",
]

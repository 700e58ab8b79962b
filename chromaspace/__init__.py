"""
chromaspace
===========

Color values in ten interchangeable color spaces (RGB, RGBA, CMYK, HSL, HSLA,
HSV, Lab, LCh, XYZ, YCbCr) with conversions, filters, named colors and CIE
chromatic adaptation.

Registries start empty; call :func:`bootstrap` once at startup:

>>> import chromaspace
>>> chromaspace.bootstrap()
>>> from chromaspace import Color
>>> Color.rgb(255, 100, 50).to_hex()
'#FF6432'
>>> str(Color.named("red"))
'rgb(255, 0, 0)'
"""
import logging

from .exceptions import (
    ColorError,
    InvalidColorValueError,
    InvalidFormatError,
    InvalidArgumentError,
    ColorSpaceNotFoundError,
    ConversionNotSupportedError,
    UnsupportedColorSpaceError,
    NamedColorNotFoundError,
    FilterNotFoundError,
    NamedColorConflictWarning,
)
from .types import (
    CIEIlluminant,
    CIEObserver,
    AdaptationMethod,
    ValidationPolicy,
    DEFAULT_ILLUMINANT,
    DEFAULT_OBSERVER,
    DEFAULT_ADAPTATION,
    DEFAULT_POLICY,
)
from .spaces import (
    ColorSpace,
    ColorSpaceRegistry,
    color_spaces,
    RGB,
    RGBA,
    CMYK,
    HSL,
    HSLA,
    HSV,
    Lab,
    LCh,
    XYZ,
    YCbCr,
)
from .conversions import ConversionEngine, reference_white, adapt_xyz
from .filters import (
    Filter,
    UnaryFilter,
    ParameterizedFilter,
    BinaryFilter,
    FilterRegistry,
    filters,
    BlendFilter,
    MixFilter,
    BrightnessFilter,
    ComplementaryFilter,
    ComplementMethod,
)
from .named import (
    NamedColorRegistry,
    DictNamedColors,
    NamedColorRegistries,
    VGANamedColors,
    named_colors,
    resolve,
)
from .colors import Color, MutableColor, ColorBase

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def bootstrap() -> None:
    """
    Register the built-in color spaces, filters and the VGA named colors.

    Safe to call more than once.
    """
    color_spaces.register_built_in()
    filters.register_built_in()
    if not any(isinstance(r, VGANamedColors) for r in named_colors.registries()):
        named_colors.add(VGANamedColors())
    logger.debug("chromaspace bootstrapped: %d spaces, %d filters", len(color_spaces), len(filters.names()))


__all__ = [
    # errors
    "ColorError",
    "InvalidColorValueError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "ColorSpaceNotFoundError",
    "ConversionNotSupportedError",
    "UnsupportedColorSpaceError",
    "NamedColorNotFoundError",
    "FilterNotFoundError",
    "NamedColorConflictWarning",
    # types
    "CIEIlluminant",
    "CIEObserver",
    "AdaptationMethod",
    "ValidationPolicy",
    "DEFAULT_ILLUMINANT",
    "DEFAULT_OBSERVER",
    "DEFAULT_ADAPTATION",
    "DEFAULT_POLICY",
    # spaces
    "ColorSpace",
    "ColorSpaceRegistry",
    "color_spaces",
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
    # conversions
    "ConversionEngine",
    "reference_white",
    "adapt_xyz",
    # filters
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
    # named colors
    "NamedColorRegistry",
    "DictNamedColors",
    "NamedColorRegistries",
    "VGANamedColors",
    "named_colors",
    "resolve",
    # colors
    "Color",
    "MutableColor",
    "ColorBase",
    "bootstrap",
]

from __future__ import annotations
import logging
from typing import Dict, List, Type

from ..exceptions import ColorSpaceNotFoundError, InvalidColorValueError
from .base import ColorSpace

logger = logging.getLogger(__name__)


def build_registry(*spaces: Type[ColorSpace]) -> Dict[str, Type[ColorSpace]]:
    return {space.name: space for space in spaces}


def built_in_spaces() -> Dict[str, Type[ColorSpace]]:
    """The ten color spaces shipped with chromaspace, keyed by name."""
    from .cmyk import CMYK
    from .hsl import HSL, HSLA
    from .hsv import HSV
    from .lab import Lab, LCh
    from .rgb import RGB, RGBA
    from .xyz import XYZ
    from .ycbcr import YCbCr

    return build_registry(RGB, RGBA, CMYK, HSL, HSLA, HSV, Lab, LCh, XYZ, YCbCr)


class ColorSpaceRegistry:
    """Name -> descriptor lookup for color spaces."""

    def __init__(self) -> None:
        self._spaces: Dict[str, Type[ColorSpace]] = {}

    def register(self, space: Type[ColorSpace]) -> None:
        """Register a descriptor under its name, replacing any previous one."""
        if not (isinstance(space, type) and issubclass(space, ColorSpace)):
            raise InvalidColorValueError(f"Expected a ColorSpace subclass, got {space!r}")
        if space.name in self._spaces:
            logger.debug("Replacing color space %r", space.name)
        else:
            logger.debug("Registering color space %r", space.name)
        self._spaces[space.name] = space

    def unregister(self, name: str) -> None:
        if name not in self._spaces:
            raise ColorSpaceNotFoundError(name)
        logger.debug("Unregistering color space %r", name)
        del self._spaces[name]

    def get(self, name: str) -> Type[ColorSpace]:
        try:
            return self._spaces[name]
        except KeyError:
            raise ColorSpaceNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._spaces

    def names(self) -> List[str]:
        return list(self._spaces)

    def all(self) -> Dict[str, Type[ColorSpace]]:
        return dict(self._spaces)

    def register_built_in(self) -> None:
        for space in built_in_spaces().values():
            self.register(space)

    def clear(self) -> None:
        self._spaces.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._spaces

    def __len__(self) -> int:
        return len(self._spaces)


# Process-wide registry; empty until register_built_in() or chromaspace.bootstrap()
color_spaces = ColorSpaceRegistry()

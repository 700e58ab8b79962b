from __future__ import annotations
from typing import Optional, Type

from ..spaces.base import ColorSpace
from ..types.cie import CIEIlluminant, CIEObserver
from ..types.color_types import ChannelInput
from .color_base import ColorBase


class Color(ColorBase):
    """
    Immutable color value.

    Every update or conversion returns a new instance; assigning attributes
    after construction raises ``AttributeError``.

    Examples:
        >>> Color.rgb(255, 100, 50).to_hex()
        '#FF6432'
        >>> str(Color.hsl(210, 50, 40).to_rgb())
        'rgb(51, 102, 153)'
    """
    __slots__ = ()

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # freeze instance; no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    def _derive(
        self,
        space: Type[ColorSpace],
        values: ChannelInput,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
    ) -> Color:
        return self._spawn(space, values, illuminant, observer)

    def __hash__(self) -> int:
        return hash((
            self.space_name,
            tuple(float(v) for v in self.raw_values.values()),
            self._illuminant,
            self._observer,
        ))

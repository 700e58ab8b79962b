from __future__ import annotations
from typing import Optional, Type

from ..spaces.base import ColorSpace
from ..types.cie import CIEIlluminant, CIEObserver
from ..types.color_types import ChannelInput, Scalar
from .color_base import ColorBase


class MutableColor(ColorBase):
    """
    Color value updated in place.

    Updates, conversions and filters change this instance and return it, so
    calls can be chained. Mutable colors are not hashable.
    """
    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    def _derive(
        self,
        space: Type[ColorSpace],
        values: ChannelInput,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
    ) -> MutableColor:
        updated = self._spawn(space, values, illuminant, observer)
        self._space = updated._space
        self._values = updated._values
        self._illuminant = updated._illuminant
        self._observer = updated._observer
        return self

    def set_channel(self, name: str, value: Scalar) -> MutableColor:
        """Set one channel in place."""
        return self.with_channels({name: value})

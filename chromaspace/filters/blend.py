from __future__ import annotations
from typing import TYPE_CHECKING

from ..exceptions import InvalidArgumentError
from ..types.color_types import is_numeric
from ..utils import clamp_to_range
from .base import BinaryFilter, cast_channel

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase


class MixFilter(BinaryFilter):
    """
    Weighted average of two colors: ``(1 - w) * base + w * other``.

    The weight is clamped to [0, 1]; 0 returns ``base``, 1 returns ``other``.
    """
    name = "mix"

    def __init__(self, weight: float = 0.5) -> None:
        if not is_numeric(weight):
            raise InvalidArgumentError(f"Mix weight must be a number, got {type(weight).__name__}")
        self.weight = clamp_to_range(weight, 0.0, 1.0)

    def combine(self, base: "ColorBase", other: "ColorBase") -> "ColorBase":
        w = self.weight
        mixed = {
            ch: cast_channel(base.space, (1 - w) * base.get_channel(ch) + w * other.get_channel(ch))
            for ch in base.channels
        }
        return base.copy().with_channels(mixed)


class BlendFilter(MixFilter):
    """Even blend of two colors; commutative."""
    name = "blend"

    def __init__(self) -> None:
        super().__init__(0.5)

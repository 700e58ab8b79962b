from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..utils import wrap_hue
from .base import ParameterizedFilter

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase


class ComplementMethod(str, Enum):
    """How the complement of a color is computed."""
    ARTISTIC = "artistic"                  # HSL hue + 180°
    PERCEPTUAL = "perceptual"              # LCh hue + 180°
    DISPLAY_ACCURATE = "display-accurate"  # 255 - c in RGB

    @classmethod
    def from_value(cls, value: Any) -> "ComplementMethod":
        """
        Parse a method, accepting enum members and loose strings.

        ``None`` and unknown strings fall back to PERCEPTUAL.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.PERCEPTUAL
        text = str(value).strip().lower().replace("_", "-").replace(" ", "-")
        if text == "displayaccurate":
            return cls.DISPLAY_ACCURATE
        for member in cls:
            if member.value == text:
                return member
        return cls.PERCEPTUAL


class ComplementaryFilter(ParameterizedFilter):
    """
    Complement a color and convert the result back to its original space.

    The original alpha, if any, is kept.
    """
    name = "complementary"

    def apply(self, color: "ColorBase", value: Any = None) -> "ColorBase":
        method = ComplementMethod.from_value(value)
        original = color.space
        work = color.copy()

        if method is ComplementMethod.DISPLAY_ACCURATE:
            rgb = work.to_rgb()
            complement = rgb.with_channels({ch: 255.0 - rgb.get_channel(ch) for ch in ("r", "g", "b")})
        elif method is ComplementMethod.ARTISTIC:
            hsl = work.to_hsl()
            complement = hsl.with_channels({"h": wrap_hue(hsl.get_channel("h") + 180.0)})
        else:
            lch = work.to_lch()
            complement = lch.with_channels({"h": wrap_hue(lch.get_channel("h") + 180.0)})

        alpha = color.alpha
        result = complement.convert(original, alpha=alpha)
        if original.alpha_channel is not None:
            result = result.with_channels({original.alpha_channel: alpha})
        return result

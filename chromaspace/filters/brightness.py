from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

from ..exceptions import InvalidArgumentError
from ..types.color_types import is_numeric
from .base import ParameterizedFilter, cast_channel

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

# CMYK ink is in percent while the amount is on the 0..255 scale
CMYK_SCALE = 2.55

# space name -> (channels to adjust, offset from amount)
BRIGHTNESS_RULES: Dict[str, Tuple[Tuple[str, ...], Callable[[float], float]]] = {
    "rgb": (("r", "g", "b"), lambda amount: amount),
    "rgba": (("r", "g", "b"), lambda amount: amount),
    "cmyk": (("c", "m", "y"), lambda amount: -amount / CMYK_SCALE),
    "hsl": (("l",), lambda amount: amount),
    "hsla": (("l",), lambda amount: amount),
    "hsv": (("v",), lambda amount: amount),
    "lab": (("l",), lambda amount: amount),
    "lch": (("l",), lambda amount: amount),
    "xyz": (("x", "y", "z"), lambda amount: amount),
    "ycbcr": (("y",), lambda amount: amount),
}


class BrightnessFilter(ParameterizedFilter):
    """
    Shift the lightness-carrying channels of a color by a signed amount.

    Alpha is never touched; every adjusted channel is clamped to its range.
    """
    name = "brightness"

    def apply(self, color: "ColorBase", value: Any = None) -> "ColorBase":
        if not is_numeric(value):
            raise InvalidArgumentError(f"Brightness amount must be a number, got {value!r}")
        rule = BRIGHTNESS_RULES.get(color.space_name)
        if rule is None:
            raise InvalidArgumentError(f"Brightness is not supported for color space {color.space_name}")

        channels, offset_of = rule
        offset = offset_of(float(value))
        space = color.space
        updates = {
            ch: cast_channel(space, space.clamp(ch, color.get_channel(ch) + offset))
            for ch in channels
        }
        return color.copy().with_channels(updates)

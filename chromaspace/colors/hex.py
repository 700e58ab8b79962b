from __future__ import annotations
import string
from typing import Optional, Tuple

from ..exceptions import InvalidFormatError

HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex(value: str) -> Tuple[int, int, int, Optional[int]]:
    """
    Parse a CSS-style hex color.

    Accepts ``RGB``, ``RGBA``, ``RRGGBB`` and ``RRGGBBAA``, with or without a
    leading ``#``. Short forms duplicate each nibble.

    Args:
        value: Hex string

    Returns:
        Tuple (r, g, b, a) with a = None when no alpha digits were given

    Raises:
        InvalidFormatError: If the string is not a valid hex color
    """
    if not isinstance(value, str):
        raise InvalidFormatError(f"Hex color must be a string, got {type(value).__name__}")
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 4, 6, 8) or not set(digits) <= HEX_DIGITS:
        raise InvalidFormatError(f"Invalid hex color: {value!r}")

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = channels[3] if len(channels) == 4 else None
    return channels[0], channels[1], channels[2], alpha


def format_hex(r: int, g: int, b: int, a: Optional[int] = None) -> str:
    """Format 0..255 integer channels as ``#RRGGBB`` or ``#RRGGBBAA``."""
    channels = (r, g, b) if a is None else (r, g, b, a)
    return "#" + "".join(f"{int(c):02X}" for c in channels)

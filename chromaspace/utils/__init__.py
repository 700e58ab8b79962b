from .default import value_or_default
from .num_utils import is_close_to_int, clamp_to_range, wrap_hue, format_number

__all__ = [
    "value_or_default",
    "is_close_to_int",
    "clamp_to_range",
    "wrap_hue",
    "format_number",
]

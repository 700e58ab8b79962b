from boundednumbers.functions import clamp, cyclic_wrap_float


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def clamp_to_range(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``."""
    return float(clamp(value, lo, hi))


def wrap_hue(hue: float, period: float = 360.0) -> float:
    """Wrap a hue angle into ``[0, period)``."""
    return float(cyclic_wrap_float(hue, 0.0, period))


def format_number(value: float, digits: int = 4) -> str:
    """
    Format a channel value for display.

    Integral values print without a decimal part, everything else is
    rounded to ``digits`` decimals with trailing zeros dropped.
    """
    if is_close_to_int(value):
        return str(int(round(value)))
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return text

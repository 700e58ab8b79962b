from enum import Enum


class CIEIlluminant(str, Enum):
    """CIE standard illuminants (reference light sources)."""
    A = "A"
    B = "B"
    C = "C"
    D50 = "D50"
    D55 = "D55"
    D65 = "D65"
    D75 = "D75"
    E = "E"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"


class CIEObserver(str, Enum):
    """CIE standard observers: 1931 2° and 1964 10°."""
    TWO_DEGREE = "2°"
    TEN_DEGREE = "10°"

    @classmethod
    def parse(cls, value: "str | CIEObserver") -> "CIEObserver":
        """Accept the enum, its value, or a bare degree count such as ``"10"``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().rstrip("°")
        for member in cls:
            if member.value.rstrip("°") == text:
                return member
        raise ValueError(f"Unknown CIE observer: {value!r}")


class AdaptationMethod(str, Enum):
    """Chromatic adaptation transforms."""
    BRADFORD = "bradford"
    VON_KRIES = "von_kries"
    XYZ_SCALING = "xyz_scaling"


DEFAULT_ILLUMINANT = CIEIlluminant.D65
DEFAULT_OBSERVER = CIEObserver.TWO_DEGREE
DEFAULT_ADAPTATION = AdaptationMethod.BRADFORD

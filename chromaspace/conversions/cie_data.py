from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from ..types.cie import CIEIlluminant, CIEObserver, DEFAULT_ILLUMINANT, DEFAULT_OBSERVER

WhitePoint = Tuple[float, float, float]

# XYZ tristimulus values of the standard illuminants, Y normalized to 100
_TWO_DEGREE_WHITES: Dict[CIEIlluminant, WhitePoint] = {
    CIEIlluminant.A: (109.850, 100.000, 35.585),
    CIEIlluminant.B: (99.0927, 100.000, 85.313),
    CIEIlluminant.C: (98.074, 100.000, 118.232),
    CIEIlluminant.D50: (96.422, 100.000, 82.521),
    CIEIlluminant.D55: (95.682, 100.000, 92.149),
    CIEIlluminant.D65: (95.047, 100.000, 108.883),
    CIEIlluminant.D75: (94.972, 100.000, 122.638),
    CIEIlluminant.E: (100.000, 100.000, 100.000),
    CIEIlluminant.F1: (92.834, 100.000, 103.665),
    CIEIlluminant.F2: (99.187, 100.000, 67.395),
    CIEIlluminant.F3: (103.754, 100.000, 49.861),
    CIEIlluminant.F4: (109.147, 100.000, 38.813),
    CIEIlluminant.F5: (90.872, 100.000, 98.723),
    CIEIlluminant.F6: (97.309, 100.000, 60.191),
    CIEIlluminant.F7: (95.044, 100.000, 108.755),
    CIEIlluminant.F8: (96.413, 100.000, 82.333),
    CIEIlluminant.F9: (100.365, 100.000, 67.868),
    CIEIlluminant.F10: (96.174, 100.000, 81.712),
    CIEIlluminant.F11: (100.966, 100.000, 64.370),
    CIEIlluminant.F12: (108.046, 100.000, 39.228),
}

_TEN_DEGREE_WHITES: Dict[CIEIlluminant, WhitePoint] = {
    CIEIlluminant.A: (111.144, 100.000, 35.200),
    CIEIlluminant.B: (99.178, 100.000, 84.349),
    CIEIlluminant.C: (97.285, 100.000, 116.145),
    CIEIlluminant.D50: (96.720, 100.000, 81.427),
    CIEIlluminant.D55: (95.799, 100.000, 90.926),
    CIEIlluminant.D65: (94.811, 100.000, 107.304),
    CIEIlluminant.D75: (94.416, 100.000, 120.641),
    CIEIlluminant.E: (100.000, 100.000, 100.000),
    CIEIlluminant.F1: (94.791, 100.000, 103.191),
    CIEIlluminant.F2: (103.280, 100.000, 69.026),
    CIEIlluminant.F3: (108.968, 100.000, 51.965),
    CIEIlluminant.F4: (114.961, 100.000, 40.963),
    CIEIlluminant.F5: (93.369, 100.000, 98.636),
    CIEIlluminant.F6: (102.148, 100.000, 62.074),
    CIEIlluminant.F7: (95.792, 100.000, 107.687),
    CIEIlluminant.F8: (97.115, 100.000, 81.135),
    CIEIlluminant.F9: (102.116, 100.000, 67.826),
    CIEIlluminant.F10: (99.001, 100.000, 83.134),
    CIEIlluminant.F11: (103.866, 100.000, 65.627),
    CIEIlluminant.F12: (111.428, 100.000, 40.353),
}

REFERENCE_WHITES: Dict[CIEObserver, Dict[CIEIlluminant, WhitePoint]] = {
    CIEObserver.TWO_DEGREE: _TWO_DEGREE_WHITES,
    CIEObserver.TEN_DEGREE: _TEN_DEGREE_WHITES,
}


def reference_white(
    illuminant: CIEIlluminant = DEFAULT_ILLUMINANT,
    observer: CIEObserver = DEFAULT_OBSERVER,
) -> WhitePoint:
    """
    Look up the XYZ tristimulus values of a standard illuminant.

    Args:
        illuminant: CIE standard illuminant
        observer: CIE standard observer (2° or 10°)

    Returns:
        (X, Y, Z) with Y = 100
    """
    return REFERENCE_WHITES[CIEObserver.parse(observer)][CIEIlluminant(illuminant)]


@dataclass(frozen=True)
class CIEParams:
    """Illuminant/observer pair a CIE-aware conversion is evaluated under."""
    illuminant: CIEIlluminant = DEFAULT_ILLUMINANT
    observer: CIEObserver = DEFAULT_OBSERVER

    @property
    def white(self) -> WhitePoint:
        return reference_white(self.illuminant, self.observer)

    @property
    def is_default(self) -> bool:
        return self.illuminant == DEFAULT_ILLUMINANT and self.observer == DEFAULT_OBSERVER


DEFAULT_CIE = CIEParams()

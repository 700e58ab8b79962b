"""
Chromatic adaptation between reference whites.

A cone-response transform ``M_A`` maps XYZ into a cone space where the
source and destination whites are compared channel by channel:

    M = M_A^-1 · diag(ρβγ_dst / ρβγ_src) · M_A
"""
from __future__ import annotations
import logging
from typing import Dict, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.cie import AdaptationMethod, DEFAULT_ADAPTATION

logger = logging.getLogger(__name__)

ADAPTATION_MATRICES: Dict[AdaptationMethod, NDArray] = {
    AdaptationMethod.BRADFORD: np.array([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]),
    AdaptationMethod.VON_KRIES: np.array([
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.0, 0.0, 0.91822],
    ]),
    AdaptationMethod.XYZ_SCALING: np.eye(3),
}


def adaptation_matrix(
    src_white: Sequence[float],
    dst_white: Sequence[float],
    method: AdaptationMethod = DEFAULT_ADAPTATION,
) -> NDArray:
    """
    Build the 3x3 matrix that adapts XYZ from ``src_white`` to ``dst_white``.

    Args:
        src_white: XYZ of the source reference white
        dst_white: XYZ of the destination reference white
        method: Cone-response transform to use

    Returns:
        3x3 numpy array applied to column vectors
    """
    m_a = ADAPTATION_MATRICES[AdaptationMethod(method)]
    src_cone = m_a @ np.asarray(src_white, dtype=float)
    dst_cone = m_a @ np.asarray(dst_white, dtype=float)
    scale = np.diag(dst_cone / src_cone)
    return np.linalg.inv(m_a) @ scale @ m_a


def adapt_xyz(
    xyz: Sequence[float],
    src_white: Sequence[float],
    dst_white: Sequence[float],
    method: AdaptationMethod = DEFAULT_ADAPTATION,
) -> Tuple[float, float, float]:
    """Adapt an XYZ triple from one reference white to another."""
    if tuple(src_white) == tuple(dst_white):
        x, y, z = xyz
        return float(x), float(y), float(z)
    logger.debug("Adapting XYZ %s -> %s using %s", src_white, dst_white, AdaptationMethod(method).value)
    out = adaptation_matrix(src_white, dst_white, method) @ np.asarray(xyz, dtype=float)
    return float(out[0]), float(out[1]), float(out[2])

from __future__ import annotations
from typing import Dict, Mapping, Tuple
import numbers
import numpy as np

Scalar = int | float
ChannelValues = Dict[str, Scalar]
ChannelInput = Mapping[str, Scalar]
ChannelRange = Tuple[float, float]

valid_scalar_types = (int, float, np.integer, np.floating)


def is_numeric(value: object) -> bool:
    """
    Check whether a value can be stored in a color channel.

    Booleans are rejected even though they subclass int.

    Args:
        value: Candidate channel value

    Returns:
        True for ints, floats and numpy scalars
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, valid_scalar_types) or isinstance(value, numbers.Real)

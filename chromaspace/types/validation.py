# No dependencies
from enum import Enum


class ValidationPolicy(str, Enum):
    """
    How a color treats channel values outside the declared range.

    CLAMP keeps raw values and clamps on read; STRICT rejects them at
    construction and mutation time.
    """
    CLAMP = "clamp"
    STRICT = "strict"


DEFAULT_POLICY = ValidationPolicy.CLAMP

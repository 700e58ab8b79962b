from .color_types import (
    Scalar,
    ChannelValues,
    ChannelInput,
    ChannelRange,
    is_numeric,
)
from .cie import (
    CIEIlluminant,
    CIEObserver,
    AdaptationMethod,
    DEFAULT_ILLUMINANT,
    DEFAULT_OBSERVER,
    DEFAULT_ADAPTATION,
)
from .validation import ValidationPolicy, DEFAULT_POLICY

__all__ = [
    "Scalar",
    "ChannelValues",
    "ChannelInput",
    "ChannelRange",
    "is_numeric",
    "CIEIlluminant",
    "CIEObserver",
    "AdaptationMethod",
    "DEFAULT_ILLUMINANT",
    "DEFAULT_OBSERVER",
    "DEFAULT_ADAPTATION",
    "ValidationPolicy",
    "DEFAULT_POLICY",
]

from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple

from ..exceptions import InvalidColorValueError
from ..types.color_types import ChannelRange, ChannelValues, Scalar, is_numeric
from ..utils import clamp_to_range

Converter = Callable[..., ChannelValues]


class ColorSpace:
    """
    Descriptor of a color space.

    Subclasses are never instantiated: the class itself carries the channel
    layout, defaults, ranges and converter tables, and is what colors and
    registries refer to.
    """

    name:               ClassVar[str]
    channels:           ClassVar[Tuple[str, ...]]
    defaults:           ClassVar[Dict[str, Scalar]]
    ranges:             ClassVar[Dict[str, ChannelRange]]
    alpha_channel:      ClassVar[Optional[str]] = None
    supports_illuminant: ClassVar[bool] = False
    supports_observer:  ClassVar[bool] = False
    value_type:         ClassVar[type] = float
    # to{X}: target name -> converter; from{X}: source name -> converter
    converters:         ClassVar[Dict[str, Converter]] = {}
    inverse_converters: ClassVar[Dict[str, Converter]] = {}

    def __init__(self) -> None:
        raise TypeError(f"{type(self).__name__} is a descriptor and cannot be instantiated")

    @classmethod
    def has_channel(cls, channel: str) -> bool:
        return channel in cls.channels

    @classmethod
    def default(cls, channel: str) -> Scalar:
        cls._require_channel(channel)
        return cls.defaults[channel]

    @classmethod
    def has_alpha(cls) -> bool:
        return cls.alpha_channel is not None

    @classmethod
    def supports_cie(cls) -> bool:
        return cls.supports_illuminant or cls.supports_observer

    @classmethod
    def is_within_range(cls, channel: str, value: Scalar) -> bool:
        cls._require_channel(channel)
        lo, hi = cls.ranges[channel]
        return lo <= value <= hi

    @classmethod
    def validate(cls, channel: str, value: Any) -> bool:
        """
        Check a channel value against this space.

        Args:
            channel: Channel name
            value: Candidate value

        Returns:
            True if the value is valid

        Raises:
            InvalidColorValueError: For an unknown channel, a non-numeric
                value or a value outside the channel range
        """
        cls._require_channel(channel)
        if not is_numeric(value):
            raise InvalidColorValueError(
                f"Channel '{channel}' of {cls.name} expects a number, got {type(value).__name__}"
            )
        if not cls.is_within_range(channel, value):
            lo, hi = cls.ranges[channel]
            raise InvalidColorValueError(
                f"Channel '{channel}' of {cls.name} must be within [{lo}, {hi}], got {value}"
            )
        return True

    @classmethod
    def clamp(cls, channel: str, value: Scalar) -> float:
        cls._require_channel(channel)
        lo, hi = cls.ranges[channel]
        return clamp_to_range(value, lo, hi)

    @classmethod
    def defaults_dict(cls) -> ChannelValues:
        return {ch: cls.defaults[ch] for ch in cls.channels}

    @classmethod
    def _require_channel(cls, channel: str) -> None:
        if channel not in cls.channels:
            raise InvalidColorValueError(f"Channel '{channel}' does not exist in color space {cls.name}")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            return
        if set(cls.defaults) != set(cls.channels) or set(cls.ranges) != set(cls.channels):
            raise ValueError(f"{cls.__name__} defaults and ranges must cover exactly {cls.channels!r}")

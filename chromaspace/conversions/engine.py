"""
Conversion path resolution between registered color spaces.

A conversion is resolved in three tiers:

1. Direct: the source descriptor knows how to reach the target.
2. Reverse: the target descriptor knows how to come from the source.
3. RGB hub: source -> RGB -> target, only when neither endpoint is RGB.

Intermediate values are never clamped. The final result is clamped to the
target's ranges and cast to its ``value_type``.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Optional, Type, Union

from ..exceptions import ColorError, ConversionNotSupportedError
from ..types.cie import CIEIlluminant, CIEObserver, DEFAULT_ILLUMINANT, DEFAULT_OBSERVER
from ..types.color_types import ChannelInput, ChannelValues
from ..utils import clamp_to_range, value_or_default
from .cie_data import CIEParams
from .rgb import ALPHA_MAX

if TYPE_CHECKING:
    from ..spaces.base import ColorSpace
    from ..spaces.registry import ColorSpaceRegistry

logger = logging.getLogger(__name__)

HUB_SPACE = "rgb"

Converter = Callable[..., ChannelValues]


class ConversionEngine:
    """Resolve and run conversions against the spaces of one registry."""

    def __init__(self, registry: "ColorSpaceRegistry") -> None:
        self.registry = registry

    def convert(
        self,
        values: ChannelInput,
        source: Type["ColorSpace"],
        target_name: Union[str, Type["ColorSpace"]],
        alpha: Optional[float] = None,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
        clamp: bool = True,
    ) -> ChannelValues:
        """
        Convert channel values from ``source`` to the space named ``target_name``.

        Args:
            values: Raw channel values of the source color
            source: Source color space descriptor
            target_name: Registered name (or descriptor) of the target space
            alpha: Alpha for alpha-carrying targets; defaults to the source
                alpha, else 255
            illuminant: Illuminant for CIE-aware endpoints (default D65)
            observer: Observer for CIE-aware endpoints (default 2°)
            clamp: Clamp and cast the result; off for intermediate legs of a
                longer pipeline

        Returns:
            Channel values of the target space, clamped and cast unless
            ``clamp`` is False

        Raises:
            ColorSpaceNotFoundError: If the target is not registered
            ConversionNotSupportedError: If no path exists
        """
        target = self._resolve(target_name)
        if source.name == target.name:
            return dict(values)

        cie = CIEParams(
            CIEIlluminant(value_or_default(illuminant, DEFAULT_ILLUMINANT)),
            CIEObserver.parse(value_or_default(observer, DEFAULT_OBSERVER)),
        )
        alpha_value = self._resolve_alpha(values, source, alpha)

        direct = source.converters.get(target.name)
        if direct is not None:
            logger.debug("Converting %s -> %s directly", source.name, target.name)
            result = self._call(direct, values, cie if source.supports_cie() else None, target, alpha_value)
            return self._finish(result, target, clamp)

        reverse = target.inverse_converters.get(source.name)
        if reverse is not None:
            logger.debug("Converting %s -> %s via %s inverse", source.name, target.name, target.name)
            result = self._call(reverse, values, cie if target.supports_cie() else None, target, alpha_value)
            return self._finish(result, target, clamp)

        if HUB_SPACE in (source.name, target.name):
            raise ConversionNotSupportedError(source.name, target.name)

        logger.debug("Converting %s -> %s through the %s hub", source.name, target.name, HUB_SPACE)
        try:
            result = self._through_hub(values, source, target, cie, alpha_value)
        except (ColorError, ArithmeticError, KeyError, ValueError) as exc:
            logger.debug("Hub conversion %s -> %s failed: %s", source.name, target.name, exc)
            raise ConversionNotSupportedError(source.name, target.name) from exc
        return self._finish(result, target, clamp)

    def _resolve(self, target: Union[str, Type["ColorSpace"]]) -> Type["ColorSpace"]:
        if isinstance(target, str):
            return self.registry.get(target)
        return target

    @staticmethod
    def _resolve_alpha(values: ChannelInput, source: Type["ColorSpace"], alpha: Optional[float]) -> float:
        source_alpha = values.get(source.alpha_channel) if source.alpha_channel is not None else None
        return float(value_or_default(alpha, source_alpha, ALPHA_MAX))

    @staticmethod
    def _call(
        fn: Converter,
        values: ChannelInput,
        cie: Optional[CIEParams],
        target: Type["ColorSpace"],
        alpha: float,
    ) -> ChannelValues:
        if target.has_alpha():
            return fn(values, cie, alpha=alpha)
        return fn(values, cie)

    def _through_hub(
        self,
        values: ChannelInput,
        source: Type["ColorSpace"],
        target: Type["ColorSpace"],
        cie: CIEParams,
        alpha: float,
    ) -> ChannelValues:
        hub = self.registry.get(HUB_SPACE)
        to_hub = source.converters.get(HUB_SPACE) or hub.inverse_converters.get(source.name)
        from_hub = target.inverse_converters.get(HUB_SPACE)
        if to_hub is None or from_hub is None:
            raise ConversionNotSupportedError(source.name, target.name)
        rgb = to_hub(values, cie if source.supports_cie() else None)
        return self._call(from_hub, rgb, cie if target.supports_cie() else None, target, alpha)

    @classmethod
    def _finish(cls, result: ChannelInput, target: Type["ColorSpace"], clamp: bool) -> ChannelValues:
        if clamp:
            return cls.fit_to_space(result, target)
        return {ch: float(result.get(ch, target.defaults[ch])) for ch in target.channels}

    @staticmethod
    def fit_to_space(result: ChannelInput, target: Type["ColorSpace"]) -> ChannelValues:
        """Clamp values to the ranges of ``target`` and cast them to its value type."""
        out: ChannelValues = {}
        for channel in target.channels:
            lo, hi = target.ranges[channel]
            value = clamp_to_range(result.get(channel, target.defaults[channel]), lo, hi)
            out[channel] = int(round(value)) if target.value_type is int else float(value)
        return out

from __future__ import annotations
import json
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, Union

import numpy as np

from ..conversions.engine import ConversionEngine
from ..exceptions import (
    InvalidArgumentError,
    InvalidColorValueError,
    InvalidFormatError,
    NamedColorConflictWarning,
    NamedColorNotFoundError,
    UnsupportedColorSpaceError,
)
from ..conversions.adaptation import adapt_xyz
from ..conversions.cie_data import reference_white
from ..filters.base import BinaryFilter, ParameterizedFilter, UnaryFilter
from ..filters.blend import MixFilter
from ..filters.registry import filters
from ..named.registry import named_colors
from ..spaces import CMYK, HSL, HSLA, HSV, RGB, RGBA, XYZ, Lab, LCh, YCbCr
from ..spaces.base import ColorSpace
from ..spaces.registry import color_spaces
from ..types.cie import (
    AdaptationMethod,
    CIEIlluminant,
    CIEObserver,
    DEFAULT_ADAPTATION,
    DEFAULT_ILLUMINANT,
    DEFAULT_OBSERVER,
)
from ..types.color_types import ChannelInput, ChannelValues, Scalar, is_numeric
from ..types.validation import DEFAULT_POLICY, ValidationPolicy
from ..utils import format_number, value_or_default
from .hex import format_hex, parse_hex

logger = logging.getLogger(__name__)

SpaceLike = Union[str, Type[ColorSpace]]

engine = ConversionEngine(color_spaces)


class ColorBase(ABC):
    """
    Shared behaviour of :class:`Color` and :class:`MutableColor`.

    A color holds a space descriptor, the raw channel values exactly as they
    were given, the CIE illuminant/observer pair and a validation policy.
    Reads clamp under ``ValidationPolicy.CLAMP``; under ``STRICT`` writes are
    validated instead.
    """
    __slots__ = ('_space', '_values', '_illuminant', '_observer', '_policy', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes once the instance is frozen."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        space: SpaceLike,
        values: Optional[ChannelInput] = None,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
        policy: ValidationPolicy = DEFAULT_POLICY,
    ) -> None:
        descriptor = self._resolve_space(space)
        policy = ValidationPolicy(policy)

        stored = descriptor.defaults_dict()
        for channel, value in (values or {}).items():
            stored[channel] = self._checked(descriptor, channel, value, policy)

        self._space = descriptor
        self._values = stored
        self._illuminant = CIEIlluminant(value_or_default(illuminant, DEFAULT_ILLUMINANT))
        self._observer = CIEObserver.parse(value_or_default(observer, DEFAULT_OBSERVER))
        self._policy = policy

    # ------------------ HELPERS ------------------
    @staticmethod
    def _resolve_space(space: SpaceLike) -> Type[ColorSpace]:
        if isinstance(space, str):
            return color_spaces.get(space.lower())
        if isinstance(space, type) and issubclass(space, ColorSpace):
            return space
        raise InvalidColorValueError(f"Expected a color space name or descriptor, got {space!r}")

    @staticmethod
    def _checked(descriptor: Type[ColorSpace], channel: str, value: Any, policy: ValidationPolicy) -> Scalar:
        if not descriptor.has_channel(channel):
            raise InvalidColorValueError(f"Channel '{channel}' does not exist in color space {descriptor.name}")
        if not is_numeric(value):
            raise InvalidColorValueError(
                f"Channel '{channel}' expects an int or float, got {type(value).__name__}"
            )
        if policy is ValidationPolicy.STRICT:
            descriptor.validate(channel, value)
        if isinstance(value, np.generic):
            return value.item()
        return value

    def _spawn(
        self,
        space: Type[ColorSpace],
        values: ChannelInput,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
    ) -> ColorBase:
        """Build a new color of the same variant and policy."""
        return type(self)(
            space,
            values,
            value_or_default(illuminant, self._illuminant),
            value_or_default(observer, self._observer),
            self._policy,
        )

    @abstractmethod
    def _derive(
        self,
        space: Type[ColorSpace],
        values: ChannelInput,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
    ) -> ColorBase:
        """Result of an operation: a new color, or ``self`` updated in place."""

    def copy(self) -> ColorBase:
        return self._spawn(self._space, self._values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def space(self) -> Type[ColorSpace]:
        return self._space

    @property
    def space_name(self) -> str:
        return self._space.name

    @property
    def channels(self) -> Tuple[str, ...]:
        return self._space.channels

    @property
    def illuminant(self) -> CIEIlluminant:
        return self._illuminant

    @property
    def observer(self) -> CIEObserver:
        return self._observer

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    @property
    def strict(self) -> bool:
        return self._policy is ValidationPolicy.STRICT

    @property
    def values(self) -> ChannelValues:
        """Channel values in channel order, clamped to their ranges."""
        return {ch: self.get_channel(ch) for ch in self.channels}

    @property
    def raw_values(self) -> ChannelValues:
        """Channel values exactly as stored."""
        return {ch: self._values[ch] for ch in self.channels}

    @property
    def alpha(self) -> Optional[Scalar]:
        if self._space.alpha_channel is None:
            return None
        return self.get_channel(self._space.alpha_channel)

    def get_channel(self, name: str) -> Scalar:
        """Return a channel value, clamped to the channel range."""
        raw = self.get_channel_raw(name)
        if self._space.is_within_range(name, raw):
            return raw
        return self._space.clamp(name, raw)

    def get_channel_raw(self, name: str) -> Scalar:
        if not self._space.has_channel(name):
            raise InvalidColorValueError(f"Channel '{name}' does not exist in color space {self.space_name}")
        return self._values[name]

    # ------------------ CHANNEL UPDATES ------------------
    def with_channels(self, updates: ChannelInput) -> ColorBase:
        """
        Replace some channels.

        Values are stored raw as floats; strict colors validate them.

        Args:
            updates: Mapping of channel name to new value

        Returns:
            The updated color (a new one for immutable colors)
        """
        values = dict(self._values)
        for channel, value in updates.items():
            values[channel] = float(self._checked(self._space, channel, value, self._policy))
        return self._derive(self._space, values)

    def without_channels(self, names: Iterable[str]) -> ColorBase:
        """Reset the given channels to their defaults."""
        values = dict(self._values)
        for channel in names:
            values[channel] = self._space.default(channel)
        return self._derive(self._space, values)

    # ------------------ CONVERSIONS ------------------
    def convert(
        self,
        space_name: SpaceLike,
        alpha: Optional[Scalar] = None,
        illuminant: Optional[CIEIlluminant] = None,
        observer: Optional[CIEObserver] = None,
    ) -> ColorBase:
        """
        Convert this color to another registered space.

        Args:
            space_name: Target space name or descriptor
            alpha: Alpha for alpha-carrying targets (default: own alpha, else 255)
            illuminant: Overrides this color's illuminant for the conversion
            observer: Overrides this color's observer for the conversion

        Returns:
            Color in the target space carrying the CIE pair that was used
        """
        target = self._resolve_space(space_name)
        used_illuminant = value_or_default(illuminant, self._illuminant)
        used_observer = value_or_default(observer, self._observer)
        # same-space copies keep raw values, everything else converts clamped reads
        source_values = self.raw_values if target.name == self.space_name else self.values
        values = engine.convert(source_values, self._space, target, alpha, used_illuminant, used_observer)
        if target.name == self.space_name and alpha is not None and target.alpha_channel is not None:
            values[target.alpha_channel] = float(alpha)
        return self._derive(target, values, used_illuminant, used_observer)

    def to_rgb(self) -> ColorBase:
        return self.convert(RGB.name)

    def to_rgba(self, alpha: Optional[Scalar] = None) -> ColorBase:
        return self.convert(RGBA.name, alpha=alpha)

    def to_cmyk(self) -> ColorBase:
        return self.convert(CMYK.name)

    def to_hsl(self) -> ColorBase:
        return self.convert(HSL.name)

    def to_hsla(self, alpha: Optional[Scalar] = None) -> ColorBase:
        return self.convert(HSLA.name, alpha=alpha)

    def to_hsv(self) -> ColorBase:
        return self.convert(HSV.name)

    def to_lab(self, illuminant: Optional[CIEIlluminant] = None, observer: Optional[CIEObserver] = None) -> ColorBase:
        return self.convert(Lab.name, illuminant=illuminant, observer=observer)

    def to_lch(self, illuminant: Optional[CIEIlluminant] = None, observer: Optional[CIEObserver] = None) -> ColorBase:
        return self.convert(LCh.name, illuminant=illuminant, observer=observer)

    def to_xyz(self, illuminant: Optional[CIEIlluminant] = None, observer: Optional[CIEObserver] = None) -> ColorBase:
        return self.convert(XYZ.name, illuminant=illuminant, observer=observer)

    def to_ycbcr(self) -> ColorBase:
        return self.convert(YCbCr.name)

    # ------------------ CIE ADAPTATION ------------------
    def adapt_illuminant(
        self,
        target: CIEIlluminant,
        method: AdaptationMethod = DEFAULT_ADAPTATION,
    ) -> ColorBase:
        """
        Re-express this color under another illuminant.

        Raises:
            UnsupportedColorSpaceError: If the space has no illuminant support
        """
        if not self._space.supports_illuminant:
            raise UnsupportedColorSpaceError(
                f"Color space {self.space_name} does not support illuminant adaptation"
            )
        return self._adapt(CIEIlluminant(target), self._observer, method)

    def adapt_observer(
        self,
        target: CIEObserver,
        method: AdaptationMethod = DEFAULT_ADAPTATION,
    ) -> ColorBase:
        """
        Re-express this color under another standard observer.

        Raises:
            UnsupportedColorSpaceError: If the space has no observer support
        """
        if not self._space.supports_observer:
            raise UnsupportedColorSpaceError(
                f"Color space {self.space_name} does not support observer adaptation"
            )
        return self._adapt(self._illuminant, CIEObserver.parse(target), method)

    def _adapt(self, illuminant: CIEIlluminant, observer: CIEObserver, method: AdaptationMethod) -> ColorBase:
        # intermediate XYZ stays unclamped; only the final result is fitted
        xyz = engine.convert(self.values, self._space, XYZ, None, self._illuminant, self._observer, clamp=False)
        src_white = reference_white(self._illuminant, self._observer)
        dst_white = reference_white(illuminant, observer)
        x, y, z = adapt_xyz((xyz["x"], xyz["y"], xyz["z"]), src_white, dst_white, method)
        adapted = {"x": x, "y": y, "z": z}
        if self.space_name == XYZ.name:
            values = engine.fit_to_space(adapted, XYZ)
        else:
            values = engine.convert(adapted, XYZ, self._space, None, illuminant, observer)
        return self._derive(self._space, values, illuminant, observer)

    # ------------------ FILTERS ------------------
    def apply_filter(self, name: str, *args: Any) -> ColorBase:
        """
        Apply a registered filter by name.

        Unary filters take no argument, parameterized filters take one value
        and binary filters take the other color.

        Raises:
            FilterNotFoundError: If no filter has that name
            InvalidArgumentError: If the arguments do not fit the filter
        """
        flt = filters.get(name)
        if isinstance(flt, BinaryFilter):
            if len(args) != 1 or not isinstance(args[0], ColorBase):
                raise InvalidArgumentError(f"Filter '{name}' expects exactly one other color")
            result = flt.apply(self, args[0])
        elif isinstance(flt, ParameterizedFilter):
            if len(args) > 1:
                raise InvalidArgumentError(f"Filter '{name}' expects at most one value")
            result = flt.apply(self, args[0] if args else None)
        elif isinstance(flt, UnaryFilter):
            if args:
                raise InvalidArgumentError(f"Filter '{name}' takes no arguments")
            result = flt.apply(self)
        else:
            raise InvalidArgumentError(f"Filter '{name}' has no known arity")
        return self._derive(result.space, result.raw_values, result.illuminant, result.observer)

    def blend(self, other: ColorBase) -> ColorBase:
        return self.apply_filter("blend", other)

    def mix(self, other: ColorBase, weight: float = 0.5) -> ColorBase:
        result = MixFilter(weight).apply(self, other)
        return self._derive(result.space, result.raw_values, result.illuminant, result.observer)

    def brightness(self, amount: Scalar) -> ColorBase:
        return self.apply_filter("brightness", amount)

    def complement(self, method: Any = None) -> ColorBase:
        return self.apply_filter("complementary", method)

    # ------------------ FACTORIES ------------------
    @classmethod
    def rgb(cls, r: Scalar, g: Scalar, b: Scalar, **kwargs: Any) -> ColorBase:
        return cls(RGB, {"r": r, "g": g, "b": b}, **kwargs)

    @classmethod
    def rgba(cls, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 255, **kwargs: Any) -> ColorBase:
        return cls(RGBA, {"r": r, "g": g, "b": b, "a": a}, **kwargs)

    @classmethod
    def cmyk(cls, c: Scalar, m: Scalar, y: Scalar, k: Scalar, **kwargs: Any) -> ColorBase:
        return cls(CMYK, {"c": c, "m": m, "y": y, "k": k}, **kwargs)

    @classmethod
    def hsl(cls, h: Scalar, s: Scalar, l: Scalar, **kwargs: Any) -> ColorBase:
        return cls(HSL, {"h": h, "s": s, "l": l}, **kwargs)

    @classmethod
    def hsla(cls, h: Scalar, s: Scalar, l: Scalar, a: Scalar = 255, **kwargs: Any) -> ColorBase:
        return cls(HSLA, {"h": h, "s": s, "l": l, "a": a}, **kwargs)

    @classmethod
    def hsv(cls, h: Scalar, s: Scalar, v: Scalar, **kwargs: Any) -> ColorBase:
        return cls(HSV, {"h": h, "s": s, "v": v}, **kwargs)

    @classmethod
    def lab(cls, l: Scalar, a: Scalar, b: Scalar, illuminant: Optional[CIEIlluminant] = None,
            observer: Optional[CIEObserver] = None, **kwargs: Any) -> ColorBase:
        return cls(Lab, {"l": l, "a": a, "b": b}, illuminant, observer, **kwargs)

    @classmethod
    def lch(cls, l: Scalar, c: Scalar, h: Scalar, illuminant: Optional[CIEIlluminant] = None,
            observer: Optional[CIEObserver] = None, **kwargs: Any) -> ColorBase:
        return cls(LCh, {"l": l, "c": c, "h": h}, illuminant, observer, **kwargs)

    @classmethod
    def xyz(cls, x: Scalar, y: Scalar, z: Scalar, illuminant: Optional[CIEIlluminant] = None,
            observer: Optional[CIEObserver] = None, **kwargs: Any) -> ColorBase:
        return cls(XYZ, {"x": x, "y": y, "z": z}, illuminant, observer, **kwargs)

    @classmethod
    def ycbcr(cls, y: Scalar, cb: Scalar, cr: Scalar, **kwargs: Any) -> ColorBase:
        return cls(YCbCr, {"y": y, "cb": cb, "cr": cr}, **kwargs)

    @classmethod
    def hex(cls, value: str, space: Optional[SpaceLike] = None) -> ColorBase:
        """
        Parse a hex string, optionally converting it to ``space``.

        Eight and four digit forms produce RGBA, the others RGB. Without
        ``space`` the parsed color is returned as is.

        Raises:
            InvalidFormatError: If the hex string is malformed
        """
        r, g, b, a = parse_hex(value)
        if a is None:
            color = cls(RGB, {"r": r, "g": g, "b": b})
        else:
            color = cls(RGBA, {"r": r, "g": g, "b": b, "a": a})
        if space is None:
            return color
        target = cls._resolve_space(space)
        if target.name == color.space_name:
            return color
        return color.convert(target)

    @classmethod
    def named(cls, name: str, space: SpaceLike = "rgb") -> ColorBase:
        """
        Look up a named color in the registered named-color tables.

        Raises:
            NamedColorNotFoundError: If no table holds the name for that space
        """
        descriptor = cls._resolve_space(space)
        values = named_colors.lookup(name, descriptor.name)
        return cls(descriptor, values)

    @classmethod
    def resolve(cls, identifier: str, *args: Any, space: SpaceLike = "rgb") -> ColorBase:
        """
        Build a color from an identifier that is a named color or a space name.

        A named color takes precedence over a color space of the same name;
        that ambiguity emits a :class:`NamedColorConflictWarning`.

        Args:
            identifier: Named color (``"red"``) or registered space (``"hsl"``)
            *args: Channel values in channel order when building from a space
            space: Space of the named color

        Raises:
            NamedColorNotFoundError: If the identifier is neither
        """
        key = identifier.lower()
        target = cls._resolve_space(space)
        is_named = named_colors.has(key, target.name)
        is_space = color_spaces.has(key)

        if is_named and is_space:
            message = (
                f"'{identifier}' is both a named color and a registered color space; "
                f"using the named color"
            )
            logger.warning(message)
            warnings.warn(message, NamedColorConflictWarning, stacklevel=2)
        if is_named:
            return cls(target, named_colors.lookup(key, target.name))
        if is_space:
            descriptor = color_spaces.get(key)
            if len(args) > len(descriptor.channels):
                raise InvalidArgumentError(
                    f"{descriptor.name} takes at most {len(descriptor.channels)} channel values, got {len(args)}"
                )
            return cls(descriptor, dict(zip(descriptor.channels, args)))
        raise NamedColorNotFoundError(identifier, target.name)

    # ------------------ EXPORT ------------------
    def to_hex(self) -> str:
        """
        Format as ``#RRGGBB``, or ``#RRGGBBAA`` for alpha-carrying spaces.

        Non-RGB spaces are converted first; channels are clamped and rounded.
        """
        if self.space_name in (RGB.name, RGBA.name):
            source = self
        elif self._space.has_alpha():
            source = self.copy().convert(RGBA)
        else:
            source = self.copy().convert(RGB)
        r, g, b = (int(round(source.get_channel(ch))) for ch in ("r", "g", "b"))
        a = int(round(source.get_channel("a"))) if source.space_name == RGBA.name else None
        return format_hex(r, g, b, a)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color-space": self.space_name,
            "values": self.raw_values,
            "illuminant": self._illuminant.value,
            "observer": self._observer.value,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], policy: ValidationPolicy = DEFAULT_POLICY) -> ColorBase:
        """
        Rebuild a color from :meth:`to_dict` output.

        Raises:
            InvalidFormatError: If required keys are missing or malformed
        """
        if not isinstance(data, Mapping) or "color-space" not in data or "values" not in data:
            raise InvalidFormatError("Expected a mapping with 'color-space' and 'values' keys")
        if not isinstance(data["values"], Mapping):
            raise InvalidFormatError("'values' must be a mapping of channel values")
        try:
            illuminant = CIEIlluminant(data.get("illuminant", DEFAULT_ILLUMINANT))
            observer = CIEObserver.parse(data.get("observer", DEFAULT_OBSERVER))
        except ValueError as exc:
            raise InvalidFormatError(str(exc)) from exc
        return cls(data["color-space"], data["values"], illuminant, observer, policy)

    @classmethod
    def from_json(cls, text: str, policy: ValidationPolicy = DEFAULT_POLICY) -> ColorBase:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidFormatError(f"Invalid color JSON: {exc}") from exc
        return cls.from_dict(data, policy)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.space_name == other.space_name
            and self.raw_values == other.raw_values
            and self._illuminant == other._illuminant
            and self._observer == other._observer
        )

    def __str__(self) -> str:
        body = ", ".join(format_number(self.get_channel(ch)) for ch in self.channels)
        return f"{self.space_name}({body})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(space={self.space_name!r}, values={self.raw_values!r}, "
            f"illuminant={self._illuminant.value!r}, observer={self._observer.value!r}, "
            f"policy={self._policy.value!r})"
        )

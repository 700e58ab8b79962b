from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import InvalidArgumentError
from ..types.color_types import Scalar

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase
    from ..spaces.base import ColorSpace


class Filter(ABC):
    """A named color transformation registered in a :class:`FilterRegistry`."""
    name: ClassVar[str]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class UnaryFilter(Filter):
    """Filter applied to a single color with no argument."""

    @abstractmethod
    def apply(self, color: "ColorBase") -> "ColorBase":
        ...


class ParameterizedFilter(Filter):
    """Filter applied to a single color with one argument."""

    @abstractmethod
    def apply(self, color: "ColorBase", value: Any = None) -> "ColorBase":
        ...


class BinaryFilter(Filter):
    """Filter combining two colors of the same space."""

    def apply(self, base: "ColorBase", other: "ColorBase") -> "ColorBase":
        if base.space_name != other.space_name:
            raise InvalidArgumentError(
                f"Filter '{self.name}' needs both colors in the same space, "
                f"got {base.space_name} and {other.space_name}"
            )
        return self.combine(base, other)

    @abstractmethod
    def combine(self, base: "ColorBase", other: "ColorBase") -> "ColorBase":
        ...


def cast_channel(space: "type[ColorSpace]", value: float) -> Scalar:
    """Round for integer spaces, keep floats otherwise."""
    return int(round(value)) if space.value_type is int else float(value)

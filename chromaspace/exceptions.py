"""Error taxonomy shared by every chromaspace module."""
from __future__ import annotations


class ColorError(Exception):
    """Base class for all chromaspace errors."""


class InvalidColorValueError(ColorError, ValueError):
    """Wrong type, unknown channel, or (strict policy) out-of-range value."""


class InvalidFormatError(ColorError, ValueError):
    """Malformed external representation (hex string, exported dict)."""


class InvalidArgumentError(ColorError, ValueError):
    """Bad argument passed to a filter or factory."""


class ColorSpaceNotFoundError(ColorError, LookupError):
    """No color space is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Color space '{name}' not registered.")
        self.name = name


class ConversionNotSupportedError(ColorError):
    """No direct, reverse or RGB-hub path exists between two spaces."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Cannot convert from '{source}' to '{target}'.")
        self.source = source
        self.target = target


class UnsupportedColorSpaceError(ColorError):
    """A CIE operation was requested on a space without CIE support."""


class NamedColorNotFoundError(ColorError, LookupError):
    """No registry holds the requested name/space pair."""

    def __init__(self, name: str, space_name: str) -> None:
        super().__init__(f"Named color '{name}' not found in space '{space_name}'.")
        self.name = name
        self.space_name = space_name


class FilterNotFoundError(ColorError, LookupError):
    """No filter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Filter '{name}' not registered.")
        self.name = name


class NamedColorConflictWarning(UserWarning):
    """An identifier names both a named color and a registered color space."""

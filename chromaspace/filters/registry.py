from __future__ import annotations
import logging
from typing import Dict, List

from ..exceptions import FilterNotFoundError, InvalidArgumentError
from .base import Filter

logger = logging.getLogger(__name__)


class FilterRegistry:
    """Name -> filter lookup."""

    def __init__(self) -> None:
        self._filters: Dict[str, Filter] = {}

    def register(self, flt: Filter) -> None:
        if not isinstance(flt, Filter):
            raise InvalidArgumentError(f"Expected a Filter instance, got {flt!r}")
        logger.debug("Registering filter %r", flt.name)
        self._filters[flt.name] = flt

    def unregister(self, name: str) -> None:
        if name not in self._filters:
            raise FilterNotFoundError(name)
        logger.debug("Unregistering filter %r", name)
        del self._filters[name]

    def get(self, name: str) -> Filter:
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._filters

    def names(self) -> List[str]:
        return list(self._filters)

    def all(self) -> Dict[str, Filter]:
        return dict(self._filters)

    def clear(self) -> None:
        self._filters.clear()

    def register_built_in(self) -> None:
        """Register blend, mix, brightness and complementary."""
        from .blend import BlendFilter, MixFilter
        from .brightness import BrightnessFilter
        from .complementary import ComplementaryFilter

        for flt in (BlendFilter(), MixFilter(), BrightnessFilter(), ComplementaryFilter()):
            self.register(flt)


# Process-wide registry; empty until register_built_in() or chromaspace.bootstrap()
filters = FilterRegistry()

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Sequence, Union

from ..exceptions import NamedColorNotFoundError
from ..spaces.registry import built_in_spaces
from ..types.color_types import ChannelValues, Scalar

logger = logging.getLogger(__name__)

# Per-space entry: channel values in channel order, or an explicit mapping
NamedEntry = Union[Sequence[Scalar], Mapping[str, Scalar]]
NamedTable = Mapping[str, Mapping[str, NamedEntry]]


class NamedColorRegistry(ABC):
    """A table of named colors with values pre-computed per color space."""

    @abstractmethod
    def has(self, name: str, space_name: str) -> bool:
        ...

    @abstractmethod
    def get_color_values_by_name(self, name: str, space_name: str) -> ChannelValues:
        """
        Return the channel values of ``name`` in ``space_name``.

        Raises:
            NamedColorNotFoundError: If the pair is unknown
        """

    @abstractmethod
    def names(self) -> List[str]:
        ...


class DictNamedColors(NamedColorRegistry):
    """
    Named colors backed by a nested ``{name: {space: values}}`` table.

    Names are matched case-insensitively. Sequence entries are zipped with
    the channel order of the built-in space of that name.
    """

    def __init__(self, table: NamedTable, channel_order: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self._table: Dict[str, Mapping[str, NamedEntry]] = {name.lower(): spaces for name, spaces in table.items()}
        if channel_order is None:
            channel_order = {name: space.channels for name, space in built_in_spaces().items()}
        self._channel_order = dict(channel_order)

    def has(self, name: str, space_name: str) -> bool:
        return space_name in self._table.get(name.lower(), {})

    def get_color_values_by_name(self, name: str, space_name: str) -> ChannelValues:
        entry = self._table.get(name.lower(), {}).get(space_name)
        if entry is None:
            raise NamedColorNotFoundError(name, space_name)
        if isinstance(entry, Mapping):
            return dict(entry)
        channels = self._channel_order.get(space_name)
        if channels is None or len(channels) != len(entry):
            raise NamedColorNotFoundError(name, space_name)
        return dict(zip(channels, entry))

    def names(self) -> List[str]:
        return list(self._table)


class NamedColorRegistries:
    """Ordered stack of named-color registries; the first match wins."""

    def __init__(self) -> None:
        self._registries: List[NamedColorRegistry] = []

    def add(self, registry: NamedColorRegistry) -> None:
        logger.debug("Adding named color registry %s", type(registry).__name__)
        self._registries.append(registry)

    def remove(self, registry: NamedColorRegistry) -> None:
        self._registries.remove(registry)

    def clear(self) -> None:
        self._registries.clear()

    def registries(self) -> List[NamedColorRegistry]:
        return list(self._registries)

    def has(self, name: str, space_name: str) -> bool:
        return any(registry.has(name, space_name) for registry in self._registries)

    def lookup(self, name: str, space_name: str) -> ChannelValues:
        for registry in self._registries:
            if registry.has(name, space_name):
                return registry.get_color_values_by_name(name, space_name)
        raise NamedColorNotFoundError(name, space_name)

    def __len__(self) -> int:
        return len(self._registries)


# Process-wide stack; the VGA table is added by chromaspace.bootstrap()
named_colors = NamedColorRegistries()

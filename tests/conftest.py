import pytest

import chromaspace
from chromaspace import color_spaces, filters, named_colors


@pytest.fixture(autouse=True)
def registries():
    """Bootstrap the process-wide registries and restore them after each test."""
    chromaspace.bootstrap()
    saved_spaces = color_spaces.all()
    saved_filters = filters.all()
    saved_named = named_colors.registries()
    yield
    color_spaces.clear()
    for space in saved_spaces.values():
        color_spaces.register(space)
    filters.clear()
    for flt in saved_filters.values():
        filters.register(flt)
    named_colors.clear()
    for registry in saved_named:
        named_colors.add(registry)

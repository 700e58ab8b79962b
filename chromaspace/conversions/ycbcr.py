from __future__ import annotations
from typing import Optional

from ..types.color_types import ChannelInput, ChannelValues
from .cie_data import CIEParams

# Full-range ITU-R BT.601 (JPEG) coefficients
CHROMA_OFFSET = 128.0


def rgb_to_ycbcr(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    r, g, b = values["r"], values["g"], values["b"]
    y = 0.299 * r + 0.587 * g + 0.114 * b
    cb = CHROMA_OFFSET - 0.168736 * r - 0.331264 * g + 0.5 * b
    cr = CHROMA_OFFSET + 0.5 * r - 0.418688 * g - 0.081312 * b
    return {"y": y, "cb": cb, "cr": cr}


def ycbcr_to_rgb(values: ChannelInput, cie: Optional[CIEParams] = None) -> ChannelValues:
    y = values["y"]
    cb = values["cb"] - CHROMA_OFFSET
    cr = values["cr"] - CHROMA_OFFSET
    return {
        "r": y + 1.402 * cr,
        "g": y - 0.344136 * cb - 0.714136 * cr,
        "b": y + 1.772 * cb,
    }

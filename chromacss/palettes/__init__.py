from .palette import ColorPalette
from .samples import (
    D3_CATEGORY10_STRINGS,
    D3_CATEGORY20_STRINGS,
    D3_CATEGORY20B_STRINGS,
    D3_CATEGORY20C_STRINGS,
    D3_CATEGORY10,
    D3_CATEGORY20,
    D3_CATEGORY20B,
    D3_CATEGORY20C,
    RED_TO_GREEN,
    ORANGERED_TO_GREEN,
)

__all__ = [
    "ColorPalette",
    "D3_CATEGORY10_STRINGS",
    "D3_CATEGORY20_STRINGS",
    "D3_CATEGORY20B_STRINGS",
    "D3_CATEGORY20C_STRINGS",
    "D3_CATEGORY10",
    "D3_CATEGORY20",
    "D3_CATEGORY20B",
    "D3_CATEGORY20C",
    "RED_TO_GREEN",
    "ORANGERED_TO_GREEN",
]

"""
chromacss - CSS color strings, color space conversions and palettes
====================================================================

Parse and generate the CSS color syntaxes ``#rrggbb``, ``rgb()``, ``rgba()``,
``hsl()`` and ``hsla()``, convert integer channel triples between RGB, HSL
and HSV, and pick colors from ordered palettes.

Quick Start
-----------
>>> from chromacss import CssFormat, detect, convert, rgb_to_hsl, D3_CATEGORY10
>>> detect("rgba(1,2,3,0.5)")
<CssFormat.RGBA: 'rgba'>
>>> convert(CssFormat.HSLA, "rgba(255,0,0,0.5)")
'hsla(0,100%,50%,0.5)'
>>> rgb_to_hsl(255, 0, 0)
(0, 100, 50)
>>> D3_CATEGORY10.color_at(12)
'#2ca02c'

Modules
-------
- css: format detection, parsing and serialization
- conversions: RGB / HSL / HSV channel conversions (scalar and numpy)
- palettes: ColorPalette and built-in palettes
- scales: LinearScale
- errors: exception hierarchy
"""

from .errors import ColorError, UnrecognizedFormatError, MalformedColorError, InvalidArgumentError
from .css import (
    CssFormat,
    detect,
    is_type,
    to_rgb,
    to_hsl,
    to_alpha,
    convert,
    format_hex,
    format_rgb,
    format_rgba,
    format_hsl,
    format_hsla,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    np_hsv_to_hsl,
    np_hsl_to_hsv,
    convert_channels,
    np_convert_channels,
)
from .scales import LinearScale
from .palettes import (
    ColorPalette,
    D3_CATEGORY10,
    D3_CATEGORY20,
    D3_CATEGORY20B,
    D3_CATEGORY20C,
    RED_TO_GREEN,
    ORANGERED_TO_GREEN,
)

__version__ = "1.0.0"

__all__ = [
    # errors
    "ColorError",
    "UnrecognizedFormatError",
    "MalformedColorError",
    "InvalidArgumentError",
    # css strings
    "CssFormat",
    "detect",
    "is_type",
    "to_rgb",
    "to_hsl",
    "to_alpha",
    "convert",
    "format_hex",
    "format_rgb",
    "format_rgba",
    "format_hsl",
    "format_hsla",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "np_rgb_to_hsv",
    "np_hsv_to_rgb",
    "np_hsv_to_hsl",
    "np_hsl_to_hsv",
    "convert_channels",
    "np_convert_channels",
    # scales and palettes
    "LinearScale",
    "ColorPalette",
    "D3_CATEGORY10",
    "D3_CATEGORY20",
    "D3_CATEGORY20B",
    "D3_CATEGORY20C",
    "RED_TO_GREEN",
    "ORANGERED_TO_GREEN",
    # Version
    "__version__",
]

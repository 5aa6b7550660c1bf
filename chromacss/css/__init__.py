from .css_format import CssFormat, detect, is_type, to_rgb, to_hsl, to_alpha, convert
from .builders import format_alpha, format_hex, format_rgb, format_rgba, format_hsl, format_hsla

__all__ = [
    "CssFormat",
    "detect",
    "is_type",
    "to_rgb",
    "to_hsl",
    "to_alpha",
    "convert",
    "format_alpha",
    "format_hex",
    "format_rgb",
    "format_rgba",
    "format_hsl",
    "format_hsla",
]

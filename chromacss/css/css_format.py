"""
CSS color string formats.

Supported syntaxes::

    #rrggbb            HEX
    rgb(r,g,b)         RGB
    rgba(r,g,b,a)      RGBA
    hsl(h,s%,l%)       HSL
    hsla(h,s%,l%,a)    HSLA

Assumed ranges: alpha is a float in [0, 1]; RGB channels are ints in
[0, 255]; hue is an int in [0, 360] and saturation/lightness are ints in
[0, 100]. Only the prefix and the fields this module reads are checked;
this is not a general CSS validator.

Converting from a format with alpha to one without drops the alpha value.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..conversions import rgb_to_hsl, hsl_to_rgb
from ..errors import InvalidArgumentError, UnrecognizedFormatError
from ..types.color_types import ChannelTriple
from ..types.format_type import ALPHA_FIELD, ALPHA_OPAQUE
from .builders import format_hex, format_rgb, format_rgba, format_hsl, format_hsla
from .parsing import parse_hex_channels, parse_paren_channels, parse_paren_value


class CssFormat(str, Enum):
    """The CSS color syntaxes, in detection order."""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"

    @property
    def has_alpha(self) -> bool:
        return self in (CssFormat.RGBA, CssFormat.HSLA)

    def is_type_of(self, color: str) -> bool:
        """Check whether ``color`` starts like this format (case-insensitive).

        A True result does not mean the rest of the string is valid.
        """
        lower = color.strip().lower()
        required, excluded = _PREFIXES[self]
        if excluded is not None and lower.startswith(excluded):
            return False
        return lower.startswith(required)

    @classmethod
    def of(cls, color: str) -> Optional[CssFormat]:
        """The format of ``color``, or None when no syntax matches."""
        for fmt in cls:
            if fmt.is_type_of(color):
                return fmt
        return None

    def convert(self, color: str) -> str:
        """
        Re-serialize a color string of any supported format in this format.

        >>> CssFormat.HSLA.convert("rgba(255,0,0,0.5)")
        'hsla(0,100%,50%,0.5)'
        """
        return _SERIALIZERS[self](color)


# (required prefix, excluded prefix)
_PREFIXES: Dict[CssFormat, Tuple[str, Optional[str]]] = {
    CssFormat.HEX: ("#", None),
    CssFormat.RGB: ("rgb", "rgba"),
    CssFormat.RGBA: ("rgba", None),
    CssFormat.HSL: ("hsl", "hsla"),
    CssFormat.HSLA: ("hsla", None),
}


def _paren_hsl_to_rgb(color: str) -> ChannelTriple:
    return hsl_to_rgb(parse_paren_channels(color))


def _rgb_to_hsl_via(extract: Callable[[str], ChannelTriple]) -> Callable[[str], ChannelTriple]:
    return lambda color: rgb_to_hsl(extract(color))


def _opaque(color: str) -> float:
    return ALPHA_OPAQUE


def _paren_alpha(color: str) -> float:
    return parse_paren_value(color, ALPHA_FIELD)


_RGB_EXTRACTORS: Dict[CssFormat, Callable[[str], ChannelTriple]] = {
    CssFormat.HEX: parse_hex_channels,
    CssFormat.RGB: parse_paren_channels,
    CssFormat.RGBA: parse_paren_channels,
    CssFormat.HSL: _paren_hsl_to_rgb,
    CssFormat.HSLA: _paren_hsl_to_rgb,
}

_HSL_EXTRACTORS: Dict[CssFormat, Callable[[str], ChannelTriple]] = {
    CssFormat.HEX: _rgb_to_hsl_via(parse_hex_channels),
    CssFormat.RGB: _rgb_to_hsl_via(parse_paren_channels),
    CssFormat.RGBA: _rgb_to_hsl_via(parse_paren_channels),
    CssFormat.HSL: parse_paren_channels,
    CssFormat.HSLA: parse_paren_channels,
}

_ALPHA_EXTRACTORS: Dict[CssFormat, Callable[[str], float]] = {
    CssFormat.HEX: _opaque,
    CssFormat.RGB: _opaque,
    CssFormat.RGBA: _paren_alpha,
    CssFormat.HSL: _opaque,
    CssFormat.HSLA: _paren_alpha,
}

_SERIALIZERS: Dict[CssFormat, Callable[[str], str]] = {
    CssFormat.HEX: lambda color: format_hex(to_rgb(color)),
    CssFormat.RGB: lambda color: format_rgb(to_rgb(color)),
    CssFormat.RGBA: lambda color: format_rgba(to_alpha(color), to_rgb(color)),
    CssFormat.HSL: lambda color: format_hsl(to_hsl(color)),
    CssFormat.HSLA: lambda color: format_hsla(to_alpha(color), to_hsl(color)),
}


def detect(color: str) -> CssFormat:
    """
    Detect the format of a CSS color string.

    Raises:
        UnrecognizedFormatError: no supported syntax matches.
        InvalidArgumentError: ``color`` is not a string.
    """
    if not isinstance(color, str):
        raise InvalidArgumentError(f"Expected a color string, got {type(color).__name__}")
    fmt = CssFormat.of(color)
    if fmt is None:
        raise UnrecognizedFormatError(color)
    return fmt


def is_type(color: str, *formats: CssFormat) -> bool:
    """Check whether ``color`` is of any of ``formats``."""
    return any(fmt.is_type_of(color) for fmt in formats)


def to_rgb(color: str) -> ChannelTriple:
    """RGB channels of a color string of any supported format."""
    return _RGB_EXTRACTORS[detect(color)](color)


def to_hsl(color: str) -> ChannelTriple:
    """HSL channels of a color string of any supported format."""
    return _HSL_EXTRACTORS[detect(color)](color)


def to_alpha(color: str) -> float:
    """Alpha of a color string; 1.0 for formats without alpha."""
    return _ALPHA_EXTRACTORS[detect(color)](color)


def convert(target: CssFormat | str, color: str) -> str:
    """
    Convert ``color`` to the ``target`` format (a :class:`CssFormat` or its
    name, e.g. ``"hsla"``).

    Converting to HEX, RGB or HSL drops any alpha value.
    """
    try:
        fmt = CssFormat(target.lower() if isinstance(target, str) else target)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown CSS color format: {target!r}") from exc
    return fmt.convert(color)

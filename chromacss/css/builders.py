from ..conversions.channels import as_channels
from ..types.color_types import Scalar
from ..types.format_type import channel_dtype


def format_alpha(alpha: Scalar) -> str:
    """Shortest single precision text for ``alpha``: ``0.5``, ``1.0``, ``0.1``."""
    return str(channel_dtype(alpha))


def format_hex(*rgb) -> str:
    """``#rrggbb``, lowercase and zero-padded."""
    r, g, b = as_channels(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def format_rgb(*rgb) -> str:
    r, g, b = as_channels(rgb)
    return f"rgb({r},{g},{b})"


def format_rgba(alpha: Scalar, *rgb) -> str:
    r, g, b = as_channels(rgb)
    return f"rgba({r},{g},{b},{format_alpha(alpha)})"


def format_hsl(*hsl) -> str:
    h, s, l = as_channels(hsl)
    return f"hsl({h},{s}%,{l}%)"


def format_hsla(alpha: Scalar, *hsl) -> str:
    h, s, l = as_channels(hsl)
    return f"hsla({h},{s}%,{l}%,{format_alpha(alpha)})"

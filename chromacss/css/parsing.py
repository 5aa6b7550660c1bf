"""Low level field extraction for CSS color strings."""
import re
from typing import List

from ..errors import MalformedColorError
from ..types.color_types import ChannelTriple
from ..types.format_type import channel_dtype

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def paren_fields(color: str) -> List[str]:
    """
    Split the text between the first ``(`` and the first ``)`` on commas.

    >>> paren_fields("hsla(100, 100%, 50%, 0.5)")
    ['100', '100%', '50%', '0.5']
    """
    s = color.strip()
    left = s.find("(")
    right = s.find(")")
    if left < 0 or right < 0 or right < left:
        raise MalformedColorError(color, "expected a parenthesized list of values")
    return [field.strip() for field in s[left + 1:right].split(",")]


def parse_paren_value(color: str, n: int) -> float:
    """Parse the ``n``-th field inside the parentheses, ignoring a trailing ``%``."""
    fields = paren_fields(color)
    if n >= len(fields):
        raise MalformedColorError(color, f"expected at least {n + 1} values, got {len(fields)}")
    text = fields[n]
    if text.endswith("%"):
        text = text[:-1]
    if not _NUMBER.fullmatch(text):
        raise MalformedColorError(color, f"value {n} is not a number: {fields[n]!r}")
    return float(text)


def parse_paren_channels(color: str) -> ChannelTriple:
    """
    First three values of a parenthesized color, truncated toward zero.

    >>> parse_paren_channels("hsla(100, 100%, 50%, 0.5)")
    (100, 100, 50)
    """
    values = [parse_paren_value(color, i) for i in range(3)]
    try:
        r, g, b = (int(channel_dtype(v)) for v in values)
    except (ValueError, OverflowError) as exc:
        raise MalformedColorError(color, "channel values must be finite") from exc
    return r, g, b


def parse_hex_channels(color: str) -> ChannelTriple:
    """
    RGB channels of a ``#rrggbb`` string. The CSS shorthand ``#rgb`` is
    expanded by doubling each digit.
    """
    digits = color.strip()[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or not _HEX_DIGITS.fullmatch(digits):
        raise MalformedColorError(color, "expected '#' followed by 6 (or 3) hex digits")
    r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 6, 2))
    return r, g, b

from __future__ import annotations
import math
import numbers
import warnings
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
from boundednumbers.functions import cyclic_wrap

from ..css import CssFormat, convert, format_hsla, to_rgb
from ..errors import InvalidArgumentError
from ..scales import LinearScale
from ..types.color_types import Scalar
from ..types.format_type import ALPHA_OPAQUE
from ..utils import round_half_away


class ColorPalette:
    """
    An immutable, ordered set of CSS color strings (of any supported
    format) for categorical or scaled color assignment.

    Indices wrap around, so any integer, however large or negative, picks a
    color::

        palette = ColorPalette.from_list(["#000000", "#ffffff"])
        palette.color_at(3)   # '#ffffff'
        palette.color_at(-1)  # '#ffffff'
    """
    __slots__ = ('_colors', '_is_frozen')  # no new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, colors: Iterable[str], validate: bool = False) -> None:
        if isinstance(colors, str):
            raise InvalidArgumentError("Expected an iterable of color strings, got a single string")
        colors = tuple(colors)
        for color in colors:
            if not isinstance(color, str):
                raise InvalidArgumentError(f"Expected color strings, got {type(color).__name__}")
        if validate:
            for color in colors:
                to_rgb(color)
        self._colors: Tuple[str, ...] = colors
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_list(cls, colors: Iterable[str], validate: bool = False) -> ColorPalette:
        """
        Build a palette from color strings, kept in the given order.

        Args:
            colors: CSS color strings
            validate: parse every color up front, raising on the first
                unrecognized or malformed one
        """
        return cls(colors, validate=validate)

    @classmethod
    def from_hue_range(
        cls,
        start: int,
        finish: int,
        s: int,
        l: int,
        a: Scalar = ALPHA_OPAQUE,
    ) -> ColorPalette:
        """
        Build a palette of ``hsla()`` colors with hue running from ``start``
        towards ``finish``, one degree at a time. ``finish`` is excluded.

        The direction follows the bounds: ``from_hue_range(5, 3, 100, 50, 1)``
        gives hues 5 and 4.
        """
        start, finish = int(start), int(finish)
        step = 1 if start < finish else -1
        colors = [format_hsla(a, hue, s, l) for hue in range(start, finish, step)]
        if not colors:
            warnings.warn(
                f"Hue range from {start} to {finish} is empty; the palette has no colors",
                stacklevel=2,
            )
        return cls(colors)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> Tuple[str, ...]:
        return self._colors

    def size(self) -> int:
        return len(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    # ------------------ LOOKUP ------------------
    def color_at(self, n: Scalar, scale: Optional[LinearScale] = None) -> str:
        """
        Pick a color.

        Integers index directly. Other numbers are first passed through
        ``scale`` (when given) and rounded to the nearest integer, halves
        away from zero. The index is then taken modulo :meth:`size`.

        Raises:
            InvalidArgumentError: the palette is empty, or the index is not finite.
        """
        if not self._colors:
            raise InvalidArgumentError("Cannot pick a color from an empty palette")
        if scale is None and isinstance(n, numbers.Integral):
            index = int(n)
        else:
            x = n if scale is None else scale.apply(n)
            if not math.isfinite(x):
                raise InvalidArgumentError(f"Cannot pick a color at a non-finite position: {x}")
            index = round_half_away(x)
        return self._colors[cyclic_wrap(index, 0, self.size() - 1)]

    def scale_for(self, domain_min: Scalar, domain_max: Scalar) -> LinearScale:
        """A scale mapping ``[domain_min, domain_max]`` onto this palette's indices."""
        return LinearScale().set_domain(domain_min, domain_max).set_range(0, self.size() - 1)

    # ------------------ DERIVED PALETTES ------------------
    def reverse(self) -> ColorPalette:
        """A new palette with the colors in reverse order."""
        return ColorPalette(self._colors[::-1])

    def convert(self, fmt: CssFormat | str) -> ColorPalette:
        """A new palette with every color re-serialized in ``fmt``. Alpha may be dropped."""
        return ColorPalette(convert(fmt, color) for color in self._colors)

    def to_rgb_array(self) -> np.ndarray:
        """RGB channels of every color as an int64 array of shape (size, 3)."""
        return np.array([to_rgb(color) for color in self._colors], dtype=np.int64).reshape(-1, 3)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPalette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._colors)!r})"

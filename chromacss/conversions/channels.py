"""
Shared helpers for the channel conversions.

All arithmetic is carried out in single precision (``numpy.float32``) so that
results round exactly like the color strings already in circulation.
"""
from typing import Any, Sequence
import math
import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidArgumentError
from ..types.color_types import ChannelTriple, element_to_array
from ..types.format_type import channel_dtype
from ..utils import get_dimension, round_half_away, np_round_half_away

_f = channel_dtype

ZERO = _f(0)
ONE = _f(1)
TWO = _f(2)
FOUR = _f(4)
SIX = _f(6)
HALF = _f(0.5)
ONE_THIRD = _f(1) / _f(3)
ONE_SIXTH = _f(1) / _f(6)
TWO_THIRDS = _f(2) / _f(3)


def as_channels(values: Sequence[Any]) -> ChannelTriple:
    """
    Normalize varargs channel input to an int triple.

    Accepts either three positional values ``(r, g, b)`` or a single
    sequence ``((r, g, b),)``. Extra values are ignored.

    Raises:
        InvalidArgumentError: fewer than three values were supplied.
    """
    if len(values) == 1 and np.ndim(values[0]) > 0:
        values = values[0]
    if get_dimension(values) < 3:
        raise InvalidArgumentError(
            f"Expected 3 channel values, got {get_dimension(values)}"
        )
    return int(values[0]), int(values[1]), int(values[2])


def np_as_channels(values: Any) -> NDArray:
    """Return a ``(..., 3)`` array from array-like channel input."""
    arr = element_to_array(values)
    if arr.ndim == 0 or arr.shape[-1] < 3:
        raise InvalidArgumentError(
            f"Expected last dimension of at least 3 channels, got shape {arr.shape}"
        )
    return arr[..., :3]


def scale_channel(value: np.floating, factor: int) -> int:
    """Scale a unit channel to ``factor`` and round it."""
    scaled = value * _f(factor)
    if not math.isfinite(scaled):
        raise InvalidArgumentError("Channel values produce a non-finite result")
    return round_half_away(scaled)


def np_scale_channel(values: NDArray, factor: int) -> NDArray:
    scaled = values * _f(factor)
    if not np.all(np.isfinite(scaled)):
        raise InvalidArgumentError("Channel values produce a non-finite result")
    return np_round_half_away(scaled)


def hue_from_rgb(r, g, b, max_c, d):
    """Hue in [0, 1) from unit RGB, its maximum and its chroma ``d`` (non-zero)."""
    if max_c == r:
        h = (g - b) / d + (SIX if g < b else ZERO)
    elif max_c == g:
        h = (b - r) / d + TWO
    else:
        h = (r - g) / d + FOUR
    return h / SIX


def np_hue_from_rgb(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, d: NDArray) -> NDArray:
    """Vectorized :func:`hue_from_rgb`. Entries where ``d == 0`` are set to 0."""
    with np.errstate(divide='ignore', invalid='ignore'):
        h_r = (g - b) / d + np.where(g < b, SIX, ZERO)
        h_g = (b - r) / d + TWO
        h_b = (r - g) / d + FOUR
    h = np.where(max_c == r, h_r, np.where(max_c == g, h_g, h_b)) / SIX
    return np.where(d == 0, ZERO, h).astype(_f)

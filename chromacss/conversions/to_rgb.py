import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import cyclic_wrap_float as np_cyclic_wrap_float

from ..types.color_types import ChannelTriple
from ..types.format_type import HUE_360, PERCENT_MAX, CHANNEL_MAX, channel_dtype
from .channels import (
    as_channels, np_as_channels, scale_channel, np_scale_channel,
    ZERO, ONE, TWO, SIX, HALF, ONE_THIRD, ONE_SIXTH, TWO_THIRDS,
)

_f = channel_dtype

## HSL to RGB conversions

def _hue_to_channel(p, q, t):
    t = cyclic_wrap_float(t, 0, 1)
    if t < ONE_SIXTH:
        return p + (q - p) * SIX * t
    if t < HALF:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * SIX
    return p


def hsl_to_rgb(*hsl) -> ChannelTriple:
    """
    Convert HSL to RGB.

    A saturation of 0 yields ``(0, 0, 0)`` whatever the lightness, not the
    usual ``r = g = b = l`` grey.

    Args:
        *hsl: hue in [0, 360], saturation and lightness in [0, 100], or a
            single sequence of them. Extra values are ignored.

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]

    Raises:
        InvalidArgumentError: fewer than three channels were given.
    """
    h8, s8, l8 = as_channels(hsl)
    h = _f(h8) / _f(HUE_360)
    s = _f(s8) / _f(PERCENT_MAX)
    l = _f(l8) / _f(PERCENT_MAX)
    if s == 0:
        r = g = b = ZERO
    else:
        q = l * (ONE + s) if l < HALF else l + s - l * s
        p = TWO * l - q
        r = _hue_to_channel(p, q, h + ONE_THIRD)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - ONE_THIRD)
    return (
        scale_channel(r, CHANNEL_MAX),
        scale_channel(g, CHANNEL_MAX),
        scale_channel(b, CHANNEL_MAX),
    )


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np_cyclic_wrap_float(t, 0, 1).astype(_f)
    return np.select(
        [t < ONE_SIXTH, t < HALF, t < TWO_THIRDS],
        [p + (q - p) * SIX * t, q, p + (q - p) * (TWO_THIRDS - t) * SIX],
        default=p,
    ).astype(_f)


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array-like of shape (..., 3)

    Returns:
        int64 array of shape (..., 3): (r, g, b) in [0, 255]
    """
    hsl = np_as_channels(hsl)
    h = hsl[..., 0].astype(_f) / _f(HUE_360)
    s = hsl[..., 1].astype(_f) / _f(PERCENT_MAX)
    l = hsl[..., 2].astype(_f) / _f(PERCENT_MAX)

    q = np.where(l < HALF, l * (ONE + s), l + s - l * s).astype(_f)
    p = (TWO * l - q).astype(_f)
    achromatic = s == 0

    channels = [
        np.where(achromatic, ZERO, _np_hue_to_channel(p, q, offset))
        for offset in (h + ONE_THIRD, h, h - ONE_THIRD)
    ]
    return np.stack([np_scale_channel(c, CHANNEL_MAX) for c in channels], axis=-1)

## HSV to RGB conversions

def _hsv_sectors(v, p, q, t):
    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )


def hsv_to_rgb(*hsv) -> ChannelTriple:
    """
    Convert HSV to RGB.

    Args:
        *hsv: hue in [0, 360], saturation and value in [0, 100], or a single
            sequence of them. Extra values are ignored.

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h8, s8, v8 = as_channels(hsv)
    h = _f(h8) / _f(HUE_360)
    s = _f(s8) / _f(PERCENT_MAX)
    v = _f(v8) / _f(PERCENT_MAX)
    i = math.floor(h * SIX)
    f = h * SIX - _f(i)
    p = v * (ONE - s)
    q = v * (ONE - f * s)
    t = v * (ONE - (ONE - f) * s)
    r, g, b = _hsv_sectors(v, p, q, t)[i % 6]
    return (
        scale_channel(r, CHANNEL_MAX),
        scale_channel(g, CHANNEL_MAX),
        scale_channel(b, CHANNEL_MAX),
    )


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        hsv: array-like of shape (..., 3)

    Returns:
        int64 array of shape (..., 3): (r, g, b) in [0, 255]
    """
    hsv = np_as_channels(hsv)
    h = hsv[..., 0].astype(_f) / _f(HUE_360)
    s = hsv[..., 1].astype(_f) / _f(PERCENT_MAX)
    v = hsv[..., 2].astype(_f) / _f(PERCENT_MAX)
    i = np.floor(h * SIX)
    f = (h * SIX - i).astype(_f)
    p = v * (ONE - s)
    q = v * (ONE - f * s)
    t = v * (ONE - (ONE - f) * s)

    sector = np.mod(i.astype(np.int64), 6)
    masks = [sector == k for k in range(6)]
    rgb = [
        np.select(masks, [choice[c] for choice in _hsv_sectors(v, p, q, t)])
        for c in range(3)
    ]
    return np.stack([np_scale_channel(c.astype(_f), CHANNEL_MAX) for c in rgb], axis=-1)

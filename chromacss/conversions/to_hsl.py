import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ChannelTriple
from ..types.format_type import HUE_360, PERCENT_MAX, CHANNEL_MAX, channel_dtype
from .channels import (
    as_channels, np_as_channels, scale_channel, np_scale_channel,
    hue_from_rgb, np_hue_from_rgb, ZERO, TWO, HALF,
)
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb

_f = channel_dtype


def rgb_to_hsl(*rgb) -> ChannelTriple:
    """
    Convert RGB to HSL.

    Args:
        *rgb: ``r, g, b`` in [0, 255], or a single sequence of them.
            Extra values are ignored.

    Returns:
        Tuple[int, int, int]: hue in [0, 360], saturation and lightness in [0, 100]

    Raises:
        InvalidArgumentError: fewer than three channels were given.
    """
    r8, g8, b8 = as_channels(rgb)
    r = _f(r8) / _f(CHANNEL_MAX)
    g = _f(g8) / _f(CHANNEL_MAX)
    b = _f(b8) / _f(CHANNEL_MAX)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / TWO
    if max_c == min_c:
        h = s = ZERO
    else:
        d = max_c - min_c
        s = d / (TWO - max_c - min_c) if l > HALF else d / (max_c + min_c)
        h = hue_from_rgb(r, g, b, max_c, d)
    return (
        scale_channel(h, HUE_360),
        scale_channel(s, PERCENT_MAX),
        scale_channel(l, PERCENT_MAX),
    )


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        int64 array of shape (..., 3): (hue, saturation, lightness)
    """
    unit = np_as_channels(rgb).astype(_f) / _f(CHANNEL_MAX)
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    l = (max_c + min_c) / TWO
    d = max_c - min_c

    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.where(l > HALF, d / (TWO - max_c - min_c), d / (max_c + min_c))
    s = np.where(d == 0, ZERO, s).astype(_f)
    h = np_hue_from_rgb(r, g, b, max_c, d)

    return np.stack([
        np_scale_channel(h, HUE_360),
        np_scale_channel(s, PERCENT_MAX),
        np_scale_channel(l, PERCENT_MAX),
    ], axis=-1)


def hsv_to_hsl(*hsv) -> ChannelTriple:
    """Convert HSV to HSL by way of RGB."""
    return rgb_to_hsl(hsv_to_rgb(*hsv))


def np_hsv_to_hsl(hsv: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL by way of RGB."""
    return np_rgb_to_hsl(np_hsv_to_rgb(hsv))

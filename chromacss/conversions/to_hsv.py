import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ChannelTriple
from ..types.format_type import HUE_360, PERCENT_MAX, CHANNEL_MAX, channel_dtype
from .channels import (
    as_channels, np_as_channels, scale_channel, np_scale_channel,
    hue_from_rgb, np_hue_from_rgb, ZERO,
)
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb

_f = channel_dtype


def rgb_to_hsv(*rgb) -> ChannelTriple:
    """
    Convert RGB to HSV.

    Args:
        *rgb: ``r, g, b`` in [0, 255], or a single sequence of them.

    Returns:
        Tuple[int, int, int]: hue in [0, 360], saturation and value in [0, 100]
    """
    r8, g8, b8 = as_channels(rgb)
    r = _f(r8) / _f(CHANNEL_MAX)
    g = _f(g8) / _f(CHANNEL_MAX)
    b = _f(b8) / _f(CHANNEL_MAX)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    v = max_c
    d = max_c - min_c
    s = ZERO if max_c == 0 else d / max_c
    h = ZERO if max_c == min_c else hue_from_rgb(r, g, b, max_c, d)
    return (
        scale_channel(h, HUE_360),
        scale_channel(s, PERCENT_MAX),
        scale_channel(v, PERCENT_MAX),
    )


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        int64 array of shape (..., 3): (hue, saturation, value)
    """
    unit = np_as_channels(rgb).astype(_f) / _f(CHANNEL_MAX)
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    d = max_c - min_c

    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.where(max_c == 0, ZERO, d / max_c).astype(_f)
    h = np_hue_from_rgb(r, g, b, max_c, d)

    return np.stack([
        np_scale_channel(h, HUE_360),
        np_scale_channel(s, PERCENT_MAX),
        np_scale_channel(max_c, PERCENT_MAX),
    ], axis=-1)


def hsl_to_hsv(*hsl) -> ChannelTriple:
    """Convert HSL to HSV by way of RGB."""
    return rgb_to_hsv(hsl_to_rgb(*hsl))


def np_hsl_to_hsv(hsl: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV by way of RGB."""
    return np_rgb_to_hsv(np_hsl_to_rgb(hsl))

import numpy as np
from typing import Any, Callable, Dict, Tuple

from ..errors import InvalidArgumentError
from ..types.color_types import ChannelTriple, ColorSpace, COLOR_SPACES

from .channels import as_channels, np_as_channels
from .to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb
from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, np_hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv, np_hsl_to_hsv

CONVERT_SCALAR: Dict[Tuple[str, str], Callable[..., ChannelTriple]] = {
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
    ("rgb", "hsv"): rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_rgb,
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_rgb,
    ("rgb", "hsv"): np_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_rgb,
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
}


def _spaces(from_space: ColorSpace, to_space: ColorSpace) -> Tuple[str, str]:
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if space not in COLOR_SPACES:
            raise InvalidArgumentError(f"Unknown color space: {space}")
    return fs, ts


def convert_channels(
    color: Any,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ChannelTriple:
    """
    Convert one channel triple between ``"rgb"``, ``"hsl"`` and ``"hsv"``.

    Same-space conversions return the (normalized) triple unchanged.
    """
    fs, ts = _spaces(from_space, to_space)
    channels = as_channels((color,))
    if fs == ts:
        return channels
    return CONVERT_SCALAR[(fs, ts)](channels)


def np_convert_channels(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert_channels` over an array of shape (..., 3)."""
    fs, ts = _spaces(from_space, to_space)
    if fs == ts:
        return np_as_channels(color)
    return CONVERT_NUMPY[(fs, ts)](color)

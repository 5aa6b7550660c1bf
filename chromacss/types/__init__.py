from .format_type import (
    ALPHA_FIELD,
    HUE_360,
    PERCENT_MAX,
    CHANNEL_MAX,
    ALPHA_OPAQUE,
    channel_dtype,
)
from .color_types import Scalar, ChannelTriple, ColorSpace, COLOR_SPACES

__all__ = [
    "ALPHA_FIELD",
    "HUE_360",
    "PERCENT_MAX",
    "CHANNEL_MAX",
    "ALPHA_OPAQUE",
    "channel_dtype",
    "Scalar",
    "ChannelTriple",
    "ColorSpace",
    "COLOR_SPACES",
]

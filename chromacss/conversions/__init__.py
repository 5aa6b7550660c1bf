"""
chromacss Color Space Conversions
=================================

Conversions between integer RGB, HSL and HSV channel triples, with scalar
functions for single colors and vectorized (numpy) functions for batches.

Channel ranges
--------------
- RGB: each channel an int in [0, 255]
- HSL / HSV: hue an int in [0, 360], the other two channels ints in [0, 100]

Values are not clamped. Out-of-range input gives consistent, if meaningless,
output.

Conversion Functions
--------------------
    rgb_to_hsl(r, g, b)      np_rgb_to_hsl(rgb)
    hsl_to_rgb(h, s, l)      np_hsl_to_rgb(hsl)
    rgb_to_hsv(r, g, b)      np_rgb_to_hsv(rgb)
    hsv_to_rgb(h, s, v)      np_hsv_to_rgb(hsv)
    hsv_to_hsl(h, s, v)      np_hsv_to_hsl(hsv)
    hsl_to_hsv(h, s, l)      np_hsl_to_hsv(hsl)

Scalar functions also accept a single sequence, e.g. ``rgb_to_hsl((255, 0, 0))``.
Vectorized functions take arrays of shape (..., 3) and return int64 arrays.

High-Level API
--------------
    convert_channels(color, from_space, to_space)
    np_convert_channels(color, from_space, to_space)

Examples
--------
>>> from chromacss.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0)
(0, 100, 50)
>>> hsl_to_rgb(0, 100, 50)
(255, 0, 0)
"""

from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, np_hsv_to_hsl
from .to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv, np_hsl_to_hsv
from .wrapper import convert_channels, np_convert_channels

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',

    # RGB → HSV
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # High-level API
    'convert_channels',
    'np_convert_channels',
]

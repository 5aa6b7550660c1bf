import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Scalar


def round_half_away(value: Scalar) -> int:
    """Round to the nearest integer, ties away from zero (``2.5 -> 3``, ``-2.5 -> -3``)."""
    value = float(value)
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def np_round_half_away(values: NDArray) -> NDArray:
    """Vectorized :func:`round_half_away`, returns an int64 array."""
    values = np.asarray(values, dtype=np.float64)
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    whole = np.where(magnitude - whole >= 0.5, whole + 1, whole)
    return (np.sign(values) * whole).astype(np.int64)

from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ChannelTriple = Tuple[int, int, int]
ColorSpace = str  # "rgb", "hsl" or "hsv"
COLOR_SPACES = ("rgb", "hsl", "hsv")


def element_to_array(element: Union[Sequence[Scalar], ndarray]) -> np.ndarray:
    """
    Convert a channel triple (or a stack of them) to a numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.array(element)


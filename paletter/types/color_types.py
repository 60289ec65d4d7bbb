from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Channels = Tuple[float, float, float]
ChannelInput = Union[Tuple[Scalar, Scalar, Scalar], ndarray]


class ColorSpace(str, Enum):
    SRGB = "srgb"
    HSL = "hsl"
    LCH = "lch"


# Component names, in channel order, for each space
SPACE_COMPONENTS: dict[ColorSpace, Tuple[str, str, str]] = {
    ColorSpace.SRGB: ("r", "g", "b"),
    ColorSpace.HSL: ("h", "s", "l"),
    ColorSpace.LCH: ("l", "c", "h"),
}



def element_to_array(element: ChannelInput) -> np.ndarray:
    """
    Convert a channel triple to a float numpy array.

    Args:
        element: Tuple of three numbers, or already an ndarray

    Returns:
        numpy array of dtype float64
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.array(element, dtype=np.float64)

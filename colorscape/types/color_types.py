from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTuple = Tuple[float, float, float, float]
ColorSpace = Literal["rgba", "hsba"]
HUE_SPACES = {"hsba"}

HUE_360 = 360.0
HUE_SECTOR = 60.0
BYTE_MAX = 255


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of components, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES

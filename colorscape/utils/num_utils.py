"""
Scalar and vectorized numeric helpers shared by the color types and the
conversion functions.

Every helper clamps its interpolation coefficient into ``[0, 1]``, so a
lerp never extrapolates past its endpoints.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Union

from boundednumbers import clamp

from ..types.color_types import HUE_360

ArrayLike = Union[float, NDArray]


def clamp01(x: float) -> float:
    """Clamp ``x`` into the inclusive range ``[0, 1]``."""
    return float(clamp(x, 0.0, 1.0))


def lerp(from_: float, to: float, t: float) -> float:
    """Linear interpolation between ``from_`` and ``to`` with ``t`` clamped to ``[0, 1]``."""
    return from_ + (to - from_) * clamp01(t)


def lerp_angle(a: float, b: float, t: float) -> float:
    """
    Interpolate between two angles in degrees along the shorter arc.

    Args:
        a: Start angle in degrees
        b: End angle in degrees
        t: Interpolation coefficient, clamped to [0, 1]

    Returns:
        Interpolated angle in [0, 360)

    Example:
        >>> lerp_angle(350.0, 10.0, 0.5)
        0.0
    """
    delta = (b - a) % HUE_360
    if delta > 180.0:
        delta -= HUE_360
    result = a + delta * clamp01(t)
    if result < 0.0:
        result = HUE_360 - (-result % HUE_360)
    return result % HUE_360


def np_clamp01(x: ArrayLike) -> NDArray:
    """Vectorized: clamp values into ``[0, 1]``."""
    return np.clip(np.asarray(x, dtype=float), 0.0, 1.0)


def np_lerp(from_: ArrayLike, to: ArrayLike, t: ArrayLike) -> NDArray:
    """Vectorized: linear interpolation with broadcasting over all arguments."""
    from_ = np.asarray(from_, dtype=float)
    to = np.asarray(to, dtype=float)
    return from_ + (to - from_) * np_clamp01(t)


def np_lerp_angle(a: ArrayLike, b: ArrayLike, t: ArrayLike) -> NDArray:
    """
    Vectorized: shortest-arc interpolation of angles in degrees.

    Args:
        a, b: Start and end angles in degrees (scalars or arrays)
        t: Interpolation coefficients (broadcast against a and b)

    Returns:
        Interpolated angles in [0, 360)
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    delta = np.mod(b - a, HUE_360)
    delta = np.where(delta > 180.0, delta - HUE_360, delta)
    result = a + delta * np_clamp01(t)
    result = np.where(result < 0.0, HUE_360 - np.mod(-result, HUE_360), result)
    return np.mod(result, HUE_360)

import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.color_types import HUE_360, HUE_SECTOR
from ..utils.num_utils import clamp01


def hsb_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSB components to unit RGB.

    Input:
        h ∈ [0, 1]   fraction of a full turn
        s, v ∈ [0, 1]

    Output:
        r, g, b ∈ [0, 1], each clamped

    A hue beyond a full turn has no sector and yields black.
    """
    hue = h * HUE_360
    max_c = v
    delta = v * s
    step = delta / HUE_SECTOR
    min_c = v - delta

    if s == 0.0:
        r = g = b = v
    elif hue < 60.0:
        r, g, b = max_c, hue * step + min_c, min_c
    elif hue < 120.0:
        r, g, b = -(hue - 120.0) * step + min_c, max_c, min_c
    elif hue < 180.0:
        r, g, b = min_c, max_c, (hue - 120.0) * step + min_c
    elif hue < 240.0:
        r, g, b = min_c, -(hue - 240.0) * step + min_c, max_c
    elif hue < 300.0:
        r, g, b = (hue - 240.0) * step + min_c, min_c, max_c
    elif hue <= HUE_360:
        r, g, b = max_c, min_c, -(hue - HUE_360) * step + min_c
    else:
        r = g = b = 0.0

    return clamp01(r), clamp01(g), clamp01(b)


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSB to RGB conversion.

    Args:
        h: Hue as a fraction of a full turn
        s, v: Saturation and brightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3), clamped to [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    hue = np.broadcast_to(h * HUE_360, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    max_c = v
    delta = v * s
    step = delta / HUE_SECTOR
    min_c = v - delta

    sectors = [
        hue < 60.0,
        hue < 120.0,
        hue < 180.0,
        hue < 240.0,
        hue < 300.0,
        hue <= HUE_360,
    ]
    r = np.select(sectors, [
        max_c,
        -(hue - 120.0) * step + min_c,
        min_c,
        min_c,
        (hue - 240.0) * step + min_c,
        max_c,
    ], default=0.0)
    g = np.select(sectors, [
        hue * step + min_c,
        max_c,
        max_c,
        -(hue - 240.0) * step + min_c,
        min_c,
        min_c,
    ], default=0.0)
    b = np.select(sectors, [
        min_c,
        min_c,
        (hue - 120.0) * step + min_c,
        max_c,
        max_c,
        -(hue - HUE_360) * step + min_c,
    ], default=0.0)

    # Achromatic
    grey = s == 0.0
    rgb = np.stack([
        np.where(grey, v, r),
        np.where(grey, v, g),
        np.where(grey, v, b),
    ], axis=-1)
    return np.clip(rgb, 0.0, 1.0)

import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.color_types import HUE_360, HUE_SECTOR


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB components to HSB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 1)   fraction of a full turn
        s ∈ [0, 1]
        b ∈ [0, 1]

    Black (max <= 0) maps to (0, 0, 0) and grey (max == min) keeps hue 0,
    since neither has a defined hue.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if max_c <= 0.0:
        return 0.0, 0.0, 0.0

    hue = 0.0
    if max_c > min_c:
        if g == max_c:
            hue = (b - r) / delta * HUE_SECTOR + 120.0
        elif b == max_c:
            hue = (r - g) / delta * HUE_SECTOR + 240.0
        elif b > g:
            hue = (g - b) / delta * HUE_SECTOR + HUE_360
        else:
            hue = (g - b) / delta * HUE_SECTOR

        if hue < 0.0:
            hue += HUE_360

    return hue / HUE_360, delta / max_c, max_c


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSB conversion.

    Args:
        r, g, b: array-like or scalar, [0,1] RGB

    Returns:
        hsb: array of shape (..., 3): (hue [0,1), saturation [0,1], brightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    visible = max_c > 0.0
    chromatic = visible & (max_c > min_c)
    safe_delta = np.where(chromatic, delta, 1.0)

    hue = np.select(
        [~chromatic, g == max_c, b == max_c, b > g],
        [
            0.0,
            (b - r) / safe_delta * HUE_SECTOR + 120.0,
            (r - g) / safe_delta * HUE_SECTOR + 240.0,
            (g - b) / safe_delta * HUE_SECTOR + HUE_360,
        ],
        default=(g - b) / safe_delta * HUE_SECTOR,
    )
    hue = np.where(hue < 0.0, hue + HUE_360, hue) / HUE_360

    S = np.zeros(out_shape, dtype=float)
    S[visible] = delta[visible] / max_c[visible]
    V = np.where(visible, max_c, 0.0)

    return np.stack([hue, S, V], axis=-1)

"""
Stepped gradients between two colors.

Colors are sampled at evenly spaced coefficients ``t = i / (steps - 1)``
using the interpolation of the start color's space, so an HSB gradient
travels the shorter way around the hue circle.
"""
from __future__ import annotations
from typing import List, Sequence

import numpy as np
from numpy import ndarray as NDArray

from .colors import ColorBase, HSBColor
from .types.color_types import HUE_360
from .utils.num_utils import np_lerp, np_lerp_angle


def _coefficients(steps: int) -> NDArray:
    if steps < 2:
        raise ValueError(f"A gradient needs at least 2 steps, got {steps}")
    return np.linspace(0.0, 1.0, steps)


def gradient_1d(start: ColorBase, end: ColorBase, steps: int) -> List[ColorBase]:
    """
    Sample ``steps`` colors from ``start`` to ``end`` inclusive.

    Args:
        start: First color; its class decides the interpolation space
        end: Last color, converted to the start color's space if needed
        steps: Number of colors, at least 2

    Returns:
        List of colors of the same class as ``start``
    """
    cls = type(start)
    end = end.convert(start.mode)
    return [cls.lerp(start, end, float(t)) for t in _coefficients(steps)]


def _np_hsb_gradient(c1: HSBColor, c2: HSBColor, u: NDArray) -> NDArray:
    if c1.brightness == 0.0:
        hue = np.full_like(u, c2.hue)
        saturation = np.full_like(u, c2.saturation)
    elif c2.brightness == 0.0:
        hue = np.full_like(u, c1.hue)
        saturation = np.full_like(u, c1.saturation)
    else:
        if c1.saturation == 0.0:
            hue = np.full_like(u, c2.hue)
        elif c2.saturation == 0.0:
            hue = np.full_like(u, c1.hue)
        else:
            hue = np_lerp_angle(c1.hue * HUE_360, c2.hue * HUE_360, u) / HUE_360
        saturation = np_lerp(c1.saturation, c2.saturation, u)

    return np.stack([
        hue,
        saturation,
        np_lerp(c1.brightness, c2.brightness, u),
        np_lerp(c1.alpha, c2.alpha, u),
    ], axis=-1)


def np_gradient_1d(start: ColorBase, end: ColorBase, steps: int) -> NDArray:
    """
    Vectorized :func:`gradient_1d`.

    Returns:
        Float array of shape (steps, 4) in the start color's space
    """
    u = _coefficients(steps)
    end = end.convert(start.mode)
    if isinstance(start, HSBColor):
        return _np_hsb_gradient(start, end, u)
    return np_lerp(
        np.asarray(start.value, dtype=float),
        np.asarray(end.value, dtype=float),
        u[:, None],
    )


def to_html_list(colors: Sequence[ColorBase], with_alpha: bool = False) -> List[str]:
    """Format each color as an HTML hex string."""
    return [color.to_html(with_alpha) for color in colors]

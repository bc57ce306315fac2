"""
Colorscape Color Space Conversions
==================================

Conversion utilities between RGBA and HSBA, with scalar and vectorized
(numpy) implementations.

Conversion Functions
-------------------

RGB → HSB:
    unit_rgb_to_hsb(r, g, b)
        Scalar RGB to HSB conversion, hue as a fraction of a turn
    np_unit_rgb_to_hsb(r, g, b)
        Vectorized RGB to HSB conversion

HSB → RGB:
    hsb_to_unit_rgb(h, s, b)
        Scalar HSB to RGB conversion, channels clamped to [0, 1]
    np_hsb_to_unit_rgb(h, s, b)
        Vectorized HSB to RGB conversion

HTML:
    unit_rgba_to_html(rgba, with_alpha=False)
        ``#rrggbb`` / ``#rrggbbaa`` hex string, no clamping

High-Level API
-------------
    convert(color, from_space, to_space)
        4-tuple converter between "rgba" and "hsba"
    np_convert(color, from_space, to_space)
        Vectorized converter over (..., 4) arrays

Examples
--------
>>> from colorscape.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb
>>> h, s, b = unit_rgb_to_hsb(1.0, 0.5, 0.0)
>>> r, g, b = hsb_to_unit_rgb(h, s, b)
>>>
>>> import numpy as np
>>> from colorscape.conversions import np_convert
>>> rgba = np.array([[1.0, 0.5, 0.0, 1.0], [0.0, 1.0, 0.5, 0.5]])
>>> hsba = np_convert(rgba, "rgba", "hsba")
"""

from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb
from .to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb
from .html import unit_rgba_to_html, channel_to_hex
from .wrapper import convert, np_convert, SUPPORTED_SPACES

__all__ = [
    # RGB → HSB
    'unit_rgb_to_hsb',
    'np_unit_rgb_to_hsb',

    # HSB → RGB
    'hsb_to_unit_rgb',
    'np_hsb_to_unit_rgb',

    # HTML
    'unit_rgba_to_html',
    'channel_to_hex',

    # High-level API
    'convert',
    'np_convert',
    'SUPPORTED_SPACES',
]

"""Colorscape: RGBA/HSBA color values with hue-aware interpolation."""

from .colors import ColorBase, RGBColor, HSBColor, color_convert, convert_color
from .conversions import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
    unit_rgba_to_html,
    convert,
    np_convert,
)
from .utils.num_utils import (
    clamp01,
    lerp,
    lerp_angle,
    np_clamp01,
    np_lerp,
    np_lerp_angle,
)
from .gradient import gradient_1d, np_gradient_1d, to_html_list

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "RGBColor",
    "HSBColor",
    "color_convert",
    "convert_color",
    # conversions
    "unit_rgb_to_hsb",
    "hsb_to_unit_rgb",
    "np_unit_rgb_to_hsb",
    "np_hsb_to_unit_rgb",
    "unit_rgba_to_html",
    "convert",
    "np_convert",
    # numeric utilities
    "clamp01",
    "lerp",
    "lerp_angle",
    "np_clamp01",
    "np_lerp",
    "np_lerp_angle",
    # gradients
    "gradient_1d",
    "np_gradient_1d",
    "to_html_list",
    # version
    "__version__",
]

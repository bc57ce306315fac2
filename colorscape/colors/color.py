from __future__ import annotations
from typing import Dict
from .color_base import ColorBase
from .rgb import RGBColor
from .hsb import HSBColor
from ..conversions import convert
from ..types.color_types import ColorSpace

unified_space_to_class: Dict[str, type[ColorBase]] = {
    RGBColor.mode: RGBColor,
    HSBColor.mode: HSBColor,
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    Args:
        to_space: Target color space ("rgba" or "hsba"). Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = to_space or self.mode
    cls = get_color_class(to_space)
    if cls is type(self):
        return self
    return cls.from_value(convert(self.value, self.mode, cls.mode))


def convert_color(value, color_space: str) -> ColorBase:
    """Coerce a ColorBase or a 4-tuple into the class registered for ``color_space``."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_space)
    return color_class.from_value(tuple(value))


ColorBase.convert = color_convert

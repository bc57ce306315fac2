"""
Colorscape Color Classes
========================

Immutable RGBA and HSBA color values.

Features
--------
- Immutable color instances (assignment raises AttributeError)
- Components stored verbatim, never clamped on construction
- ``with_*`` builders returning a copy with one component replaced
- Conversion between spaces via ``to_hsb``/``to_rgb`` or ``convert``
- Hue-aware interpolation via ``HSBColor.lerp``

Usage
-----
>>> from colorscape.colors import RGBColor, HSBColor
>>>
>>> red = RGBColor(1.0, 0.0, 0.0, 1.0)
>>> red.to_html()
'#ff0000'
>>> red.to_hsb()
HSBColor(hue=0.0, saturation=1.0, brightness=1.0, alpha=1.0)
>>>
>>> translucent = red.with_alpha(0.5)
>>> translucent.to_html(with_alpha=True)
'#ff00007f'

Color Classes
-------------
    - RGBColor: red, green, blue, alpha
    - HSBColor: hue (fraction of a turn), saturation, brightness, alpha
"""

from .color_base import ColorBase
from .rgb import RGBColor
from .hsb import HSBColor
from .color import color_convert, convert_color, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'RGBColor',
    'HSBColor',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]

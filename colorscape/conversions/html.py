import math
from typing import Sequence

from ..types.color_types import BYTE_MAX


def channel_to_hex(component: float) -> str:
    """
    Format one unit component as a hex byte.

    The byte is ``floor(component * 255)`` with no clamping, so values
    outside [0, 1] produce segments such as ``"-1a"`` or ``"100"``.
    """
    return format(math.floor(component * BYTE_MAX), "02x")


def unit_rgba_to_html(rgba: Sequence[float], with_alpha: bool = False) -> str:
    """
    Format unit RGBA components as an HTML hex color.

    Args:
        rgba: (r, g, b, a) components in [0, 1]
        with_alpha: Append the alpha byte (``#rrggbbaa``)

    Returns:
        ``#rrggbb`` or ``#rrggbbaa`` in lowercase
    """
    r, g, b, a = rgba
    channels = (r, g, b, a) if with_alpha else (r, g, b)
    return "#" + "".join(channel_to_hex(c) for c in channels)

from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple
from ..conversions import unit_rgba_to_html
from ..types.color_types import ColorSpace, Scalar
from ..utils.num_utils import lerp
from .color_base import ColorBase, warn_renamed

if TYPE_CHECKING:
    from .hsb import HSBColor


class RGBColor(ColorBase):
    """A color in RGBA space, every channel nominally in [0, 1]."""
    __slots__ = ()

    mode:     ClassVar[ColorSpace] = "rgba"
    channels: ClassVar[Tuple[str, str, str, str]] = ("red", "green", "blue", "alpha")

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__(red, green, blue, alpha)

    @property
    def red(self) -> Scalar:
        return self._value[0]

    @property
    def green(self) -> Scalar:
        return self._value[1]

    @property
    def blue(self) -> Scalar:
        return self._value[2]

    def with_red(self, red: Scalar) -> RGBColor:
        return self._replace(0, red)

    def with_green(self, green: Scalar) -> RGBColor:
        return self._replace(1, green)

    def with_blue(self, blue: Scalar) -> RGBColor:
        return self._replace(2, blue)

    def to_hsb(self) -> HSBColor:
        from .hsb import HSBColor  # local import to avoid cycles
        return HSBColor.from_rgb(self)

    def to_html(self, with_alpha: bool = False) -> str:
        """
        Format as ``#rrggbb`` (or ``#rrggbbaa`` with alpha).

        Channels are not clamped first; keeping them in [0, 1] is up to
        the caller.
        """
        return unit_rgba_to_html(self._value, with_alpha)

    def toHSB(self) -> HSBColor:
        warn_renamed("toHSB", "to_hsb")
        return self.to_hsb()

    @staticmethod
    def lerp(c1: RGBColor, c2: RGBColor, t: float) -> RGBColor:
        """Interpolate every channel independently, ``t`` clamped to [0, 1]."""
        return RGBColor(
            lerp(c1.red, c2.red, t),
            lerp(c1.green, c2.green, t),
            lerp(c1.blue, c2.blue, t),
            lerp(c1.alpha, c2.alpha, t),
        )

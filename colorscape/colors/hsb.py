from __future__ import annotations
from typing import ClassVar, Tuple
from ..conversions import unit_rgb_to_hsb, hsb_to_unit_rgb
from ..types.color_types import ColorSpace, Scalar, HUE_360
from ..utils.num_utils import lerp, lerp_angle
from .color_base import ColorBase, warn_renamed
from .rgb import RGBColor


class HSBColor(ColorBase):
    """
    A color in HSBA space.

    ``hue`` is a fraction of a full turn in [0, 1]; saturation, brightness
    and alpha are in [0, 1]. Brightness is what HSV calls "value".
    """
    __slots__ = ()

    mode:     ClassVar[ColorSpace] = "hsba"
    channels: ClassVar[Tuple[str, str, str, str]] = ("hue", "saturation", "brightness", "alpha")

    def __init__(self, hue: Scalar, saturation: Scalar, brightness: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__(hue, saturation, brightness, alpha)

    @property
    def hue(self) -> Scalar:
        return self._value[0]

    @property
    def saturation(self) -> Scalar:
        return self._value[1]

    @property
    def brightness(self) -> Scalar:
        return self._value[2]

    def with_hue(self, hue: Scalar) -> HSBColor:
        return self._replace(0, hue)

    def with_saturation(self, saturation: Scalar) -> HSBColor:
        return self._replace(1, saturation)

    def with_brightness(self, brightness: Scalar) -> HSBColor:
        return self._replace(2, brightness)

    @classmethod
    def from_rgb(cls, color: RGBColor) -> HSBColor:
        """Convert an RGBColor; black comes back as hue 0, saturation 0."""
        return cls(*unit_rgb_to_hsb(color.red, color.green, color.blue), color.alpha)

    def to_rgb(self) -> RGBColor:
        return RGBColor(*hsb_to_unit_rgb(self.hue, self.saturation, self.brightness), self.alpha)

    def to_html(self, with_alpha: bool = False) -> str:
        return self.to_rgb().to_html(with_alpha)

    @classmethod
    def fromRGB(cls, color: RGBColor) -> HSBColor:
        warn_renamed("fromRGB", "from_rgb")
        return cls.from_rgb(color)

    def toRGB(self) -> RGBColor:
        warn_renamed("toRGB", "to_rgb")
        return self.to_rgb()

    @staticmethod
    def lerp(c1: HSBColor, c2: HSBColor, t: float) -> HSBColor:
        """
        Interpolate two HSB colors, hue along the shorter arc.

        Black has no meaningful hue or saturation and grey has no meaningful
        hue, so those are taken from the other color instead of blended:

        - c1 black: hue and saturation of c2
        - c2 black: hue and saturation of c1
        - c1 grey: hue of c2, saturation interpolated
        - c2 grey: hue of c1, saturation interpolated

        Brightness and alpha are always interpolated linearly.
        """
        if c1.brightness == 0.0:
            hue, saturation = c2.hue, c2.saturation
        elif c2.brightness == 0.0:
            hue, saturation = c1.hue, c1.saturation
        else:
            if c1.saturation == 0.0:
                hue = c2.hue
            elif c2.saturation == 0.0:
                hue = c1.hue
            else:
                hue = lerp_angle(c1.hue * HUE_360, c2.hue * HUE_360, t) / HUE_360
            saturation = lerp(c1.saturation, c2.saturation, t)

        return HSBColor(
            hue,
            saturation,
            lerp(c1.brightness, c2.brightness, t),
            lerp(c1.alpha, c2.alpha, t),
        )

from __future__ import annotations
import warnings
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple
from ..types.color_types import ColorSpace, ColorTuple, Scalar, is_hue_space


def warn_renamed(old: str, new: str) -> None:
    """Emit the DeprecationWarning shared by the camelCase aliases."""
    warnings.warn(
        f"{old} is deprecated. Use {new} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


class ColorBase:
    """
    Immutable four-channel color.

    Components are stored exactly as given; nothing is clamped on
    construction. Use the ``with_*`` builders of the concrete classes to
    obtain a copy with one component replaced.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, str, str, str]]
    # def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    convert: Callable[..., ColorBase]

    def __init__(self, c0: Scalar, c1: Scalar, c2: Scalar, alpha: Scalar = 1.0) -> None:
        object.__setattr__(self, '_value', (c0, c1, c2, alpha))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    @classmethod
    def from_value(cls, value: ColorTuple):
        """Build a color from a 4-tuple of components."""
        if len(value) != cls.num_channels:
            raise ValueError(f"{cls.mode} expects {cls.num_channels}-channel tuple")
        return cls(*value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTuple:
        return self._value

    @property
    def alpha(self) -> Scalar:
        return self._value[3]

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def _replace(self, index: int, component: Scalar):
        values = list(self._value)
        values[index] = component
        return self.__class__(*values)

    def with_alpha(self, alpha: Scalar):
        """Return a copy with the alpha channel replaced."""
        return self._replace(3, alpha)

    def to_html(self, with_alpha: bool = False) -> str:
        raise NotImplementedError

    def toHTML(self, withAlpha: Optional[bool] = None) -> str:
        warn_renamed("toHTML", "to_html")
        return self.to_html(withAlpha is True)

    # ------------------ VALUE PROTOCOL ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

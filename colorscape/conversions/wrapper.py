import numpy as np
from typing import Callable, Dict, Tuple, cast

from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb
from .to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb
from ..types.color_types import ColorSpace, ColorTuple, element_to_array

CONVERT_SCALAR: Dict[Tuple[str, str], Callable[[float, float, float], Tuple[float, float, float]]] = {
    ("rgba", "hsba"): unit_rgb_to_hsb,
    ("hsba", "rgba"): hsb_to_unit_rgb,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgba", "hsba"): np_unit_rgb_to_hsb,
    ("hsba", "rgba"): np_hsb_to_unit_rgb,
}

SUPPORTED_SPACES = ("rgba", "hsba")


def _check_spaces(from_space: str, to_space: str) -> Tuple[str, str]:
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if space not in SUPPORTED_SPACES:
            raise ValueError(f"Unknown space: {space}")
    return fs, ts


def convert(
    color: ColorTuple,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorTuple:
    """
    Convert a 4-component color between RGBA and HSBA.

    Alpha is carried over unchanged.
    """
    fs, ts = _check_spaces(from_space, to_space)
    c0, c1, c2, alpha = color
    if fs == ts:
        return (c0, c1, c2, alpha)
    return (*CONVERT_SCALAR[(fs, ts)](c0, c1, c2), alpha)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized :func:`convert` over an array of shape (..., 4).
    """
    fs, ts = _check_spaces(from_space, to_space)
    arr = element_to_array(color)
    if arr.shape[-1] != 4:
        raise ValueError(f"{fs} expects last dimension to be 4, got shape {arr.shape}")
    if fs == ts:
        return arr.copy()

    converted = CONVERT_NUMPY[(fs, ts)](arr[..., 0], arr[..., 1], arr[..., 2])
    return cast(np.ndarray, np.concatenate([converted, arr[..., 3:]], axis=-1))

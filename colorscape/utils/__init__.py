from .num_utils import (
    clamp01,
    lerp,
    lerp_angle,
    np_clamp01,
    np_lerp,
    np_lerp_angle,
)

__all__ = [
    "clamp01",
    "lerp",
    "lerp_angle",
    "np_clamp01",
    "np_lerp",
    "np_lerp_angle",
]

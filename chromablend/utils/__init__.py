from .angles import (
    HueMode,
    normalize_angle,
    normalize_angle_rad,
    interp_angle,
    interp_angle_rad,
    lerp,
)
from .num_utils import clamp01, to_u8, format_float

__all__ = [
    "HueMode",
    "normalize_angle",
    "normalize_angle_rad",
    "interp_angle",
    "interp_angle_rad",
    "lerp",
    "clamp01",
    "to_u8",
    "format_float",
]

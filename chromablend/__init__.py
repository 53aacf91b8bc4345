"""Chromablend: color conversion and blending utilities."""

from .colors import Color
from .parser import parse, ParseColorError
from .utils import (
    HueMode,
    normalize_angle,
    normalize_angle_rad,
    interp_angle,
    interp_angle_rad,
)
from .conversions import (
    to_linear,
    from_linear,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    rgb_to_oklab,
    oklab_to_rgb,
    convert,
)
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # color value
    "Color",
    "parse",
    "ParseColorError",
    # angles
    "HueMode",
    "normalize_angle",
    "normalize_angle_rad",
    "interp_angle",
    "interp_angle_rad",
    # conversions
    "to_linear",
    "from_linear",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "convert",
    "FormatType",
    "__version__",
]

"""
Chromablend Color Space Conversions
===================================

Scalar conversion functions between encoded sRGB, linear RGB, HSL, HSV,
HWB and Oklab. Every function takes three floats and returns a plain
tuple; none of them raise for numeric input.

Conversion Functions
-------------------

Gamma:
    to_linear(x), from_linear(x)
        sRGB transfer function for one channel
    rgb_to_linear_rgb(r, g, b), linear_rgb_to_rgb(r, g, b)

RGB → HSL / HSV / HWB:
    rgb_to_hsl(r, g, b)
    rgb_to_hsv(r, g, b)
    rgb_to_hwb(r, g, b)

HSL / HSV / HWB → RGB:
    hsl_to_rgb(h, s, l)
    hsv_to_rgb(h, s, v)
        Goes through hsv_to_hsl
    hwb_to_rgb(h, w, b)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v)
    hsl_to_hsv(h, s, l)

Oklab:
    rgb_to_oklab(r, g, b), oklab_to_rgb(l, a, b)
    linear_rgb_to_oklab(r, g, b), oklab_to_linear_rgb(l, a, b)

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
        Universal tuple converter with format handling

Examples
--------
>>> from chromablend.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_rgb(h, s, l)
>>>
>>> from chromablend.conversions import convert, FormatType
>>> convert((255, 0, 0), "rgb", "hsl", input_type=FormatType.INT)
(0.0, 1.0, 0.5)
"""

# Gamma
from .gamma import (
    to_linear,
    from_linear,
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
)

# RGB → cylindrical
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_hwb import rgb_to_hwb

# cylindrical → RGB
from .to_rgb import hue_to_rgb, hsl_to_rgb, hsv_to_rgb, hwb_to_rgb

# Oklab
from .oklab import (
    rgb_to_oklab,
    oklab_to_rgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
)

# High-level API
from .wrapper import convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    # Gamma
    'to_linear',
    'from_linear',
    'rgb_to_linear_rgb',
    'linear_rgb_to_rgb',

    # RGB → cylindrical
    'rgb_to_hsl',
    'rgb_to_hsv',
    'rgb_to_hwb',

    # cylindrical → RGB
    'hue_to_rgb',
    'hsl_to_rgb',
    'hsv_to_rgb',
    'hwb_to_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',

    # Oklab
    'rgb_to_oklab',
    'oklab_to_rgb',
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',

    # High-level API
    'convert',

    # Types
    'FormatType',
    'ColorSpace',
]

"""
Chromablend Color Value
=======================

``Color`` is an immutable sRGB color with straight alpha. It converts to
and from HSL, HSV, HWB, linear RGB and Oklab, and blends two colors in any
of those spaces.

Usage
-----
>>> from chromablend.colors import Color
>>>
>>> red = Color.from_hsl(0.0, 1.0, 0.5)
>>> red.rgba()
(1.0, 0.0, 0.0, 1.0)
>>> red.to_hex_string()
'#ff0000'
>>>
>>> blue = Color.from_rgb_u8(0, 0, 255)
>>> mid = red.interpolate_oklab(blue, 0.5)
>>> mid.to_hsva()  # hue, saturation, value, alpha
>>>
>>> # blend by name, hue spaces take a direction
>>> from chromablend.utils import HueMode
>>> red.interpolate(blue, 0.5, space="hsv", hue_mode=HueMode.LONGEST)

Notes
-----
- Named constructors clamp every channel into [0, 1]; ``Color(r, g, b, a)``
  stores the given values untouched.
- Importing this package attaches the interpolation operators and the
  tuple/array bridges to ``Color``.
- ``import chromablend.lab`` adds CIE Lab/LCh (requires ``colormath``).
"""

from .color_base import Color
from . import interpolation, interop
from .interpolation import INTERPOLATORS


__all__ = ['Color', 'INTERPOLATORS']

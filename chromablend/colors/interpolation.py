"""
Blend operators for ``Color``.

Each operator converts both colors into one space, interpolates every
component linearly by ``t`` (hues along a circular arc), and rebuilds the
result with the matching named constructor, which clamps it back into
gamut. ``t`` is not clamped, so values outside [0, 1] extrapolate.
Alpha is always interpolated linearly.
"""
from __future__ import annotations
from typing import Callable, Dict

from ..types.color_types import InterpolationSpace
from ..utils import HueMode, interp_angle, lerp
from .color_base import Color


def interpolate_rgb(self: Color, other: Color, t: float) -> Color:
    """Blend this color with the other one, in the RGB color-space."""
    return self.__class__.from_rgba(
        lerp(self.r, other.r, t),
        lerp(self.g, other.g, t),
        lerp(self.b, other.b, t),
        lerp(self.a, other.a, t),
    )


def interpolate_linear_rgb(self: Color, other: Color, t: float) -> Color:
    """Blend this color with the other one, in the linear RGB color-space."""
    r1, g1, b1, a1 = self.to_linear_rgba()
    r2, g2, b2, a2 = other.to_linear_rgba()
    return self.__class__.from_linear_rgba(
        lerp(r1, r2, t),
        lerp(g1, g2, t),
        lerp(b1, b2, t),
        lerp(a1, a2, t),
    )


def interpolate_hsl(self: Color, other: Color, t: float, hue_mode: HueMode = HueMode.SHORTEST) -> Color:
    """Blend this color with the other one, in the HSL color-space."""
    h1, s1, l1, a1 = self.to_hsla()
    h2, s2, l2, a2 = other.to_hsla()
    return self.__class__.from_hsla(
        interp_angle(h1, h2, t, hue_mode),
        lerp(s1, s2, t),
        lerp(l1, l2, t),
        lerp(a1, a2, t),
    )


def interpolate_hsv(self: Color, other: Color, t: float, hue_mode: HueMode = HueMode.SHORTEST) -> Color:
    """Blend this color with the other one, in the HSV color-space."""
    h1, s1, v1, a1 = self.to_hsva()
    h2, s2, v2, a2 = other.to_hsva()
    return self.__class__.from_hsva(
        interp_angle(h1, h2, t, hue_mode),
        lerp(s1, s2, t),
        lerp(v1, v2, t),
        lerp(a1, a2, t),
    )


def interpolate_hwb(self: Color, other: Color, t: float, hue_mode: HueMode = HueMode.SHORTEST) -> Color:
    """Blend this color with the other one, in the HWB color-space."""
    h1, w1, b1, a1 = self.to_hwba()
    h2, w2, b2, a2 = other.to_hwba()
    return self.__class__.from_hwba(
        interp_angle(h1, h2, t, hue_mode),
        lerp(w1, w2, t),
        lerp(b1, b2, t),
        lerp(a1, a2, t),
    )


def interpolate_oklab(self: Color, other: Color, t: float) -> Color:
    """Blend this color with the other one, in the Oklab color-space."""
    l1, a1, b1, alpha1 = self.to_oklaba()
    l2, a2, b2, alpha2 = other.to_oklaba()
    return self.__class__.from_oklaba(
        lerp(l1, l2, t),
        lerp(a1, a2, t),
        lerp(b1, b2, t),
        lerp(alpha1, alpha2, t),
    )


INTERPOLATORS: Dict[str, Callable[..., Color]] = {
    "rgb": interpolate_rgb,
    "linear_rgb": interpolate_linear_rgb,
    "hsl": interpolate_hsl,
    "hsv": interpolate_hsv,
    "hwb": interpolate_hwb,
    "oklab": interpolate_oklab,
}


def interpolate(self: Color, other: Color, t: float, space: InterpolationSpace = "rgb", **kwargs) -> Color:
    """
    Blend two colors in the named space.

    Args:
        other: Color to blend towards
        t: Interpolation coefficient, 0 gives ``self`` and 1 gives ``other``
        space: "rgb", "linear_rgb", "hsl", "hsv", "hwb", "oklab", plus
            "lab" and "lch" once ``chromablend.lab`` is imported
        **kwargs: Forwarded to the operator, e.g. ``hue_mode``

    Raises:
        ValueError: if the space has no registered operator
    """
    fn = INTERPOLATORS.get(space.lower())
    if fn is None:
        raise ValueError(f"Unsupported interpolation space: {space}")
    return fn(self, other, t, **kwargs)


Color.interpolate_rgb = interpolate_rgb
Color.interpolate_linear_rgb = interpolate_linear_rgb
Color.interpolate_hsl = interpolate_hsl
Color.interpolate_hsv = interpolate_hsv
Color.interpolate_hwb = interpolate_hwb
Color.interpolate_oklab = interpolate_oklab
Color.interpolate = interpolate

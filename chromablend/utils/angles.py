"""
Hue angle utilities.

Hue is periodic, so two hues can be joined by two arcs. ``interp_angle``
walks the arc selected by a ``HueMode``; the default is the shortest one,
so interpolating 360° and 90° half way lands on 45° rather than 225°.

Degrees are used by HSL, HSV and HWB; radians only by the LCh model, and
every radian function carries a ``_rad`` suffix.
"""

import math
from enum import IntEnum

from ..types.format_type import HUE_360

TAU = math.tau


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (≤180° arc) - most common
    LONGEST:  Longest path (≥180° arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def _wrap(value: float, period: float) -> float:
    wrapped = value % period
    # -1e-20 % 360 rounds to 360.0
    if wrapped >= period:
        return 0.0
    return wrapped


def _hue_delta(a0: float, a1: float, period: float, mode: HueMode) -> float:
    half = period / 2
    shortest = ((a1 - a0) % period + period + half) % period - half

    if mode == HueMode.SHORTEST:
        return shortest
    if mode == HueMode.CW:
        return (a1 - a0) % period
    if mode == HueMode.CCW:
        return -((a0 - a1) % period)
    if mode == HueMode.LONGEST:
        if shortest > 0:
            return shortest - period
        if shortest < 0:
            return shortest + period
        return 0.0
    raise ValueError(f"Invalid hue mode: {mode}")


def normalize_angle(degrees: float) -> float:
    """Normalize a hue in degrees to the [0, 360) range."""
    return _wrap(degrees, HUE_360)


def normalize_angle_rad(radians: float) -> float:
    """Normalize a hue in radians to the [0, 2π) range."""
    return _wrap(radians, TAU)


def interp_angle(a0: float, a1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Interpolate between two hues in degrees.

    Args:
        a0: Start hue in degrees (any real value)
        a1: End hue in degrees (any real value)
        t: Interpolation coefficient, not clamped
        mode: Which arc to travel along

    Returns:
        Interpolated hue in [0, 360)
    """
    delta = _hue_delta(a0, a1, HUE_360, mode)
    return _wrap(a0 + t * delta + HUE_360, HUE_360)


def interp_angle_rad(a0: float, a1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """Radian counterpart of ``interp_angle``; result in [0, 2π)."""
    delta = _hue_delta(a0, a1, TAU, mode)
    return _wrap(a0 + t * delta + TAU, TAU)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation, ``t`` is not clamped."""
    return a + t * (b - a)

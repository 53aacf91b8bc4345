"""
CIE Lab/LCh support for ``Color``.

Importing this module attaches ``from_lab``, ``to_lab``, ``from_lch``,
``to_lch``, ``interpolate_lab`` and ``interpolate_lch`` to ``Color`` and
registers "lab" and "lch" with ``Color.interpolate``. It needs the
optional ``colormath`` dependency (``pip install chromablend[lab]``).

>>> import chromablend.lab
>>> from chromablend import Color
>>> Color.from_rgb(1.0, 0.0, 0.0).to_lch()  # (l, c, h_rad, alpha)
"""
from __future__ import annotations
import logging
from typing import Tuple

from .colors import Color, INTERPOLATORS
from .extended import PerceptualModel
from .extended.cielab import CieLabModel
from .utils import HueMode, interp_angle_rad, lerp

logger = logging.getLogger(__name__)

DEFAULT_MODEL: PerceptualModel = CieLabModel()
logger.debug("Lab/LCh support enabled with %r", DEFAULT_MODEL)

Quad = Tuple[float, float, float, float]


def from_lab(cls: type[Color], l: float, a: float, b: float, alpha: float = 1.0,
             model: PerceptualModel = DEFAULT_MODEL) -> Color:
    """
    Args:
        l: Lightness
        a: Distance along the ``a`` axis
        b: Distance along the ``b`` axis
        alpha: Alpha [0..1]
        model: Lab implementation to use
    """
    return cls.from_rgba(*model.lab_to_rgb(l, a, b), alpha)


def to_lab(self: Color, model: PerceptualModel = DEFAULT_MODEL) -> Quad:
    """Returns: ``(l, a, b, alpha)``"""
    return (*model.rgb_to_lab(self.r, self.g, self.b), self.a)


def from_lch(cls: type[Color], l: float, c: float, h_rad: float, alpha: float = 1.0,
             model: PerceptualModel = DEFAULT_MODEL) -> Color:
    """
    Args:
        l: Lightness
        c: Chroma
        h_rad: Hue angle in radians
        alpha: Alpha [0..1]
        model: Lab implementation to use
    """
    return cls.from_rgba(*model.lch_to_rgb(l, c, h_rad), alpha)


def to_lch(self: Color, model: PerceptualModel = DEFAULT_MODEL) -> Quad:
    """Returns: ``(l, c, h_rad, alpha)`` with h_rad in [0, 2π)"""
    return (*model.rgb_to_lch(self.r, self.g, self.b), self.a)


def interpolate_lab(self: Color, other: Color, t: float,
                    model: PerceptualModel = DEFAULT_MODEL) -> Color:
    """Blend this color with the other one, in the Lab color-space."""
    l1, a1, b1, alpha1 = to_lab(self, model)
    l2, a2, b2, alpha2 = to_lab(other, model)
    return from_lab(
        self.__class__,
        lerp(l1, l2, t),
        lerp(a1, a2, t),
        lerp(b1, b2, t),
        lerp(alpha1, alpha2, t),
        model=model,
    )


def interpolate_lch(self: Color, other: Color, t: float, hue_mode: HueMode = HueMode.SHORTEST,
                    model: PerceptualModel = DEFAULT_MODEL) -> Color:
    """Blend this color with the other one, in the LCh color-space."""
    l1, c1, h1, alpha1 = to_lch(self, model)
    l2, c2, h2, alpha2 = to_lch(other, model)
    return from_lch(
        self.__class__,
        lerp(l1, l2, t),
        lerp(c1, c2, t),
        interp_angle_rad(h1, h2, t, hue_mode),
        lerp(alpha1, alpha2, t),
        model=model,
    )


Color.from_lab = classmethod(from_lab)
Color.to_lab = to_lab
Color.from_lch = classmethod(from_lch)
Color.to_lch = to_lch
Color.interpolate_lab = interpolate_lab
Color.interpolate_lch = interpolate_lch

INTERPOLATORS["lab"] = interpolate_lab
INTERPOLATORS["lch"] = interpolate_lch

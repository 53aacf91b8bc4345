"""
Extended perceptual models.

A ``PerceptualModel`` is a pluggable capability converting encoded sRGB
to CIE Lab and Lab to its cylindrical form, LCh. The core package never
depends on one; ``chromablend.lab`` composes a model into ``Color``.

LCh hue is in radians throughout and is named ``h_rad``.
"""
from abc import ABC, abstractmethod
from typing import Tuple

Triple = Tuple[float, float, float]


class PerceptualModel(ABC):
    """Adapter boundary for an external Lab/LCh implementation."""

    @abstractmethod
    def rgb_to_lab(self, r: float, g: float, b: float) -> Triple:
        """Encoded sRGB [0, 1] to (L, a, b)."""

    @abstractmethod
    def lab_to_rgb(self, l: float, a: float, b: float) -> Triple:
        """(L, a, b) to encoded sRGB, not clamped."""

    @abstractmethod
    def lab_to_lch(self, l: float, a: float, b: float) -> Triple:
        """(L, a, b) to (L, C, h_rad) with h_rad in [0, 2π)."""

    @abstractmethod
    def lch_to_lab(self, l: float, c: float, h_rad: float) -> Triple:
        """(L, C, h_rad) to (L, a, b)."""

    def rgb_to_lch(self, r: float, g: float, b: float) -> Triple:
        return self.lab_to_lch(*self.rgb_to_lab(r, g, b))

    def lch_to_rgb(self, l: float, c: float, h_rad: float) -> Triple:
        return self.lab_to_rgb(*self.lch_to_lab(l, c, h_rad))


__all__ = ["PerceptualModel"]

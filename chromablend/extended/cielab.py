"""CIE Lab/LCh backed by colormath."""
import math

from colormath.color_conversions import convert_color
from colormath.color_objects import LabColor, LCHabColor, sRGBColor

from ..utils.angles import normalize_angle_rad
from . import PerceptualModel, Triple

# sRGB's own white point, so no chromatic adaptation is applied
ILLUMINANT = "d65"


class CieLabModel(PerceptualModel):
    """
    CIE L*a*b* under D65 and its cylindrical L*C*h form.

    Holds no state; one instance can be shared by any number of threads.
    """

    def rgb_to_lab(self, r: float, g: float, b: float) -> Triple:
        lab = convert_color(sRGBColor(r, g, b), LabColor, target_illuminant=ILLUMINANT)
        return float(lab.lab_l), float(lab.lab_a), float(lab.lab_b)

    def lab_to_rgb(self, l: float, a: float, b: float) -> Triple:
        rgb = convert_color(LabColor(l, a, b, illuminant=ILLUMINANT), sRGBColor)
        return float(rgb.rgb_r), float(rgb.rgb_g), float(rgb.rgb_b)

    def lab_to_lch(self, l: float, a: float, b: float) -> Triple:
        lch = convert_color(LabColor(l, a, b, illuminant=ILLUMINANT), LCHabColor)
        # colormath reports hue in degrees
        return float(lch.lch_l), float(lch.lch_c), normalize_angle_rad(math.radians(lch.lch_h))

    def lch_to_lab(self, l: float, c: float, h_rad: float) -> Triple:
        lch = LCHabColor(l, c, math.degrees(h_rad), illuminant=ILLUMINANT)
        lab = convert_color(lch, LabColor)
        return float(lab.lab_l), float(lab.lab_a), float(lab.lab_b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(illuminant={ILLUMINANT!r})"

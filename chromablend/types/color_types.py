from __future__ import annotations
from typing import Literal, Tuple, Union, Sequence
from numpy import ndarray

Scalar = int | float
Triple = Tuple[float, float, float]
Quad = Tuple[float, float, float, float]
ColorTuple = Union[Triple, Quad]
ComponentInput = Union[Sequence[Scalar], ndarray]

ColorSpace = Literal[
    "rgb", "rgba",
    "linear_rgb", "linear_rgba",
    "hsl", "hsla",
    "hsv", "hsva",
    "hwb", "hwba",
    "oklab", "oklaba",
]
InterpolationSpace = Literal["rgb", "linear_rgb", "hsl", "hsv", "hwb", "oklab", "lab", "lch"]

BASE_SPACES = {"rgb", "linear_rgb", "hsl", "hsv", "hwb", "oklab"}
HUE_SPACES = {"hsl", "hsla", "hsv", "hsva", "hwb", "hwba"}


def split_alpha_space(color_space: str) -> Tuple[str, bool]:
    """
    Split a space name into its base space and whether it carries alpha.

    Args:
        color_space: Color space string, e.g. "hsla" or "oklab"
    Returns:
        (base_space, has_alpha)
    Raises:
        ValueError: if the name is not a known space
    """
    space = color_space.lower()
    if space in BASE_SPACES:
        return space, False
    if space.endswith("a") and space[:-1] in BASE_SPACES:
        return space[:-1], True
    raise ValueError(f"Unknown space: {color_space}")


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is a hue-based space (HSL, HSV or HWB).
    """
    return color_space.lower() in HUE_SPACES

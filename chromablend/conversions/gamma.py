"""
sRGB transfer function.

Encoded sRGB channels are gamma-compressed; linear channels are
proportional to light intensity. Alpha is never gamma-encoded, so only
r, g and b pass through these functions.
"""

# Encoded-side threshold of the linear segment
SRGB_TO_LINEAR_TH = 0.04045
# Linear-side threshold of the linear segment
LINEAR_TO_SRGB_TH = 0.0031308
GAMMA = 2.4


def to_linear(x: float) -> float:
    """Decode one sRGB channel [0, 1] to linear light."""
    if x >= SRGB_TO_LINEAR_TH:
        return ((x + 0.055) / 1.055) ** GAMMA
    return x / 12.92


def from_linear(x: float) -> float:
    """Encode one linear-light channel back to sRGB."""
    if x >= LINEAR_TO_SRGB_TH:
        return 1.055 * x ** (1.0 / GAMMA) - 0.055
    return 12.92 * x


def rgb_to_linear_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    return to_linear(r), to_linear(g), to_linear(b)


def linear_rgb_to_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    return from_linear(r), from_linear(g), from_linear(b)

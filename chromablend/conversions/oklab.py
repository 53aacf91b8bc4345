"""
Oklab conversions.

Oklab (https://bottosson.github.io/posts/oklab/) maps linear sRGB through
an LMS-like cone basis, compresses it with a cube root and rotates the
result into lightness plus two opponent axes. ``a`` runs green to red and
``b`` blue to yellow; both are signed and unbounded.
"""

import numpy as np

from .gamma import linear_rgb_to_rgb, rgb_to_linear_rgb


def _frozen(rows) -> np.ndarray:
    matrix = np.array(rows, dtype=np.float64)
    matrix.flags.writeable = False
    return matrix


LINEAR_RGB_TO_LMS = _frozen([
    [0.4121656120, 0.5362752080, 0.0514575653],
    [0.2118591070, 0.6807189584, 0.1074065790],
    [0.0883097947, 0.2818474174, 0.6302613616],
])

LMS_TO_OKLAB = _frozen([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = _frozen([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_RGB = _frozen([
    [4.0767245293, -3.3072168827, 0.2307590544],
    [-1.2681437731, 2.6093323231, -0.3411344290],
    [-0.0041119885, -0.7034763098, 1.7068625689],
])


def _as_tuple(vec: np.ndarray) -> tuple[float, float, float]:
    x, y, z = vec.tolist()
    return x, y, z


def linear_rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert linear RGB to Oklab.

    Args:
        r, g, b: Linear-light channels, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: (L, a, b)
    """
    lms = LINEAR_RGB_TO_LMS @ np.array([r, g, b], dtype=np.float64)
    # cbrt keeps the sign of out-of-gamut negatives
    return _as_tuple(LMS_TO_OKLAB @ np.cbrt(lms))


def oklab_to_linear_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert Oklab to linear RGB. The result is not clamped.
    """
    lms = OKLAB_TO_LMS @ np.array([l, a, b], dtype=np.float64)
    return _as_tuple(LMS_TO_LINEAR_RGB @ lms ** 3)


def rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert encoded sRGB [0, 1] to Oklab."""
    return linear_rgb_to_oklab(*rgb_to_linear_rgb(r, g, b))


def oklab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert Oklab to encoded sRGB. The result is not clamped."""
    return linear_rgb_to_rgb(*oklab_to_linear_rgb(l, a, b))

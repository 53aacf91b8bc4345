from ..utils.angles import normalize_angle
from .to_hsl import hsv_to_hsl

HUE_SECTORS = 6.0


def _modulo(x: float, n: float) -> float:
    return (x % n + n) % n


def hue_to_rgb(n1: float, n2: float, h: float) -> float:
    """
    Evaluate one channel of the HSL ramp.

    Args:
        n1: Low reference level
        n2: High reference level
        h: Hue in sectors (degrees / 60), offset per channel

    Returns:
        Channel value between n1 and n2
    """
    h = _modulo(h, HUE_SECTORS)

    if h < 1.0:
        return n1 + (n2 - n1) * h
    if h < 3.0:
        return n2
    if h < 4.0:
        return n1 + (n2 - n1) * (4.0 - h)
    return n1


## HSL to RGB conversions

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0.0:
        return l, l, l

    if l < 0.5:
        n2 = l * (1.0 + s)
    else:
        n2 = l + s - l * s
    n1 = 2.0 * l - n2

    h = h / 60.0
    r = hue_to_rgb(n1, n2, h + 2.0)
    g = hue_to_rgb(n1, n2, h)
    b = hue_to_rgb(n1, n2, h - 2.0)
    return r, g, b


## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB by way of HSL.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    return hsl_to_rgb(*hsv_to_hsl(h, s, v))


## HWB to RGB conversions

def hwb_to_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to RGB.

    Whiteness and blackness that together reach 1 leave no room for hue;
    the result is then the gray ``w / (w + b)``.

    Args:
        h: Hue in degrees [0, 360)
        w: Whiteness in [0, 1]
        b: Blackness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if w + b >= 1.0:
        gray = w / (w + b)
        return gray, gray, gray

    scale = 1.0 - w - b
    r, g, bl = hsl_to_rgb(normalize_angle(h), 1.0, 0.5)
    return r * scale + w, g * scale + w, bl * scale + w

from ..utils.angles import normalize_angle


def _hue_from_channels(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    dr = (max_c - r) / delta
    dg = (max_c - g) / delta
    db = (max_c - b) / delta

    if r == max_c:
        h = db - dg
    elif g == max_c:
        h = 2.0 + dr - db
    else:
        h = 4.0 + dg - dr

    return normalize_angle(h * 60.0)


## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        return 0.0, 0.0, lightness

    delta = max_c - min_c
    if lightness < 0.5:
        denom = max_c + min_c
    else:
        denom = 2.0 - max_c - min_c
    saturation = delta / denom if denom != 0.0 else 0.0

    return _hue_from_channels(r, g, b, max_c, delta), saturation, lightness


## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL.

    Black (l == 0) keeps its saturation and white (l == 1) drops it, so the
    saturation rescale never divides by zero.
    """
    l = (2.0 - s) * v / 2.0

    if l == 0.0:
        sl = s
    elif l == 1.0:
        sl = 0.0
    elif l < 0.5:
        sl = s * v / (l * 2.0)
    else:
        sl = s * v / (2.0 - l * 2.0)

    return h, sl, l

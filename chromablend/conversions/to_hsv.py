from .to_hsl import _hue_from_channels


## RGB to HSV conversions

def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)

    if delta == 0.0:
        return 0.0, 0.0, v

    saturation = delta / v if v != 0.0 else 0.0
    return _hue_from_channels(r, g, b, v, delta), saturation, v


## HSL to HSV conversions

def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV; black maps to zero saturation."""
    v = l + s * min(l, 1.0 - l)
    if v == 0.0:
        return h, 0.0, 0.0
    return h, 2.0 * (1.0 - l / v), v

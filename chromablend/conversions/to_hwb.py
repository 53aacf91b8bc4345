from .to_hsl import rgb_to_hsl


## RGB to HWB conversions

def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HWB.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), whiteness [0,1], blackness [0,1])
    """
    hue, _, _ = rgb_to_hsl(r, g, b)
    white = min(r, g, b)
    black = 1.0 - max(r, g, b)
    return hue, white, black

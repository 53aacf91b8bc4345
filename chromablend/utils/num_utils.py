import math

from boundednumbers import clamp


def clamp01(value: float) -> float:
    """Clamp a channel value to the inclusive range [0, 1]; NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, 1.0))


def to_u8(value: float) -> int:
    """Scale a unit channel to 0..255, rounding half away from zero and saturating."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 255 if value > 0 else 0
    scaled = math.floor(value * 255.0 + 0.5)
    return max(0, min(255, scaled))


def format_float(value: float) -> str:
    """Shortest text form of a float, integral values without a trailing ``.0``."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))

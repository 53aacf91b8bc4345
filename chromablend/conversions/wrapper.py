import math
from typing import Callable, Dict, Sequence, Tuple

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace, ColorTuple, Scalar, is_hue_space, split_alpha_space

from .gamma import linear_rgb_to_rgb, rgb_to_linear_rgb
from .oklab import oklab_to_rgb, rgb_to_oklab
from .to_hsl import hsv_to_hsl, rgb_to_hsl
from .to_hsv import hsl_to_hsv, rgb_to_hsv
from .to_hwb import rgb_to_hwb
from .to_rgb import hsl_to_rgb, hsv_to_rgb, hwb_to_rgb

Converter = Callable[[float, float, float], Tuple[float, float, float]]


def _identity(x: float, y: float, z: float) -> Tuple[float, float, float]:
    return x, y, z


# Every space reaches every other through encoded RGB
CONVERT_TO_RGB: Dict[str, Converter] = {
    "rgb": _identity,
    "linear_rgb": linear_rgb_to_rgb,
    "hsl": hsl_to_rgb,
    "hsv": hsv_to_rgb,
    "hwb": hwb_to_rgb,
    "oklab": oklab_to_rgb,
}

CONVERT_FROM_RGB: Dict[str, Converter] = {
    "rgb": _identity,
    "linear_rgb": rgb_to_linear_rgb,
    "hsl": rgb_to_hsl,
    "hsv": rgb_to_hsv,
    "hwb": rgb_to_hwb,
    "oklab": rgb_to_oklab,
}

# Conversions that skip the RGB hub
CONVERT_DIRECT: Dict[Tuple[str, str], Converter] = {
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _check_format(space: str, fmt: FormatType) -> None:
    if space == "oklab" and fmt != FormatType.FLOAT:
        raise ValueError(f"{space} only supports {FormatType.FLOAT.value} format, got {fmt.value}")


def normalize(color: Sequence[Scalar], space: str, fmt: FormatType) -> Tuple[float, float, float]:
    _check_format(space, fmt)
    maxval = max_non_hue[fmt]
    x, y, z = (float(v) for v in color)

    if space == "oklab":
        return x, y, z
    if is_hue_space(space):
        # hue channel is always in degrees
        return x, y / maxval, z / maxval
    return x / maxval, y / maxval, z / maxval


def scale(color: Sequence[float], space: str, fmt: FormatType) -> Tuple[Scalar, ...]:
    _check_format(space, fmt)
    maxval = max_non_hue[fmt]
    x, y, z = color

    if space == "oklab":
        scaled = (x, y, z)
    elif is_hue_space(space):
        scaled = (x, y * maxval, z * maxval)
    else:
        scaled = (x * maxval, y * maxval, z * maxval)

    if fmt == FormatType.INT:
        return tuple(_round_half_up(v) for v in scaled)
    return scaled


def convert_alpha(alpha: float | None, input_fmt: FormatType, output_fmt: FormatType) -> Scalar:
    max_out = max_non_hue[output_fmt]
    if alpha is None:
        return max_out

    result = alpha / max_non_hue[input_fmt] * max_out
    return _round_half_up(result) if output_fmt == FormatType.INT else result


def _check_components(color: Sequence[Scalar], space: str) -> Tuple[str, bool]:
    base, has_alpha = split_alpha_space(space)
    expected = 4 if has_alpha else 3
    if len(color) != expected:
        raise ValueError(f"{space} expects {expected} components, got {len(color)}")
    return base, has_alpha


def _convert_core(
    color: Sequence[Scalar],
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> ColorTuple:
    fs, has_alpha_in = _check_components(color, from_space)
    ts, has_alpha_out = split_alpha_space(to_space)

    base = color[:3]
    alpha = float(color[3]) if has_alpha_in else None

    # normalize → convert → scale
    base_norm = normalize(base, fs, input_fmt)

    if fs == ts:
        converted = base_norm
    elif (fs, ts) in CONVERT_DIRECT:
        converted = CONVERT_DIRECT[(fs, ts)](*base_norm)
    else:
        converted = CONVERT_FROM_RGB[ts](*CONVERT_TO_RGB[fs](*base_norm))

    out = scale(converted, ts, output_fmt)

    if has_alpha_out:
        return (*out, convert_alpha(alpha, input_fmt, output_fmt))  # type: ignore[return-value]
    return out  # type: ignore[return-value]


def convert(
    color: Sequence[Scalar],
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
) -> ColorTuple:
    """
    Convert a color tuple between spaces and formats.

    Args:
        color: 3 components, or 4 when ``from_space`` carries alpha
        from_space: Source space, e.g. "rgb", "hsla", "oklab"
        to_space: Target space
        input_type: Scale of the non-hue input channels
        output_type: Scale of the non-hue output channels

    Returns:
        Converted tuple; alpha is appended when ``to_space`` carries it
        and defaults to opaque when the input had none.

    Raises:
        ValueError: unknown space, wrong component count, or a format the
            space does not support
    """
    if from_space.lower() == to_space.lower() and input_type == output_type:
        _check_components(color, from_space)
        return tuple(color)  # No conversion needed
    return _convert_core(
        color,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )

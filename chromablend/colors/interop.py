"""Bridges between ``Color`` and plain tuples, lists and numpy arrays."""
from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray

from ..types.color_types import ComponentInput, Scalar
from ..types.format_type import FormatType, default_format_dtypes, max_non_hue
from .color_base import Color


def _components(values: ComponentInput) -> Tuple[float, ...]:
    if isinstance(values, ndarray):
        if values.ndim != 1:
            raise ValueError("Input array must be 1-dimensional.")
        return tuple(float(v) for v in values.tolist())
    if isinstance(values, (tuple, list)):
        return tuple(float(v) for v in values)
    raise TypeError(f"Unsupported color input type: {type(values).__name__}")


def from_tuple(cls: type[Color], values: ComponentInput, format_type: FormatType = FormatType.FLOAT) -> Color:
    """
    Build a color from 3 or 4 components.

    Args:
        values: (r, g, b) or (r, g, b, a) as a tuple, list or 1-D array
        format_type: INT for 0..255, FLOAT for 0..1, PERCENTAGE for 0..100

    Returns:
        Clamped color; alpha defaults to opaque

    Raises:
        ValueError: if the component count is not 3 or 4
        TypeError: if ``values`` is not a sequence or array
    """
    comps = _components(values)
    if len(comps) not in (3, 4):
        raise ValueError(f"Color expects 3 or 4 components, got {len(comps)}")

    maxval = max_non_hue[FormatType(format_type)]
    r, g, b, *rest = (v / maxval for v in comps)
    a = rest[0] if rest else 1.0
    return cls.from_rgba(r, g, b, a)


def to_tuple(self: Color, format_type: FormatType = FormatType.FLOAT) -> Tuple[Scalar, ...]:
    """Return ``(r, g, b, a)`` scaled to the given format."""
    fmt = FormatType(format_type)
    if fmt == FormatType.INT:
        return self.rgba_u8()
    maxval = max_non_hue[fmt]
    return tuple(v * maxval for v in self.rgba())


def to_array(self: Color, format_type: FormatType = FormatType.FLOAT) -> ndarray:
    """Return ``(r, g, b, a)`` as a numpy array with the format's default dtype."""
    fmt = FormatType(format_type)
    return np.array(to_tuple(self, fmt), dtype=default_format_dtypes[fmt])


Color.from_tuple = classmethod(from_tuple)
Color.to_tuple = to_tuple
Color.to_array = to_array

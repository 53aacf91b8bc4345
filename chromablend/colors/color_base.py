from __future__ import annotations
from functools import total_ordering
from typing import Any, Callable, Iterator, Tuple

from ..conversions import (
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    linear_rgb_to_rgb,
    oklab_to_linear_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_linear_rgb,
    linear_rgb_to_oklab,
)
from ..types.color_types import Quad
from ..utils import clamp01, format_float, normalize_angle, to_u8


@total_ordering
class Color:
    """
    An sRGB color with straight alpha, every channel a float.

    Named constructors (``from_rgb``, ``from_hsl``, ...) clamp their result
    into [0, 1]. ``Color(r, g, b, a)`` stores the values as given, so
    out-of-gamut intermediates are representable.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_is_frozen')  # prevents adding new attributes → immutability

    # attached by colors/interpolation.py
    interpolate_rgb: Callable[[Color, Color, float], Color]
    interpolate_linear_rgb: Callable[[Color, Color, float], Color]
    interpolate_hsl: Callable[..., Color]
    interpolate_hsv: Callable[..., Color]
    interpolate_hwb: Callable[..., Color]
    interpolate_oklab: Callable[[Color, Color, float], Color]
    interpolate: Callable[..., Color]
    # attached by colors/interop.py
    from_tuple: Callable[..., Color]
    to_tuple: Callable[..., Tuple[float, ...]]
    to_array: Callable[..., Any]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0, a: float = 1.0) -> None:
        self._r = float(r)
        self._g = float(g)
        self._b = float(b)
        self._a = float(a)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        """
        Args:
            r: Red value [0..1]
            g: Green value [0..1]
            b: Blue value [0..1]
        """
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """
        Args:
            r: Red value [0..1]
            g: Green value [0..1]
            b: Blue value [0..1]
            a: Alpha value [0..1]
        """
        return cls(clamp01(r), clamp01(g), clamp01(b), clamp01(a))

    @classmethod
    def from_rgb_u8(cls, r: int, g: int, b: int) -> Color:
        """Channels in [0..255]."""
        return cls.from_rgba_u8(r, g, b, 255)

    @classmethod
    def from_rgba_u8(cls, r: int, g: int, b: int, a: int) -> Color:
        """Channels and alpha in [0..255]."""
        return cls.from_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_linear_rgb(cls, r: float, g: float, b: float) -> Color:
        return cls.from_linear_rgba(r, g, b, 1.0)

    @classmethod
    def from_linear_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """
        Args:
            r: Linear red [0..1]
            g: Linear green [0..1]
            b: Linear blue [0..1]
            a: Alpha [0..1], never gamma-encoded
        """
        return cls.from_rgba(*linear_rgb_to_rgb(r, g, b), a)

    @classmethod
    def from_linear_rgb_u8(cls, r: int, g: int, b: int) -> Color:
        return cls.from_linear_rgba(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @classmethod
    def from_linear_rgba_u8(cls, r: int, g: int, b: int, a: int) -> Color:
        return cls.from_linear_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        return cls.from_hsva(h, s, v, 1.0)

    @classmethod
    def from_hsva(cls, h: float, s: float, v: float, a: float) -> Color:
        """
        Args:
            h: Hue angle in degrees, any value is wrapped into [0..360)
            s: Saturation [0..1]
            v: Value [0..1]
            a: Alpha [0..1]
        """
        rgb = hsv_to_rgb(normalize_angle(h), clamp01(s), clamp01(v))
        return cls.from_rgba(*rgb, a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        return cls.from_hsla(h, s, l, 1.0)

    @classmethod
    def from_hsla(cls, h: float, s: float, l: float, a: float) -> Color:
        """
        Args:
            h: Hue angle in degrees, any value is wrapped into [0..360)
            s: Saturation [0..1]
            l: Lightness [0..1]
            a: Alpha [0..1]
        """
        rgb = hsl_to_rgb(normalize_angle(h), clamp01(s), clamp01(l))
        return cls.from_rgba(*rgb, a)

    @classmethod
    def from_hwb(cls, h: float, w: float, b: float) -> Color:
        return cls.from_hwba(h, w, b, 1.0)

    @classmethod
    def from_hwba(cls, h: float, w: float, b: float, a: float) -> Color:
        """
        Args:
            h: Hue angle in degrees, any value is wrapped into [0..360)
            w: Whiteness [0..1]
            b: Blackness [0..1]
            a: Alpha [0..1]
        """
        rgb = hwb_to_rgb(normalize_angle(h), clamp01(w), clamp01(b))
        return cls.from_rgba(*rgb, a)

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float) -> Color:
        return cls.from_oklaba(l, a, b, 1.0)

    @classmethod
    def from_oklaba(cls, l: float, a: float, b: float, alpha: float) -> Color:
        """
        Args:
            l: Perceived lightness
            a: How green/red the color is
            b: How blue/yellow the color is
            alpha: Alpha [0..1]
        """
        return cls.from_linear_rgba(*oklab_to_linear_rgb(l, a, b), alpha)

    @classmethod
    def from_html(cls, text: str) -> Color:
        """
        Parse a CSS color string such as ``"rgb(255,0,0)"`` or ``"gold"``.

        Raises:
            ParseColorError: if the text is not a recognized color syntax
        """
        from ..parser import parse  # local import to avoid cycles
        return parse(text)

    # ------------------ ACCESSORS ------------------
    def rgba(self) -> Quad:
        """Red, green, blue and alpha in [0..1]."""
        return self._r, self._g, self._b, self._a

    def rgba_u8(self) -> Tuple[int, int, int, int]:
        """Red, green, blue and alpha in [0..255]."""
        return to_u8(self._r), to_u8(self._g), to_u8(self._b), to_u8(self._a)

    def to_linear_rgba(self) -> Quad:
        return (*rgb_to_linear_rgb(self._r, self._g, self._b), self._a)

    def to_linear_rgba_u8(self) -> Tuple[int, int, int, int]:
        r, g, b, a = self.to_linear_rgba()
        return to_u8(r), to_u8(g), to_u8(b), to_u8(a)

    def to_hsva(self) -> Quad:
        """Returns ``(h, s, v, a)`` with h in [0..360) degrees."""
        return (*rgb_to_hsv(self._r, self._g, self._b), self._a)

    def to_hsla(self) -> Quad:
        """Returns ``(h, s, l, a)`` with h in [0..360) degrees."""
        return (*rgb_to_hsl(self._r, self._g, self._b), self._a)

    def to_hwba(self) -> Quad:
        """Returns ``(h, w, b, a)`` with h in [0..360) degrees."""
        return (*rgb_to_hwb(self._r, self._g, self._b), self._a)

    def to_oklaba(self) -> Quad:
        """Returns ``(l, a, b, alpha)``."""
        r, g, b, _ = self.to_linear_rgba()
        return (*linear_rgb_to_oklab(r, g, b), self._a)

    # ------------------ FORMATTING ------------------
    def to_hex_string(self) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when alpha is not fully opaque."""
        r, g, b, a = self.rgba_u8()
        if a < 255:
            return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_rgb_string(self) -> str:
        """CSS ``rgb()`` string, ``rgba()`` with the raw alpha when it is below 1."""
        r, g, b, _ = self.rgba_u8()
        if self._a < 1.0:
            return f"rgba({r},{g},{b},{format_float(self._a)})"
        return f"rgb({r},{g},{b})"

    def __str__(self) -> str:
        return "RGBA({})".format(",".join(format_float(v) for v in self.rgba()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(r={self._r!r}, g={self._g!r}, b={self._b!r}, a={self._a!r})"

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self.rgba())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba() == other.rgba()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba() < other.rgba()

    def __hash__(self) -> int:
        return hash(self.rgba())

    def __copy__(self) -> Color:
        return self

    def __deepcopy__(self, memo) -> Color:
        return self

    def __reduce__(self):
        return (self.__class__, self.rgba())

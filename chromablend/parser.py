"""
CSS color string parsing.

Supported syntaxes (case-insensitive, surrounding whitespace ignored):

- named colors from the CSS3 list, plus ``transparent``
- hex: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (``#`` optional)
- ``rgb()``/``rgba()``, ``hsl()``/``hsla()``, ``hwb()``/``hwba()``,
  ``hsv()``/``hsva()`` with comma or space separators and an optional
  ``/`` before alpha; hues accept ``deg``, ``rad``, ``grad`` and ``turn``
"""
from __future__ import annotations
import logging
import math
import re
from typing import Callable, Dict, List

import webcolors

from .colors import Color

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"^([a-z]+)\s*\((.*)\)$")
_SEPARATOR_RE = re.compile(r"[\s,/]+")
_HEX_RE = re.compile(r"^[0-9a-f]+$")

# degrees per unit
_ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


class ParseColorError(ValueError):
    """Raised when a string is not a recognized color syntax."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        message = f"Invalid color string: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def _parse_float(token: str) -> float:
    value = float(token)
    if math.isnan(value):
        raise ValueError(f"not a number: {token}")
    return value


def _parse_fraction(token: str) -> float:
    """``50%`` and ``0.5`` both mean one half."""
    if token.endswith("%"):
        return _parse_float(token[:-1]) / 100.0
    return _parse_float(token)


def _parse_channel(token: str) -> float:
    """``255`` and ``100%`` both mean full intensity."""
    if token.endswith("%"):
        return _parse_float(token[:-1]) / 100.0
    return _parse_float(token) / 255.0


def _parse_hue(token: str) -> float:
    for unit, factor in _ANGLE_UNITS.items():
        if token.endswith(unit):
            return _parse_float(token[: -len(unit)]) * factor
    return _parse_float(token)


def _parse_hex(text: str, digits: str) -> Color:
    if not _HEX_RE.match(digits) or len(digits) not in (3, 4, 6, 8):
        raise ParseColorError(text, "bad hex digits")

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(values) == 3:
        values.append(255)
    return Color.from_rgba_u8(*values)


def _rgb(args: List[str]) -> Color:
    r, g, b = (_parse_channel(t) for t in args[:3])
    return Color.from_rgba(r, g, b, _alpha(args))


def _hsl(args: List[str]) -> Color:
    return Color.from_hsla(_parse_hue(args[0]), _parse_fraction(args[1]), _parse_fraction(args[2]), _alpha(args))


def _hwb(args: List[str]) -> Color:
    return Color.from_hwba(_parse_hue(args[0]), _parse_fraction(args[1]), _parse_fraction(args[2]), _alpha(args))


def _hsv(args: List[str]) -> Color:
    return Color.from_hsva(_parse_hue(args[0]), _parse_fraction(args[1]), _parse_fraction(args[2]), _alpha(args))


def _alpha(args: List[str]) -> float:
    return _parse_fraction(args[3]) if len(args) == 4 else 1.0


FUNCTIONS: Dict[str, Callable[[List[str]], Color]] = {
    "rgb": _rgb,
    "rgba": _rgb,
    "hsl": _hsl,
    "hsla": _hsl,
    "hwb": _hwb,
    "hwba": _hwb,
    "hsv": _hsv,
    "hsva": _hsv,
}


def _parse_function(text: str, name: str, inner: str) -> Color:
    fn = FUNCTIONS.get(name)
    if fn is None:
        raise ParseColorError(text, f"unknown function {name}")

    args = [t for t in _SEPARATOR_RE.split(inner.strip()) if t]
    if len(args) not in (3, 4):
        raise ParseColorError(text, f"{name} expects 3 or 4 arguments, got {len(args)}")

    try:
        return fn(args)
    except ValueError as exc:
        raise ParseColorError(text, str(exc)) from exc


def parse(text: str) -> Color:
    """
    Parse a CSS color string.

    Args:
        text: e.g. ``"#ff0000"``, ``"rgb(255, 0, 0)"``, ``"hsl(120deg 100% 50% / 0.5)"``, ``"gold"``

    Returns:
        The parsed color

    Raises:
        ParseColorError: if the text is not a recognized color syntax
    """
    s = text.strip().lower()

    try:
        if s == "transparent":
            return Color(0.0, 0.0, 0.0, 0.0)

        if s.startswith("#"):
            return _parse_hex(text, s[1:])

        match = _FUNCTION_RE.match(s)
        if match:
            return _parse_function(text, match.group(1), match.group(2))

        try:
            named = webcolors.name_to_rgb(s)
        except ValueError:
            named = None
        if named is not None:
            return Color.from_rgb_u8(named.red, named.green, named.blue)

        if _HEX_RE.match(s):
            return _parse_hex(text, s)
    except ParseColorError as exc:
        logger.debug("Failed to parse color %r: %s", text, exc)
        raise

    logger.debug("Failed to parse color %r: unrecognized syntax", text)
    raise ParseColorError(text)

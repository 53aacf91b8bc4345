import copy
import pickle

import pytest

from chromablend import Color


def test_default_is_opaque_black():
    assert Color().rgba() == (0.0, 0.0, 0.0, 1.0)


def test_constructor_stores_values_as_given():
    c = Color(1.5, -0.25, 0.5, 2.0)
    assert c.rgba() == (1.5, -0.25, 0.5, 2.0)
    assert all(isinstance(v, float) for v in c)


def test_from_rgb_clamps():
    assert Color.from_rgb(1.5, -0.2, 0.5).rgba() == (1.0, 0.0, 0.5, 1.0)
    assert Color.from_rgba(0.2, 0.3, 0.4, 7.0).a == 1.0


def test_nan_channels_map_to_zero():
    nan = float("nan")
    c = Color.from_rgba(nan, 0.5, 0.5, 1.0)
    assert c.r == 0.0
    assert c == Color.from_rgba(nan, 0.5, 0.5, 1.0)
    assert hash(c) == hash(Color.from_rgba(nan, 0.5, 0.5, 1.0))
    assert Color.from_tuple((0.5, nan, 0.5, nan)).rgba() == (0.5, 0.0, 0.5, 0.0)
    for v in Color.from_hsla(nan, nan, 0.5, 1.0):
        assert 0.0 <= v <= 1.0


def test_from_rgb_u8():
    c = Color.from_rgb_u8(255, 0, 0)
    assert c.rgba() == (1.0, 0.0, 0.0, 1.0)
    assert Color.from_rgba_u8(0, 0, 255, 0).rgba() == (0.0, 0.0, 1.0, 0.0)


def test_from_rgb_u8_clamps():
    assert Color.from_rgb_u8(300, -5, 128).rgba_u8() == (255, 0, 128, 255)


def test_from_hsl():
    assert Color.from_hsl(0.0, 1.0, 0.5).rgba() == (1.0, 0.0, 0.0, 1.0)
    assert Color.from_hsla(120.0, 1.0, 0.5, 0.25).rgba() == (0.0, 1.0, 0.0, 0.25)


def test_from_hsl_wraps_hue():
    a = Color.from_hsl(-240.0, 1.0, 0.5)
    b = Color.from_hsl(120.0, 1.0, 0.5)
    for x, y in zip(a, b):
        assert abs(x - y) < 1e-9
    assert Color.from_hsl(360.0, 1.0, 0.5).rgba() == (1.0, 0.0, 0.0, 1.0)


def test_from_hsv():
    assert Color.from_hsv(240.0, 1.0, 1.0).rgba() == (0.0, 0.0, 1.0, 1.0)
    assert Color.from_hsv(0.0, 0.0, 0.0).rgba() == (0.0, 0.0, 0.0, 1.0)


def test_from_hwb():
    assert Color.from_hwb(0.0, 0.0, 0.0).rgba() == (1.0, 0.0, 0.0, 1.0)
    assert Color.from_hwba(90.0, 0.5, 0.5, 0.5).rgba() == (0.5, 0.5, 0.5, 0.5)


def test_hue_constructors_clamp_inputs():
    assert Color.from_hsl(0.0, 2.0, 0.5) == Color.from_hsl(0.0, 1.0, 0.5)
    assert Color.from_hsv(0.0, 1.0, -1.0) == Color.from_hsv(0.0, 1.0, 0.0)


def test_from_linear_rgb():
    c = Color.from_linear_rgb(0.21404114048223255, 0.0, 1.0)
    assert abs(c.r - 0.5) < 1e-9
    assert c.g == 0.0
    assert abs(c.b - 1.0) < 1e-9


def test_from_linear_rgb_u8_keeps_alpha_linear():
    c = Color.from_linear_rgba_u8(0, 0, 0, 51)
    assert abs(c.a - 0.2) < 1e-9


def test_from_oklab():
    c = Color.from_oklab(1.0, 0.0, 0.0)
    for v in c.rgba():
        assert abs(v - 1.0) < 1e-3


def test_from_oklab_out_of_gamut_is_clamped():
    c = Color.from_oklab(0.5, 0.4, 0.4)
    for v in c.rgba():
        assert 0.0 <= v <= 1.0


def test_from_html():
    assert Color.from_html("#00ff00") == Color.from_rgb(0.0, 1.0, 0.0)


def test_accessors():
    c = Color.from_rgba(0.25, 0.5, 0.75, 0.5)
    assert c.r == 0.25
    assert c.g == 0.5
    assert c.b == 0.75
    assert c.a == 0.5
    assert list(c) == [0.25, 0.5, 0.75, 0.5]
    assert c.rgba_u8() == (64, 128, 191, 128)


def test_to_hsla_hsva_hwba():
    c = Color.from_rgba(0.25, 0.5, 0.75, 0.5)
    h, s, l, a = c.to_hsla()
    assert abs(h - 210) < 1e-9
    assert abs(s - 0.5) < 1e-9
    assert abs(l - 0.5) < 1e-9
    assert a == 0.5

    h, s, v, a = c.to_hsva()
    assert abs(h - 210) < 1e-9
    assert abs(s - 2 / 3) < 1e-9
    assert abs(v - 0.75) < 1e-9
    assert a == 0.5

    h, w, b, a = c.to_hwba()
    assert abs(h - 210) < 1e-9
    assert abs(w - 0.25) < 1e-9
    assert abs(b - 0.25) < 1e-9


def test_to_linear_rgba():
    r, g, b, a = Color.from_rgba(0.5, 0.0, 1.0, 0.5).to_linear_rgba()
    assert abs(r - 0.21404114048223255) < 1e-12
    assert g == 0.0
    assert abs(b - 1.0) < 1e-12
    assert a == 0.5
    assert Color.from_rgba(0.5, 0.0, 1.0, 0.5).to_linear_rgba_u8() == (55, 0, 255, 128)


def test_to_oklaba():
    l, a, b, alpha = Color.from_rgba(1.0, 0.0, 0.0, 0.3).to_oklaba()
    assert abs(l - 0.627955) < 1e-3
    assert abs(a - 0.224863) < 1e-3
    assert abs(b - 0.125846) < 1e-3
    assert alpha == 0.3


def test_immutable():
    c = Color.from_rgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.r = 0.5
    with pytest.raises(AttributeError):
        c._r = 0.5
    with pytest.raises(AttributeError):
        c.extra = 1


def test_equality_and_hash():
    a = Color.from_rgb(1.0, 0.0, 0.0)
    b = Color(1.0, 0.0, 0.0, 1.0)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Color.from_rgb(0.0, 1.0, 0.0)}) == 2
    assert a != Color.from_rgba(1.0, 0.0, 0.0, 0.5)
    assert a != (1.0, 0.0, 0.0, 1.0)


def test_ordering():
    colors = [Color(0.5, 0.0, 0.0), Color(0.0, 0.0, 1.0), Color(0.5, 0.0, 0.0, 0.5)]
    assert sorted(colors) == [Color(0.0, 0.0, 1.0), Color(0.5, 0.0, 0.0, 0.5), Color(0.5, 0.0, 0.0)]
    assert Color(0.0, 0.0, 0.0) <= Color(0.0, 0.0, 0.0)


def test_copy_and_pickle():
    c = Color.from_rgba(0.1, 0.2, 0.3, 0.4)
    assert copy.copy(c) is c
    assert copy.deepcopy(c) is c
    restored = pickle.loads(pickle.dumps(c))
    assert restored == c
    assert restored is not c


def test_subclass_constructors_return_subclass():
    class Swatch(Color):
        __slots__ = ()

    assert type(Swatch.from_hsl(10.0, 0.5, 0.5)) is Swatch
    assert type(Swatch.from_rgb(0.1, 0.2, 0.3).interpolate(Swatch(), 0.5)) is Swatch

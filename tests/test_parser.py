import pytest

from chromablend import Color, ParseColorError, parse


def test_named_colors():
    assert parse("red") == Color.from_rgb(1.0, 0.0, 0.0)
    assert parse("  GOLD ").rgba_u8() == (255, 215, 0, 255)
    assert parse("navy").rgba_u8() == (0, 0, 128, 255)


def test_transparent():
    assert parse("transparent").rgba() == (0.0, 0.0, 0.0, 0.0)


def test_hex():
    red = Color.from_rgb(1.0, 0.0, 0.0)
    assert parse("#ff0000") == red
    assert parse("#F00") == red
    assert parse("ff0000") == red
    assert parse("#ff000080").rgba_u8() == (255, 0, 0, 128)
    assert parse("#f008").rgba_u8() == (255, 0, 0, 136)


def test_rgb_function():
    red = Color.from_rgb(1.0, 0.0, 0.0)
    assert parse("rgb(255, 0, 0)") == red
    assert parse("rgb(255 0 0)") == red
    assert parse("RGB(100%, 0%, 0%)") == red
    assert parse("rgba(255, 0, 0, 0.5)").a == 0.5
    assert parse("rgb(255 0 0 / 50%)").a == 0.5


def test_rgb_function_clamps():
    assert parse("rgb(300, -20, 0)").rgba() == (1.0, 0.0, 0.0, 1.0)


def test_hsl_function():
    assert parse("hsl(120deg 100% 50%)").rgba_u8() == (0, 255, 0, 255)
    assert parse("hsl(120, 100%, 50%)").rgba_u8() == (0, 255, 0, 255)
    assert parse("hsla(0, 100%, 50%, 0.25)").rgba() == (1.0, 0.0, 0.0, 0.25)


def test_hue_units():
    cyan = (0, 255, 255, 255)
    assert parse("hsl(0.5turn, 100%, 50%)").rgba_u8() == cyan
    assert parse("hsl(200grad, 100%, 50%)").rgba_u8() == cyan
    assert parse("hsl(3.141592653589793rad, 100%, 50%)").rgba_u8() == cyan
    assert parse("hsl(540, 100%, 50%)").rgba_u8() == cyan


def test_hwb_function():
    assert parse("hwb(0 0% 0%)") == Color.from_rgb(1.0, 0.0, 0.0)
    assert parse("hwb(0 50% 50%)").rgba() == (0.5, 0.5, 0.5, 1.0)


def test_hsv_function():
    assert parse("hsv(120, 100%, 100%)").rgba_u8() == (0, 255, 0, 255)
    assert parse("hsva(240 100% 100% / 0.5)").rgba() == (0.0, 0.0, 1.0, 0.5)


def test_from_html_matches_parse():
    assert Color.from_html("hsl(30, 100%, 50%)") == parse("hsl(30, 100%, 50%)")


@pytest.mark.parametrize("text", [
    "",
    "not-a-color",
    "#12",
    "#12345",
    "#gg0000",
    "rgb(1, 2)",
    "rgb(1, 2, 3, 4, 5)",
    "rgb(a, b, c)",
    "foo(1, 2, 3)",
    "hsl(nan, 50%, 50%)",
])
def test_invalid(text):
    with pytest.raises(ParseColorError) as exc_info:
        parse(text)
    assert exc_info.value.text == text


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse("#zzz")

"""Basic Chromablend usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromablend import Color, HueMode, convert, parse
from chromablend.types.format_type import FormatType


def demonstrate_colors() -> None:
    # Construct colors from different spaces and read them back.
    accent = Color.from_rgb_u8(255, 128, 64)
    print("RGB as floats:", accent.rgba())
    print("As HSV:", accent.to_hsva())
    print("As Oklab:", accent.to_oklaba())
    print("Hex:", accent.to_hex_string(), "CSS:", accent.to_rgb_string())

    converted = convert((255, 128, 64), "rgb", "hsv", input_type="int", output_type="int")
    print("RGB -> HSV (int):", converted)

    teal = parse("hsl(180deg 60% 40% / 0.8)")
    print("Parsed:", teal, teal.to_hex_string())


def demonstrate_blending() -> None:
    red = Color.from_rgb(1.0, 0.0, 0.0)
    blue = Color.from_rgb(0.0, 0.0, 1.0)

    for space in ("rgb", "linear_rgb", "hsl", "oklab"):
        steps = [red.interpolate(blue, i / 4, space).to_hex_string() for i in range(5)]
        print(f"{space:>10}:", " ".join(steps))

    # Hue-aware interpolation from green to purple the long way round.
    green = Color.from_hsv(120.0, 1.0, 1.0)
    purple = Color.from_hsv(300.0, 1.0, 1.0)
    ring = [green.interpolate_hsv(purple, i / 4, HueMode.CW).to_hex_string() for i in range(5)]
    print("HSV clockwise:", " ".join(ring))

    as_percent = blue.interpolate_oklab(red, 0.5).to_tuple(FormatType.PERCENTAGE)
    print("Oklab midpoint (%):", as_percent)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_blending()

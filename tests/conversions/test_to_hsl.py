from chromablend.conversions.to_hsl import hsv_to_hsl, rgb_to_hsl
from ..samples import samples_hsv_hsl, samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_hue_in_range():
    for i in range(0, 256, 15):
        for j in range(0, 256, 51):
            h, _, _ = rgb_to_hsl(i / 255, j / 255, (255 - i) / 255)
            assert 0.0 <= h < 360.0


def test_achromatic_hue_is_zero():
    for v in (0.0, 0.2, 0.7, 1.0):
        assert rgb_to_hsl(v, v, v) == (0.0, 0.0, v)

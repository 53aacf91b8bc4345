from chromablend.conversions.to_hsv import hsl_to_hsv, rgb_to_hsv
from ..samples import samples_hsv_hsl, samples_rgb_hsv


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9


def test_hsl_to_hsv():
    for (h_exp, s_exp, v_exp), (h, s, l) in samples_hsv_hsl.items():
        if v_exp == 0.0:
            # black carries no saturation on the way back
            continue
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9


def test_hsl_black_to_hsv():
    assert hsl_to_hsv(45.0, 0.5, 0.0) == (45.0, 0.0, 0.0)


def test_achromatic():
    assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert rgb_to_hsv(0.4, 0.4, 0.4) == (0.0, 0.0, 0.4)

from paletter.conversions import convert, np_srgb_to_hsl, np_hsl_to_srgb
from paletter.parsing import parse_color
from samples import samples_hex_hsl, hsl_tolerance
import numpy as np


def test_srgb_to_hsl():
    for hex_color, (h_exp, s_exp, l_exp) in samples_hex_hsl.items():
        _, rgb, _ = parse_color(hex_color)
        h, s, l = convert(rgb, "srgb", "hsl")

        assert abs(h - h_exp) < hsl_tolerance
        assert abs(s - s_exp) < hsl_tolerance
        assert abs(l - l_exp) < hsl_tolerance


def test_hsl_to_srgb():
    for hex_color, hsl in samples_hex_hsl.items():
        _, rgb_exp, _ = parse_color(hex_color)
        rgb = convert(hsl, "hsl", "srgb")

        assert np.allclose(rgb, rgb_exp, atol=1e-3)


def test_hue_wraps():
    assert np.allclose(
        np_hsl_to_srgb(360.0, 100.0, 50.0),
        np_hsl_to_srgb(0.0, 100.0, 50.0),
    )
    assert np.allclose(
        np_hsl_to_srgb(-120.0, 100.0, 50.0),
        np_hsl_to_srgb(240.0, 100.0, 50.0),
    )


def test_hsl_numpy_matches_scalar():
    rgb = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5], [0.2, 0.2, 0.2]])
    batch = np_srgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])

    for row, expected in zip(rgb, batch):
        assert np.allclose(convert(tuple(row), "srgb", "hsl"), expected)


def test_extended_srgb_does_not_divide_by_zero():
    # lightness 1 with non-zero delta only happens out of gamut
    hsl = np_srgb_to_hsl(np.array(1.2), np.array(0.8), np.array(1.0))
    assert np.isfinite(hsl).all()

from paletter.conversions import convert, np_srgb_to_lch, np_lch_to_srgb, np_srgb_to_xyz_d65
from paletter.parsing import parse_color
from samples import samples_hex_lch, lch_tolerance
import numpy as np


def test_srgb_to_lch_reference_values():
    for hex_color, (l_exp, c_exp, h_exp) in samples_hex_lch.items():
        _, rgb, _ = parse_color(hex_color)
        l, c, h = convert(rgb, "srgb", "lch")

        assert abs(l - l_exp) < lch_tolerance
        assert abs(c - c_exp) < lch_tolerance
        assert abs(h - h_exp) < lch_tolerance


def test_achromatic_hue_is_zero_not_nan():
    greys = np.array([[0.0, 0.0, 0.0], [0.5, 0.5, 0.5], [1.0, 1.0, 1.0]])
    lch = np_srgb_to_lch(greys)

    assert not np.isnan(lch).any()
    assert np.all(lch[..., 2] == 0.0)
    assert np.all(lch[..., 1] < 0.02)


def test_hue_stays_in_range():
    rgb = np.array([[1.0, 0.0, 0.5], [0.2, 0.0, 1.0], [0.0, 0.3, 1.0]])
    hue = np_srgb_to_lch(rgb)[..., 2]

    assert np.all(hue >= 0.0)
    assert np.all(hue < 360.0)


def test_out_of_gamut_lch_is_not_clamped():
    rgb = np_lch_to_srgb(np.array([50.0, 200.0, 40.0]))

    assert rgb.max() > 1.0 or rgb.min() < 0.0


def test_white_luminance_is_one():
    xyz = np_srgb_to_xyz_d65(np.array([1.0, 1.0, 1.0]))
    assert abs(xyz[1] - 1.0) < 1e-9

from paletter.conversions import convert, np_convert
from paletter.parsing import parse_color
from samples import samples_hex
import numpy as np
import pytest


def test_convert_returns_tuple():
    result = convert((1.0, 0.5, 0.25), "srgb", "lch")
    assert isinstance(result, tuple)
    assert len(result) == 3
    assert all(isinstance(v, float) for v in result)


def test_same_space_is_identity():
    assert convert((50, 20, 10), "lch", "lch") == (50.0, 20.0, 10.0)


def test_unknown_space():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "srgb", "cmyk")


def test_round_trip_srgb_lch_within_one_byte():
    for hex_color in samples_hex:
        _, rgb, _ = parse_color(hex_color)
        back = convert(convert(rgb, "srgb", "lch"), "lch", "srgb")

        assert np.allclose(back, rgb, atol=1 / 255)


def test_round_trip_through_hsl_and_lch():
    for hex_color in samples_hex:
        _, rgb, _ = parse_color(hex_color)
        hsl = convert(rgb, "srgb", "hsl")
        lch = convert(hsl, "hsl", "lch")
        back = convert(lch, "lch", "srgb")

        assert np.allclose(back, rgb, atol=1 / 255)


def test_np_convert_grid_round_trip():
    steps = np.linspace(0.0, 1.0, 5)
    grid = np.stack(np.meshgrid(steps, steps, steps, indexing="ij"), axis=-1)

    lch = np_convert(grid, "srgb", "lch")
    back = np_convert(lch, "lch", "srgb")

    assert lch.shape == grid.shape
    assert np.allclose(back, grid, atol=1 / 255)


def test_np_convert_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 4)), "srgb", "lch")

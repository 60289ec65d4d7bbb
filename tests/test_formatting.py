from paletter.colors import ColorValue
from paletter.errors import ParseError, UnsupportedFormat
from paletter.formatting import format_color, edit_lch, lch_components
from paletter.types.format_type import FormatKind
from samples import samples_hex
import re
import pytest


@pytest.mark.parametrize("kind, expected", [
    ("hex", "#ff0000"),
    ("rgb", "rgb(255 0 0)"),
    ("hsl", "hsl(0 100% 50%)"),
    (FormatKind.HEX, "#ff0000"),
])
def test_red(kind, expected):
    assert format_color("#ff0000", kind) == expected


def test_named_colors():
    assert format_color("rebeccapurple", "hex") == "#663399"
    assert format_color("rebeccapurple", "hsl") == "hsl(270 50% 40%)"
    assert format_color("white", "rgb") == "rgb(255 255 255)"


def test_lch_precision():
    assert format_color("lch(50 92 52)", "lch") == "lch(50 92 52)"
    assert format_color("lch(50.5 0 0)", "lch") == "lch(50.5 0 0)"
    assert format_color("lch(33.3333 12.346 200)", "lch") == "lch(33.33 12.35 200)"


def test_lch_shape_from_srgb():
    text = format_color("#ff0000", "lch")
    assert re.fullmatch(r"lch\(\d+(\.\d{1,2})? \d+(\.\d{1,2})? \d+(\.\d{1,2})?\)", text)


def test_hex_round_trips_through_lch():
    for hex_color in samples_hex:
        lch = ColorValue.parse(hex_color).to("lch")
        assert format_color(lch, "hex") == hex_color


def test_out_of_gamut_clamps_only_in_text():
    vivid = ColorValue.parse("lch(50 200 40)")

    assert re.fullmatch(r"#[0-9a-f]{6}", format_color(vivid, "hex"))
    r, g, b = map(int, re.fullmatch(r"rgb\((\d+) (\d+) (\d+)\)", format_color(vivid, "rgb")).groups())
    assert all(0 <= v <= 255 for v in (r, g, b))
    assert format_color(vivid, "lch") == "lch(50 200 40)"
    assert vivid.channels == (50.0, 200.0, 40.0)


def test_translucent():
    color = "rgb(255 0 0 / 0.5)"
    assert format_color(color, "hex") == "#ff000080"
    assert format_color(color, "rgb") == "rgb(255 0 0 / 0.5)"
    assert format_color(color, "hsl") == "hsl(0 100% 50% / 0.5)"


def test_unsupported_format():
    with pytest.raises(UnsupportedFormat):
        format_color("#ff0000", "cmyk")
    with pytest.raises(UnsupportedFormat):
        format_color("#ff0000", None)


def test_invalid_color():
    with pytest.raises(ParseError):
        format_color("not a color", "hex")


def test_edit_lch():
    assert edit_lch("lch(50 92 52)", "l", 70) == "lch(70 92 52)"
    assert edit_lch("lch(50 92 52)", "c", 0) == "lch(50 0 52)"
    assert edit_lch("lch(50 92 52)", "h", 300) == "lch(50 92 300)"


def test_edit_lch_from_other_space():
    edited = ColorValue.parse(edit_lch("#ff0000", "l", 40))
    assert edited.space.value == "lch"
    assert edited["l"] == 40.0
    assert abs(edited["c"] - 106.84) < 0.05


def test_edit_lch_unknown_component():
    with pytest.raises(ValueError):
        edit_lch("lch(50 92 52)", "s", 10)


def test_lch_components():
    assert lch_components("lch(50.4 91.6 95)") == (50, 92, 95)
    assert lch_components("white") == (100, 0, 0)

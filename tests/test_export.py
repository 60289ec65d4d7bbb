from paletter.errors import UnsupportedFormat
from paletter.export import export_css
from paletter.formatting import format_color
from paletter.table import build_table
import pytest


def test_layout():
    table = build_table(["#ff0000", "#0000ff"], [25, 50, 75])
    lines = export_css(table, "white", "hex").splitlines()

    assert lines[0] == "--background: #ffffff;"
    assert [line.split(":")[0] for line in lines[1:]] == [
        "--color-1-1", "--color-1-2", "--color-1-3",
        "--color-2-1", "--color-2-2", "--color-2-3",
    ]


def test_values_follow_format():
    table = build_table(["#ff0000"], [50])
    text = export_css(table, "black", "rgb")

    assert text == "\n".join([
        "--background: rgb(0 0 0);",
        f"--color-1-1: {format_color(table[0][0], 'rgb')};",
    ])


def test_empty_table():
    table = build_table([], [5, 50])
    assert export_css(table, "#102030", "hex") == "--background: #102030;"


def test_unknown_format():
    table = build_table(["#ff0000"], [50])
    with pytest.raises(UnsupportedFormat):
        export_css(table, "white", "cmyk")

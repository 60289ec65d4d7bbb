from paletter.colors import ColorValue
from paletter.errors import IndexOutOfRange, ParseError
from paletter.shading import ShadePolicy, shade
from paletter.table import PaletteTable, build_table
from paletter.types.color_types import ColorSpace
import pytest

COLORS = ["#ff0000", "lch(50 50 270)", "rebeccapurple"]
SHADES = [5, 50, 95]


def test_shape_and_order():
    table = build_table(COLORS, SHADES)

    assert table.shape == (3, 3)
    assert len(table) == 3
    for i, color in enumerate(COLORS):
        for j, level in enumerate(SHADES):
            assert table[i][j].is_close(shade(color, level), 1e-9)
            assert table.cell(i, j) is table[i][j]


def test_rows_and_columns():
    table = build_table(COLORS, SHADES)
    assert table.column(1) == table[1]
    assert table.row(2) == tuple(column[2] for column in table)


def test_cells_are_lch():
    table = build_table(["rgb(255 0 0 / 0.25)"], [50])
    cell = table.cell(0, 0)
    assert cell.space == ColorSpace.LCH
    assert cell.alpha == 0.25


def test_single_color_scenario():
    table = build_table(["#ff0000"], [0, 50, 100])
    red = ColorValue.parse("#ff0000").to("lch")

    assert table.shape == (1, 3)
    assert table[0][0]["c"] == 0.0
    assert table[0][2]["c"] == 0.0
    assert abs(table[0][1]["c"] - red["c"]) < 1e-9


def test_policy():
    blend = build_table(["lch(80 40 120)"], [50])
    overwrite = build_table(["lch(80 40 120)"], [50], ShadePolicy.OVERWRITE)
    assert abs(blend[0][0]["l"] - 65.0) < 1e-9
    assert overwrite[0][0]["l"] == 50.0
    assert overwrite.policy == ShadePolicy.OVERWRITE


@pytest.mark.parametrize("colors, shades, shape", [
    ([], [5, 50], (0, 2)),
    (["#ff0000"], [], (1, 0)),
    ([], [], (0, 0)),
])
def test_empty_inputs(colors, shades, shape):
    table = build_table(colors, shades)
    assert table.shape == shape
    assert [len(column) for column in table] == [shape[1]] * shape[0]


def test_cached_on_inputs():
    first = build_table(COLORS, SHADES)
    assert build_table(list(COLORS), tuple(SHADES)) is first
    assert build_table(COLORS, [5, 50]) is not first


def test_invalid_color():
    with pytest.raises(ParseError):
        build_table(["#ff0000", "nope"], SHADES)


def test_repr():
    table = build_table(COLORS, SHADES)
    assert isinstance(table, PaletteTable)
    assert repr(table) == "PaletteTable(colors=3, shades=3, policy='blend')"


@pytest.mark.parametrize("color_index, shade_index", [(-1, 0), (0, -1), (3, 0), (0, 3), (True, 0), (0, 1.0)])
def test_cell_rejects_bad_indices(color_index, shade_index):
    table = build_table(COLORS, SHADES)
    with pytest.raises(IndexOutOfRange):
        table.cell(color_index, shade_index)


def test_row_and_column_reject_negative_indices():
    table = build_table(COLORS, SHADES)
    with pytest.raises(IndexOutOfRange):
        table.column(-1)
    with pytest.raises(IndexOutOfRange):
        table.row(-1)

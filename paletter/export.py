"""CSS custom property export of a palette table."""

from __future__ import annotations

from .colors.color_value import ColorValue
from .formatting import format_color, format_kind
from .table import PaletteTable
from .types.format_type import FormatKind


def export_css(table: PaletteTable, background: ColorValue | str, kind: FormatKind | str) -> str:
    """
    Assemble CSS declarations for the whole table.

    The background comes first, then ``--color-{col}-{row}`` for every cell,
    1-based, all shades of the first color before the second color::

        --background: <background>;
        --color-1-1: <color 1, shade 1>;
        --color-1-2: <color 1, shade 2>;
    """
    kind = format_kind(kind)
    lines = [f"--background: {format_color(background, kind)};"]
    for color_id, column in enumerate(table, start=1):
        for shade_id, cell in enumerate(column, start=1):
            lines.append(f"--color-{color_id}-{shade_id}: {format_color(cell, kind)};")
    return "\n".join(lines)

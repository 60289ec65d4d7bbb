from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator, Sequence

import numpy as np

from .colors.color_value import ColorValue
from .errors import IndexOutOfRange
from .shading import ShadePolicy, np_shade
from .types.color_types import ColorSpace


def _check_index(index: int, length: int) -> None:
    # Same rule as OrderedCollection: no negative or non-int indices
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < length:
        raise IndexOutOfRange(index, length)


class PaletteTable:
    """
    Color x shade matrix of derived colors.

    ``table[i][j]`` is color ``i`` of the palette at shade level ``j``;
    columns follow the palette order and rows the shade list order. All
    cells are LCH colors carrying their base color's alpha.
    """

    __slots__ = ('colors', 'shades', 'policy', '_cells')

    def __init__(self, colors: Sequence[str], shades: Sequence[float], policy: ShadePolicy, cells: tuple[tuple[ColorValue, ...], ...]):
        self.colors = tuple(colors)
        self.shades = tuple(shades)
        self.policy = ShadePolicy(policy)
        self._cells = cells

    @property
    def shape(self) -> tuple[int, int]:
        """(number of colors, number of shades)"""
        return len(self.colors), len(self.shades)

    def cell(self, color_index: int, shade_index: int) -> ColorValue:
        """
        Color ``color_index`` at shade ``shade_index``.

        Raises:
            IndexOutOfRange: If either index is outside the table
        """
        _check_index(color_index, len(self.colors))
        _check_index(shade_index, len(self.shades))
        return self._cells[color_index][shade_index]

    def column(self, color_index: int) -> tuple[ColorValue, ...]:
        _check_index(color_index, len(self.colors))
        return self._cells[color_index]

    def row(self, shade_index: int) -> tuple[ColorValue, ...]:
        _check_index(shade_index, len(self.shades))
        return tuple(column[shade_index] for column in self._cells)

    def __getitem__(self, color_index: int) -> tuple[ColorValue, ...]:
        return self._cells[color_index]

    def __iter__(self) -> Iterator[tuple[ColorValue, ...]]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"PaletteTable(colors={len(self.colors)}, shades={len(self.shades)}, policy={self.policy.value!r})"


def _base_colors(colors: Iterable[str]) -> list[ColorValue]:
    return [ColorValue.coerce(color) for color in colors]


@lru_cache(maxsize=32)
def _build_table(colors: tuple[str, ...], shades: tuple[float, ...], policy: ShadePolicy) -> PaletteTable:
    bases = _base_colors(colors)
    if bases and shades:
        lch = np.array([base.to(ColorSpace.LCH).channels for base in bases], dtype=float)
        shaded = np_shade(lch, shades, policy)
    else:
        shaded = np.zeros((len(bases), len(shades), 3))

    cells = tuple(
        tuple(
            ColorValue(ColorSpace.LCH, tuple(shaded[i, j]), base.alpha)
            for j in range(len(shades))
        )
        for i, base in enumerate(bases)
    )
    return PaletteTable(colors, shades, policy, cells)


def build_table(
    colors: Iterable[str],
    shades: Iterable[float],
    policy: ShadePolicy | str = ShadePolicy.BLEND,
) -> PaletteTable:
    """
    Derive the full palette table.

    The result is cached on its inputs, so calling again with an unchanged
    palette and shade list returns the same table without recomputing.

    Args:
        colors: CSS literals, one per column
        shades: Shade levels, one per row
        policy: Lightness policy for the shade transform

    Raises:
        ParseError: If a color literal is invalid
        ValueError: If a shade level is not a finite number
    """
    return _build_table(tuple(colors), tuple(float(s) for s in shades), ShadePolicy(policy))

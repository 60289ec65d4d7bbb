"""
Palette session: the state a user edits and everything derived from it.

The session owns the durable state (palette, shade list, background,
format, swap toggle), restores it from the store on construction and
writes changed values back after every transition. Rendering code reads
cells and labels from it and reports edits as ``(index, value)`` calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Iterable, Iterator

from .colors.color_value import ColorValue
from .config import DEFAULT_COLORS, DEFAULT_SHADES, default_config
from .contrast import Foreground, contrast, foreground_for
from .export import export_css
from .formatting import edit_lch, format_color, format_kind
from .shading import ShadePolicy
from .state.cyclic_selector import CyclicSelector
from .state.ordered_collection import OrderedCollection
from .state.persistence import KeyValueStore, LocalStore, PersistentBinding
from .table import PaletteTable, build_table
from .types.format_type import FORMAT_CYCLE, FormatKind
from .utils.num_utils import is_real_number

logger = logging.getLogger(__name__)

COLORS_KEY = "colors"
SHADES_KEY = "shades"
BACKGROUND_KEY = "backgroundColor"
FORMAT_KEY = "format"
SWAP_COLORS_KEY = "swap-colors"

# Values used by the "add" actions
NEW_COLOR = "red"
NEW_SHADE = 100


## Validators for stored values; raising means "treat as absent"

def _color_literal(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a color string, got {type(value).__name__}")
    ColorValue.parse(value)
    return value


def _color_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return [_color_literal(item) for item in value]


def _shade_level(value: Any) -> int | float:
    if not is_real_number(value):
        raise ValueError(f"expected a finite number, got {value!r}")
    # numpy scalars become builtins so they serialize
    return int(value) if isinstance(value, Integral) else float(value)


def _shade_list(value: Any) -> list[float]:
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return [_shade_level(item) for item in value]


def _format_name(value: Any) -> str:
    return FormatKind(value).value


def _flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Cell:
    """Everything a renderer needs to draw one table cell."""

    color: ColorValue
    label: str
    contrast: float
    text_color: Foreground
    swatch: str
    swap_colors: bool

    @property
    def foreground(self) -> str:
        return self.swatch if self.swap_colors else self.text_color

    @property
    def background(self) -> str:
        return "transparent" if self.swap_colors else self.swatch


class PaletteSession:
    """
    Durable palette state plus the derived table.

    Args:
        store: Key-value store to restore from and save to. Defaults to a
            fresh in-memory ``LocalStore``.
        colors, shades, background, format, swap_colors: Values used when
            the store holds nothing usable for that key
        policy: Lightness policy for the shade transform
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        colors: Iterable[str] = DEFAULT_COLORS,
        shades: Iterable[float] = DEFAULT_SHADES,
        background: str = "white",
        format: FormatKind | str = FormatKind.HEX,
        swap_colors: bool = False,
        policy: ShadePolicy | str = ShadePolicy.BLEND,
    ):
        self.store = store if store is not None else LocalStore()
        self.policy = ShadePolicy(policy)

        # Validate fallbacks before anything is written
        defaults = {
            COLORS_KEY: _color_list(list(colors)),
            SHADES_KEY: _shade_list(list(shades)),
            BACKGROUND_KEY: _color_literal(background),
            FORMAT_KEY: format_kind(format).value,
            SWAP_COLORS_KEY: bool(swap_colors),
        }

        self._bindings: dict[str, PersistentBinding[Any]] = {
            COLORS_KEY: PersistentBinding(self.store, COLORS_KEY, _color_list),
            SHADES_KEY: PersistentBinding(self.store, SHADES_KEY, _shade_list),
            BACKGROUND_KEY: PersistentBinding(self.store, BACKGROUND_KEY, _color_literal),
            FORMAT_KEY: PersistentBinding(self.store, FORMAT_KEY, _format_name),
            SWAP_COLORS_KEY: PersistentBinding(self.store, SWAP_COLORS_KEY, _flag),
        }

        stored = {key: binding.load() for key, binding in self._bindings.items()}
        restored = [key for key, value in stored.items() if value is not None]
        if restored:
            logger.info("Restored %s from store", ", ".join(restored))
        state = {key: defaults[key] if value is None else value for key, value in stored.items()}

        self.colors: OrderedCollection[str] = OrderedCollection(state[COLORS_KEY])
        self.shades: OrderedCollection[float] = OrderedCollection(state[SHADES_KEY])
        self.background: str = state[BACKGROUND_KEY]
        self.format_selector: CyclicSelector[FormatKind] = CyclicSelector.restore(
            FORMAT_CYCLE, format_kind(state[FORMAT_KEY])
        )
        self.swap_colors: bool = state[SWAP_COLORS_KEY]

        self._settle()

    @classmethod
    def from_config(cls, config: dict | None = None, store: KeyValueStore | None = None) -> PaletteSession:
        """Build a session from a config mapping as returned by ``load_config``."""
        config = config or default_config()
        palette = config.get("palette", {})
        if store is None:
            store = LocalStore(config.get("storage", {}).get("path"))
        return cls(
            store,
            colors=palette.get("colors", DEFAULT_COLORS),
            shades=palette.get("shades", DEFAULT_SHADES),
            background=palette.get("background", "white"),
            format=palette.get("format", FormatKind.HEX),
            swap_colors=palette.get("swap_colors", False),
            policy=palette.get("shade_policy", ShadePolicy.BLEND),
        )

    # ------------------ PERSISTENCE ------------------
    def snapshot(self) -> dict[str, Any]:
        """Durable state as plain JSON-ready data, keyed by storage key."""
        return {
            COLORS_KEY: self.colors.to_list(),
            SHADES_KEY: self.shades.to_list(),
            BACKGROUND_KEY: self.background,
            FORMAT_KEY: self.format.value,
            SWAP_COLORS_KEY: self.swap_colors,
        }

    def _settle(self) -> None:
        """Write back whatever changed since the last write."""
        for key, value in self.snapshot().items():
            self._bindings[key].sync(value)

    # ------------------ DERIVED STATE ------------------
    @property
    def format(self) -> FormatKind:
        return self.format_selector.current

    @property
    def table(self) -> PaletteTable:
        return build_table(self.colors, self.shades, self.policy)

    @property
    def text_color(self) -> Foreground:
        """Readable page foreground for the current background."""
        return foreground_for(self.background)

    def label(self, color: ColorValue | str) -> str:
        return format_color(color, self.format)

    def cell(self, color_index: int, shade_index: int) -> Cell:
        color = self.table.cell(color_index, shade_index)
        return Cell(
            color=color,
            label=self.label(color),
            contrast=contrast(color, self.background),
            text_color=foreground_for(color),
            swatch=format_color(color, FormatKind.RGB),
            swap_colors=self.swap_colors,
        )

    def cells(self) -> Iterator[list[Cell]]:
        """Cells column by column, in palette order."""
        rows, cols = len(self.shades), len(self.colors)
        for i in range(cols):
            yield [self.cell(i, j) for j in range(rows)]

    def export_css(self) -> str:
        return export_css(self.table, self.background, self.format)

    # ------------------ COLOR TRANSITIONS ------------------
    def add_color(self, value: str = NEW_COLOR) -> None:
        self.colors = self.colors.append(_color_literal(value))
        logger.debug("Added color %s", value)
        self._settle()

    def update_color(self, index: int, value: str) -> None:
        """
        Replace the color at ``index``.

        Raises:
            ParseError: If ``value`` is not a valid literal; state is unchanged
            IndexOutOfRange: If ``index`` is stale
        """
        self.colors = self.colors.replace_at(index, _color_literal(value))
        logger.debug("Updated color %d to %s", index, value)
        self._settle()

    def edit_color(self, index: int, component: str, value: float) -> None:
        """Set one LCH component (``l``, ``c`` or ``h``) of the color at ``index``."""
        self.update_color(index, edit_lch(self.colors.at(index), component, value))

    def remove_color(self, index: int) -> None:
        self.colors = self.colors.remove_at(index)
        logger.debug("Removed color %d", index)
        self._settle()

    # ------------------ SHADE TRANSITIONS ------------------
    def add_shade(self, value: float = NEW_SHADE) -> None:
        self.shades = self.shades.append(_shade_level(value))
        logger.debug("Added shade %s", value)
        self._settle()

    def update_shade(self, index: int, value: float) -> None:
        """
        Replace the shade level at ``index``. Levels outside [0, 100] are kept.

        Raises:
            ValueError: If ``value`` is not a finite number
            IndexOutOfRange: If ``index`` is stale
        """
        self.shades = self.shades.replace_at(index, _shade_level(value))
        logger.debug("Updated shade %d to %s", index, value)
        self._settle()

    def remove_shade(self, index: int) -> None:
        self.shades = self.shades.remove_at(index)
        logger.debug("Removed shade %d", index)
        self._settle()

    # ------------------ OTHER TRANSITIONS ------------------
    def set_background(self, value: str) -> None:
        self.background = _color_literal(value)
        logger.debug("Background set to %s", value)
        self._settle()

    def edit_background(self, component: str, value: float) -> None:
        self.set_background(edit_lch(self.background, component, value))

    def rotate_format(self) -> FormatKind:
        self.format_selector = self.format_selector.advance()
        logger.debug("Format is now %s", self.format.value)
        self._settle()
        return self.format

    def toggle_swap_colors(self) -> bool:
        self.swap_colors = not self.swap_colors
        self._settle()
        return self.swap_colors

"""Paletter: shade palettes, display formats and WCAG contrast for designers."""

from .colors import ColorValue, NAMED_COLORS, BLACK, WHITE
from .types.color_types import ColorSpace
from .types.format_type import FormatKind, FORMAT_CYCLE
from .errors import PaletterError, ParseError, UnsupportedFormat, IndexOutOfRange
from .conversions import convert, np_convert
from .shading import ShadePolicy, shade, np_shade
from .formatting import format_color, edit_lch, lch_components
from .contrast import contrast, relative_luminance, foreground_for, passes_aa
from .state import (
    OrderedCollection,
    Append,
    ReplaceAt,
    RemoveAt,
    CyclicSelector,
    LocalStore,
    PersistentBinding,
)
from .table import PaletteTable, build_table
from .export import export_css
from .config import load_config
from .session import PaletteSession, Cell

__version__ = "0.1.0"

__all__ = [
    # colors
    "ColorValue",
    "ColorSpace",
    "NAMED_COLORS",
    "BLACK",
    "WHITE",
    "convert",
    "np_convert",
    # errors
    "PaletterError",
    "ParseError",
    "UnsupportedFormat",
    "IndexOutOfRange",
    # palette engine
    "ShadePolicy",
    "shade",
    "np_shade",
    "FormatKind",
    "FORMAT_CYCLE",
    "format_color",
    "edit_lch",
    "lch_components",
    "contrast",
    "relative_luminance",
    "foreground_for",
    "passes_aa",
    # state
    "OrderedCollection",
    "Append",
    "ReplaceAt",
    "RemoveAt",
    "CyclicSelector",
    "LocalStore",
    "PersistentBinding",
    # orchestration
    "PaletteTable",
    "build_table",
    "export_css",
    "load_config",
    "PaletteSession",
    "Cell",
    "__version__",
]

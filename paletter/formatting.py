"""
Format codec: render colors as text in the four display formats.

======  ============  =========  ==================
kind    target space  precision  shape
======  ============  =========  ==================
hex     srgb          n/a        ``#rrggbb``
rgb     srgb          integer    ``rgb(r g b)``
hsl     hsl           integer    ``hsl(h s% l%)``
lch     lch           2 places   ``lch(l c h)``
======  ============  =========  ==================

Only hex and rgb clamp, and only in the rendered text: the color itself is
never modified. Translucent colors get ``aa`` appended in hex and ``/ a``
in the functional forms.
"""

from __future__ import annotations

from typing import Tuple

from boundednumbers.functions import clamp

from .colors.color_value import ColorValue
from .errors import UnsupportedFormat
from .types.color_types import ColorSpace
from .types.format_type import FormatKind, format_precision
from .utils.num_utils import format_number, round_half_up

LCH_COMPONENTS = ("l", "c", "h")


def format_kind(kind: FormatKind | str) -> FormatKind:
    """Validate ``kind`` against the closed set of formats."""
    try:
        return FormatKind(kind)
    except ValueError:
        raise UnsupportedFormat(kind) from None


def _srgb_bytes(color: ColorValue) -> Tuple[int, int, int]:
    r, g, b = (round_half_up(clamp(float(v) * 255, 0, 255)) for v in color.to(ColorSpace.SRGB).channels)
    return r, g, b


def _alpha_suffix(color: ColorValue, precision: int) -> str:
    if color.alpha >= 1:
        return ""
    return f" / {format_number(color.alpha, max(precision, 2))}"


def _format_hex(color: ColorValue) -> str:
    r, g, b = _srgb_bytes(color)
    text = f"#{r:02x}{g:02x}{b:02x}"
    if color.alpha < 1:
        text += f"{round_half_up(color.alpha * 255):02x}"
    return text


def _format_rgb(color: ColorValue) -> str:
    r, g, b = _srgb_bytes(color)
    return f"rgb({r} {g} {b}{_alpha_suffix(color, format_precision[FormatKind.RGB])})"


def _format_hsl(color: ColorValue) -> str:
    precision = format_precision[FormatKind.HSL]
    h, s, l = color.to(ColorSpace.HSL).channels
    hue = format_number(h, precision)
    if hue == "360":
        hue = "0"
    return f"hsl({hue} {format_number(s, precision)}% {format_number(l, precision)}%{_alpha_suffix(color, precision)})"


def _format_lch(color: ColorValue) -> str:
    precision = format_precision[FormatKind.LCH]
    l, c, h = color.to(ColorSpace.LCH).channels
    hue = format_number(h, precision)
    if hue == "360":
        hue = "0"
    return f"lch({format_number(l, precision)} {format_number(c, precision)} {hue}{_alpha_suffix(color, precision)})"


FORMATTERS = {
    FormatKind.HEX: _format_hex,
    FormatKind.RGB: _format_rgb,
    FormatKind.HSL: _format_hsl,
    FormatKind.LCH: _format_lch,
}


def format_color(color: ColorValue | str, kind: FormatKind | str) -> str:
    """
    Render ``color`` in the display format ``kind``.

    Args:
        color: Color, or a CSS literal
        kind: One of "hex", "rgb", "hsl", "lch"

    Returns:
        Canonical literal for that format

    Raises:
        UnsupportedFormat: If ``kind`` is not a known format
        ParseError: If ``color`` is an invalid literal
    """
    kind = format_kind(kind)
    return FORMATTERS[kind](ColorValue.coerce(color))


def lch_components(color: ColorValue | str) -> Tuple[int, int, int]:
    """Rounded (l, c, h) of a color, as shown in the LCH editing fields."""
    l, c, h = ColorValue.coerce(color).to(ColorSpace.LCH).channels
    return round_half_up(l), round_half_up(c), round_half_up(h) % 360


def edit_lch(color: ColorValue | str, component: str, value: float) -> str:
    """
    Replace one LCH component of a color and return the new ``lch()`` literal.

    Used when the user edits the lightness, chroma or hue field of a color.
    The result is not clamped, so out-of-gamut edits survive.

    Raises:
        ParseError: If ``color`` is an invalid literal
        ValueError: If ``component`` is not "l", "c" or "h"
    """
    if component not in LCH_COMPONENTS:
        raise ValueError(f"Unknown LCH component: {component!r}")
    edited = ColorValue.coerce(color).to(ColorSpace.LCH).set(**{component: float(value)})
    return edited.to_css()

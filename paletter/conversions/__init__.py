"""
Paletter Color Space Conversions
================================

Vectorized conversions between the three spaces a palette works in.

Spaces
------
srgb:
    (r, g, b) gamma-encoded, nominally in [0, 1]
hsl:
    (hue [0, 360), saturation %, lightness %)
lch:
    CIE LCH (D50): (lightness [0, 100], chroma [0, ~131], hue [0, 360))

Every function accepts arrays whose last axis holds the three channels, so
a single color and a whole palette table share one code path. ``convert``
is the scalar entry point; ``np_convert`` keeps arrays as arrays.

Examples
--------
>>> from paletter.conversions import convert
>>> l, c, h = convert((1.0, 0.0, 0.0), "srgb", "lch")
>>> r, g, b = convert((l, c, h), "lch", "srgb")  # back to ~(1.0, 0.0, 0.0)
"""

from .css_to_hsl import np_hsl_to_srgb, np_srgb_to_hsl
from .lab import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    np_srgb_to_lab,
    np_lab_to_srgb,
    np_lab_to_lch,
    np_lch_to_lab,
    np_srgb_to_lch,
    np_lch_to_srgb,
    np_srgb_to_xyz_d65,
)
from .wrapper import convert, np_convert
from ..types.color_types import ColorSpace

__all__ = [
    # sRGB <-> HSL
    'np_hsl_to_srgb',
    'np_srgb_to_hsl',

    # sRGB <-> Lab <-> LCH
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'np_srgb_to_lab',
    'np_lab_to_srgb',
    'np_lab_to_lch',
    'np_lch_to_lab',
    'np_srgb_to_lch',
    'np_lch_to_srgb',
    'np_srgb_to_xyz_d65',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorSpace',
]

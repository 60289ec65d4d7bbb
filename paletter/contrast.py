"""WCAG 2.1 contrast scoring."""

from __future__ import annotations

from typing import Literal

import numpy as np
from boundednumbers.functions import clamp

from .colors.color_value import ColorValue
from .conversions import np_srgb_to_xyz_d65
from .types.color_types import ColorSpace

Foreground = Literal["black", "white"]

# WCAG AA thresholds
AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0

_BLACK = ColorValue(ColorSpace.SRGB, (0.0, 0.0, 0.0))


def relative_luminance(color: ColorValue | str) -> float:
    """
    Y of XYZ (D65) for the color as displayed.

    Channels are clipped to [0, 1] first, the same clamping hex and rgb
    output apply, so the result stays in [0, 1] for out-of-gamut colors.
    """
    srgb = ColorValue.coerce(color).to(ColorSpace.SRGB)
    displayed = np.array([clamp(float(v), 0.0, 1.0) for v in srgb.channels], dtype=float)
    y = np_srgb_to_xyz_d65(displayed)[1]
    return float(clamp(float(y), 0.0, 1.0))


def contrast(a: ColorValue | str, b: ColorValue | str) -> float:
    """
    WCAG 2.1 contrast ratio between two colors, in [1, 21].

    The ratio is symmetric: the lighter color always goes on top.
    """
    y1 = relative_luminance(a)
    y2 = relative_luminance(b)
    if y2 > y1:
        y1, y2 = y2, y1
    return (y1 + 0.05) / (y2 + 0.05)


def foreground_for(background: ColorValue | str) -> Foreground:
    """Black text when it clears the AA line on ``background``, white otherwise."""
    return "black" if contrast(background, _BLACK) > AA_NORMAL_TEXT else "white"


def passes_aa(a: ColorValue | str, b: ColorValue | str, large_text: bool = False) -> bool:
    threshold = AA_LARGE_TEXT if large_text else AA_NORMAL_TEXT
    return contrast(a, b) >= threshold

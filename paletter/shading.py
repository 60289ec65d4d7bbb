"""
Shade transform: derive a palette cell from a base color and a shade level.

Shading happens in CIE LCH. Chroma is scaled down as the requested level
moves away from 50, reaching zero at 0 and 100::

    chroma' = max(0, chroma * (1 - |percent - 50| / 50))

Lightness follows one of two policies:

``ShadePolicy.BLEND`` (default)
    ``lightness' = percent * (0.5 + lightness / 100)``. The base color's own
    lightness shifts the whole column, so a light base yields lighter shades.
``ShadePolicy.OVERWRITE``
    ``lightness' = percent``. Every column shares the same lightness ramp.

Hue is left alone. Levels outside [0, 100] extrapolate instead of failing.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from .colors.color_value import ColorValue
from .types.color_types import ColorSpace
from .utils.num_utils import is_real_number


class ShadePolicy(str, Enum):
    BLEND = "blend"
    OVERWRITE = "overwrite"


def np_shade(lch: NDArray, percents: Sequence[float] | NDArray, policy: ShadePolicy | str = ShadePolicy.BLEND) -> NDArray:
    """
    Vectorized shading of LCH colors.

    Args:
        lch: array of shape (..., 3) holding (l, c, h)
        percents: 1D sequence of shade levels
        policy: Lightness policy

    Returns:
        array of shape (..., len(percents), 3): one row of shades per input color
    """
    policy = ShadePolicy(policy)
    lch = np.asarray(lch, dtype=float)
    percents = np.asarray(percents, dtype=float)
    if percents.ndim != 1:
        raise ValueError(f"percents must be one-dimensional, got shape {percents.shape}")
    if not np.all(np.isfinite(percents)):
        raise ValueError("shade levels must be finite numbers")

    # (..., 1) against (n,) broadcasts to (..., n)
    l = lch[..., 0:1]
    c = lch[..., 1:2]
    h = lch[..., 2:3]

    scale = np.maximum(0.0, 1 - np.abs(percents - 50) / 50)
    chroma = np.maximum(0.0, c * scale)

    if policy == ShadePolicy.BLEND:
        lightness = percents * (0.5 + l / 100)
    else:
        lightness = np.broadcast_to(percents, chroma.shape)

    hue = np.broadcast_to(h, chroma.shape)
    return np.stack([lightness, chroma, hue], axis=-1)


def shade(color: ColorValue | str, percent: float, policy: ShadePolicy | str = ShadePolicy.BLEND) -> ColorValue:
    """
    Derive the shade of ``color`` at level ``percent``.

    Args:
        color: Base color, or a CSS literal
        percent: Shade level, nominally in [0, 100]
        policy: Lightness policy, see module docs

    Returns:
        New LCH color carrying the base color's alpha

    Raises:
        ParseError: If ``color`` is an invalid literal
        ValueError: If ``percent`` is not a finite number
    """
    if not is_real_number(percent):
        raise ValueError(f"shade level must be a finite number, got {percent!r}")
    base = ColorValue.coerce(color).to(ColorSpace.LCH)
    (l, c, h), = np_shade(np.asarray(base.channels), [percent], policy)
    return ColorValue(ColorSpace.LCH, (l, c, h), base.alpha)

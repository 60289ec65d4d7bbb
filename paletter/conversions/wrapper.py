import numpy as np
from typing import Callable, cast

from .css_to_hsl import np_hsl_to_srgb, np_srgb_to_hsl
from .lab import np_lch_to_srgb, np_srgb_to_lch
from ..types.color_types import ChannelInput, Channels, ColorSpace, element_to_array

# sRGB is the hub: every other space converts through it
TO_SRGB: dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.HSL: lambda c: np_hsl_to_srgb(c[..., 0], c[..., 1], c[..., 2]),
    ColorSpace.LCH: np_lch_to_srgb,
}

FROM_SRGB: dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.HSL: lambda c: np_srgb_to_hsl(c[..., 0], c[..., 1], c[..., 2]),
    ColorSpace.LCH: np_srgb_to_lch,
}


def _convert_core(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension of 3 channels, got shape {color.shape}")

    srgb = color if from_space == ColorSpace.SRGB else TO_SRGB[from_space](color)
    if to_space == ColorSpace.SRGB:
        return srgb
    return FROM_SRGB[to_space](srgb)


def convert(
    color: ChannelInput,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> Channels:
    """
    Convert one channel triple between color spaces.

    Args:
        color: (c0, c1, c2) in ``from_space`` units
        from_space: Source space ("srgb", "hsl" or "lch")
        to_space: Target space

    Returns:
        Tuple of three floats in ``to_space`` units
    """
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    if from_space == to_space:
        return cast(Channels, tuple(float(v) for v in color))
    result = _convert_core(element_to_array(color), from_space, to_space)
    return cast(Channels, tuple(float(v) for v in result.flat))


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays of shape (..., 3)."""
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    if from_space == to_space:
        return color
    return _convert_core(np.asarray(color, dtype=float), from_space, to_space)

import numpy as np
from numpy import ndarray as NDArray

## HSL to sRGB conversions

def np_hsl_to_srgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to sRGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in percent [0, 100]
        l: array-like or scalar, lightness in percent [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b), nominally in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100.0
    l = np.asarray(l, dtype=float) / 100.0

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    # m1 is the largest channel, 2l - m1 the smallest, m2 the one in between
    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = np.floor(h / 60).astype(int)

    r = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2, hue_section == 3, hue_section == 4, hue_section == 5],
        [m1, m2, low, low, m2, m1],
        default=low,
    )
    g = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2, hue_section == 3, hue_section == 4, hue_section == 5],
        [m2, m1, m1, m2, low, low],
        default=low,
    )
    b = np.select(
        [hue_section == 0, hue_section == 1, hue_section == 2, hue_section == 3, hue_section == 4, hue_section == 5],
        [low, low, m2, m1, m1, m2],
        default=low,
    )

    return np.stack([r, g, b], axis=-1)

## sRGB to HSL conversions

def np_srgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB to HSL using the CSS Color 4 algorithm.

    Channels outside [0, 1] are accepted and produce out-of-range
    saturation or lightness rather than an error.

    Args:
        r, g, b: array-like or scalar, nominally in [0, 1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation %, lightness %)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Zero delta means grey; the denominator also vanishes at l = 0 or 1
    denom = 1 - np.abs(2 * lightness - 1)
    chromatic = (delta > 0) & (denom != 0)
    saturation = np.divide(delta, denom, out=np.zeros(out_shape), where=chromatic)

    safe_delta = np.where(delta > 0, delta, 1.0)
    hue = np.select(
        [delta <= 0, max_c == r, max_c == g],
        [
            np.zeros(out_shape),
            60 * ((g - b) / safe_delta),
            60 * ((b - r) / safe_delta) + 120,
        ],
        default=60 * ((r - g) / safe_delta) + 240,
    )
    hue = np.where(chromatic, hue, 0.0)
    hue = hue % 360

    return np.stack([hue, saturation * 100.0, lightness * 100.0], axis=-1)

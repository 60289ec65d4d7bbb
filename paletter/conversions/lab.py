"""
sRGB <-> CIE Lab <-> CIE LCH conversions.

Lab and LCH are relative to the D50 white point, as in CSS Color 4; sRGB
(D65) is chromatically adapted with the Bradford transform. All functions
take and return arrays whose last axis holds the three channels, so the
same code path serves a single color and a whole palette table.
"""

import numpy as np
from numpy import ndarray as NDArray

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ_D65 = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
])

# Bradford chromatic adaptation D65 -> D50
D65_TO_D50 = np.array([
    [1.0479298208405488, 0.022946793341019088, -0.05019222954313557],
    [0.029627815688159344, 0.990434484573249, -0.01707382502938514],
    [-0.009243058152591178, 0.015055144896577895, 0.7518742899580008],
])

SRGB_TO_XYZ_D50 = D65_TO_D50 @ SRGB_TO_XYZ_D65
XYZ_D50_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ_D50)

WHITE_D50 = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])

LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27

# Below this chroma the hue carries no information and is reported as 0
ACHROMATIC_CHROMA = 0.02


## Transfer functions

def np_srgb_to_linear(rgb: NDArray) -> NDArray:
    """Undo the sRGB gamma. Sign-preserving so extended values survive."""
    rgb = np.asarray(rgb, dtype=float)
    magnitude = np.abs(rgb)
    return np.where(
        magnitude <= 0.04045,
        rgb / 12.92,
        np.sign(rgb) * ((magnitude + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(rgb: NDArray) -> NDArray:
    """Apply the sRGB gamma. Sign-preserving so extended values survive."""
    rgb = np.asarray(rgb, dtype=float)
    magnitude = np.abs(rgb)
    return np.where(
        magnitude > 0.0031308,
        np.sign(rgb) * (1.055 * magnitude ** (1 / 2.4) - 0.055),
        rgb * 12.92,
    )

## sRGB <-> Lab

def np_srgb_to_lab(rgb: NDArray) -> NDArray:
    """
    Convert gamma-encoded sRGB to CIE Lab (D50).

    Args:
        rgb: array of shape (..., 3), nominally in [0, 1]

    Returns:
        lab: array of shape (..., 3): (L [0,100], a, b)
    """
    xyz = np_srgb_to_linear(rgb) @ SRGB_TO_XYZ_D50.T
    scaled = xyz / WHITE_D50
    f = np.where(
        scaled > LAB_EPSILON,
        np.cbrt(scaled),
        (LAB_KAPPA * scaled + 16) / 116,
    )
    L = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def np_lab_to_srgb(lab: NDArray) -> NDArray:
    """
    Convert CIE Lab (D50) to gamma-encoded sRGB. No gamut clipping.

    Args:
        lab: array of shape (..., 3)

    Returns:
        rgb: array of shape (..., 3), in [0, 1] only when in gamut
    """
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx ** 3 > LAB_EPSILON, fx ** 3, (116 * fx - 16) / LAB_KAPPA)
    y = np.where(L > LAB_KAPPA * LAB_EPSILON, fy ** 3, L / LAB_KAPPA)
    z = np.where(fz ** 3 > LAB_EPSILON, fz ** 3, (116 * fz - 16) / LAB_KAPPA)

    xyz = np.stack([x, y, z], axis=-1) * WHITE_D50
    return np_linear_to_srgb(xyz @ XYZ_D50_TO_SRGB.T)

## Lab <-> LCH

def np_lab_to_lch(lab: NDArray) -> NDArray:
    """Polar form of Lab. Hue is 0 for achromatic colors, never NaN."""
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    chroma = np.hypot(a, b)
    hue = np.degrees(np.arctan2(b, a))
    hue = np.where(chroma < ACHROMATIC_CHROMA, 0.0, hue)
    hue = hue % 360
    return np.stack([L, chroma, hue], axis=-1)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    """Cartesian form of LCH. Negative chroma is treated as 0."""
    lch = np.asarray(lch, dtype=float)
    L, c, h = lch[..., 0], lch[..., 1], lch[..., 2]
    c = np.maximum(c, 0.0)
    radians = np.radians(h)
    return np.stack([L, c * np.cos(radians), c * np.sin(radians)], axis=-1)

## sRGB <-> LCH

def np_srgb_to_lch(rgb: NDArray) -> NDArray:
    return np_lab_to_lch(np_srgb_to_lab(rgb))


def np_lch_to_srgb(lch: NDArray) -> NDArray:
    return np_lab_to_srgb(np_lch_to_lab(lch))


def np_srgb_to_xyz_d65(rgb: NDArray) -> NDArray:
    """Gamma-encoded sRGB to XYZ (D65). The Y channel is relative luminance."""
    return np_srgb_to_linear(rgb) @ SRGB_TO_XYZ_D65.T

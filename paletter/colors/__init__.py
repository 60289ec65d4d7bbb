"""
Paletter Color Values
=====================

Immutable colors expressed in sRGB, HSL or CIE LCH.

Usage
-----
>>> from paletter.colors import ColorValue
>>>
>>> red = ColorValue.parse("#ff0000")
>>> red.space  # ColorSpace.SRGB
>>> lch = red.to("lch")
>>> lch["c"]  # chroma, about 106.8
>>> lighter = lch.set(l=lambda l: l + 20)
>>> lighter["l"]  # about 74.3

Notes
-----
- Instances cannot be modified; ``set`` and ``to`` return new colors
- Hue is 0 for achromatic colors, never NaN
- Out-of-gamut values are kept; clamping happens only when rendering
"""

from .color_value import ColorValue
from .named import NAMED_COLORS

BLACK = ColorValue.parse("black")
WHITE = ColorValue.parse("white")

__all__ = ['ColorValue', 'NAMED_COLORS', 'BLACK', 'WHITE']

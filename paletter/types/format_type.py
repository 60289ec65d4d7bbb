# No dependencies
from enum import Enum


class FormatKind(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    LCH = "lch"


# Display order used by the format selector
FORMAT_CYCLE = (FormatKind.HEX, FormatKind.RGB, FormatKind.HSL, FormatKind.LCH)

# Decimal places kept when rendering each kind
format_precision = {
    FormatKind.HEX: 0,
    FormatKind.RGB: 0,
    FormatKind.HSL: 0,
    FormatKind.LCH: 2,
}

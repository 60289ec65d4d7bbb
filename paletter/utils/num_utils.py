import math
from numbers import Real


def is_real_number(value) -> bool:
    """True for finite real numbers, numpy scalars included. Booleans are not numbers here."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity (CSS rounding)."""
    return int(math.floor(float(value) + 0.5))


def format_number(value: float, precision: int) -> str:
    """
    Render a number with at most ``precision`` decimals and no trailing zeros.

    >>> format_number(52.0, 2)
    '52'
    >>> format_number(106.8391, 2)
    '106.84'
    """
    if precision <= 0:
        rounded = round_half_up(value)
        return str(rounded) if rounded != 0 else "0"
    text = f"{float(value):.{precision}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text

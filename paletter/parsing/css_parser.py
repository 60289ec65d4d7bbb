"""
CSS color literal parsing.

Turns a CSS Color 4 literal into ``(space, channels, alpha)`` in the units
used by :class:`paletter.colors.color_value.ColorValue`:

- ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` and named colors -> srgb
- ``rgb()`` / ``rgba()`` -> srgb, channels in [0, 1]
- ``hsl()`` / ``hsla()`` -> hsl, saturation and lightness in percent
- ``lch()`` -> lch

Both the legacy comma syntax and the modern space syntax with an optional
``/ alpha`` are accepted for rgb and hsl; lch only has the modern form.
Channel values are not clamped, alpha is.
"""

from __future__ import annotations

import math
import re
from typing import Tuple

from ..colors.named import NAMED_COLORS
from ..errors import ParseError
from ..types.color_types import Channels, ColorSpace

ParsedColor = Tuple[ColorSpace, Channels, float]

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_TOKEN_RE = re.compile(rf"^({_NUMBER})(%|deg|grad|rad|turn)?$")
_FUNCTION_RE = re.compile(r"^([a-z-]+)\((.*)\)$", re.DOTALL)
_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")

# Degrees per unit for hue angles
_ANGLE_UNITS = {
    None: 1.0,
    "deg": 1.0,
    "grad": 360.0 / 400.0,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# Percent reference values, CSS Color 4 section 9
_LCH_CHROMA_PERCENT = 150.0


def _fail(text: str, reason: str) -> ParseError:
    return ParseError(text, reason)


def _split_token(token: str, text: str) -> tuple[float, str | None]:
    match = _TOKEN_RE.match(token)
    if match is None:
        raise _fail(text, f"bad value {token!r}")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise _fail(text, f"bad value {token!r}")
    return value, match.group(2)


def _number_or_percent(token: str, text: str, percent_ref: float) -> float:
    """Plain numbers pass through; ``p%`` maps to ``p / 100 * percent_ref``."""
    if token == "none":
        return 0.0
    value, unit = _split_token(token, text)
    if unit is None:
        return value
    if unit == "%":
        return value / 100.0 * percent_ref
    raise _fail(text, f"unexpected unit in {token!r}")


def _hue(token: str, text: str) -> float:
    if token == "none":
        return 0.0
    value, unit = _split_token(token, text)
    if unit == "%":
        raise _fail(text, f"hue cannot be a percentage: {token!r}")
    return value * _ANGLE_UNITS[unit]


def _alpha(token: str | None, text: str) -> float:
    if token is None:
        return 1.0
    value = _number_or_percent(token, text, 1.0)
    return max(0.0, min(value, 1.0))


def _split_arguments(body: str, text: str, allow_legacy: bool) -> tuple[list[str], str | None]:
    """Return the three channel tokens and the alpha token (or None)."""
    body = body.strip()
    if "," in body:
        if not allow_legacy or "/" in body:
            raise _fail(text, "unexpected comma")
        parts = [part.strip() for part in body.split(",")]
        if len(parts) not in (3, 4) or any(not part for part in parts):
            raise _fail(text, "expected 3 or 4 comma separated values")
        if "none" in parts:
            raise _fail(text, "'none' is not allowed in legacy syntax")
        return parts[:3], parts[3] if len(parts) == 4 else None

    alpha = None
    if "/" in body:
        channels_part, _, alpha_part = body.partition("/")
        alpha_tokens = alpha_part.split()
        if len(alpha_tokens) != 1:
            raise _fail(text, "expected a single alpha value after '/'")
        alpha = alpha_tokens[0]
    else:
        channels_part = body
    tokens = channels_part.split()
    if len(tokens) != 3:
        raise _fail(text, "expected 3 channel values")
    return tokens, alpha


def _parse_hex(digits: str) -> ParsedColor:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    values = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    alpha = values[3] if len(values) == 4 else 1.0
    return ColorSpace.SRGB, (values[0], values[1], values[2]), alpha


def _parse_rgb(args: list[str], alpha: str | None, text: str) -> ParsedColor:
    # 255 and 100% both mean full intensity
    r, g, b = (_number_or_percent(arg, text, 255.0) / 255.0 for arg in args)
    return ColorSpace.SRGB, (r, g, b), _alpha(alpha, text)


def _parse_hsl(args: list[str], alpha: str | None, text: str, legacy: bool) -> ParsedColor:
    h = _hue(args[0], text)
    if legacy and not all(arg.endswith("%") for arg in args[1:]):
        raise _fail(text, "saturation and lightness must be percentages")
    s = _number_or_percent(args[1], text, 100.0)
    l = _number_or_percent(args[2], text, 100.0)
    return ColorSpace.HSL, (h, s, l), _alpha(alpha, text)


def _parse_lch(args: list[str], alpha: str | None, text: str) -> ParsedColor:
    l = _number_or_percent(args[0], text, 100.0)
    c = _number_or_percent(args[1], text, _LCH_CHROMA_PERCENT)
    h = _hue(args[2], text)
    return ColorSpace.LCH, (l, max(c, 0.0), h), _alpha(alpha, text)


def parse_color(text: str) -> ParsedColor:
    """
    Parse a CSS color literal.

    Args:
        text: Literal such as ``"#ff8000"``, ``"rgb(255 128 0)"``,
            ``"hsl(30deg 100% 50%)"``, ``"lch(50 92 52)"`` or ``"tomato"``

    Returns:
        ``(space, (c0, c1, c2), alpha)``

    Raises:
        ParseError: If ``text`` is not a string or not a supported literal
    """
    if not isinstance(text, str):
        raise ParseError(text, "expected a string")
    literal = text.strip().lower()
    if not literal:
        raise _fail(text, "empty string")

    if literal.startswith("#"):
        match = _HEX_RE.match(literal)
        if match is None:
            raise _fail(text, "bad hex notation")
        return _parse_hex(match.group(1))

    if literal == "transparent":
        return ColorSpace.SRGB, (0.0, 0.0, 0.0), 0.0

    if literal in NAMED_COLORS:
        r, g, b = NAMED_COLORS[literal]
        return ColorSpace.SRGB, (r / 255.0, g / 255.0, b / 255.0), 1.0

    match = _FUNCTION_RE.match(literal)
    if match is None:
        raise _fail(text, "unknown color")
    name, body = match.groups()

    if name in ("rgb", "rgba"):
        args, alpha = _split_arguments(body, text, allow_legacy=True)
        return _parse_rgb(args, alpha, text)
    if name in ("hsl", "hsla"):
        legacy = "," in body
        args, alpha = _split_arguments(body, text, allow_legacy=True)
        return _parse_hsl(args, alpha, text, legacy)
    if name == "lch":
        args, alpha = _split_arguments(body, text, allow_legacy=False)
        return _parse_lch(args, alpha, text)

    raise _fail(text, f"unsupported color function {name!r}")

from __future__ import annotations
import math
from typing import Callable, Tuple, Union, cast

from boundednumbers.functions import clamp

from ..conversions import convert
from ..errors import ParseError
from ..parsing.css_parser import parse_color
from ..types.color_types import Channels, ColorSpace, SPACE_COMPONENTS
from ..utils.num_utils import format_number, is_real_number

ComponentUpdate = Union[float, Callable[[float], float]]

# Tolerance when deciding whether sRGB channels are displayable
GAMUT_EPSILON = 1e-6


class ColorValue:
    """
    Immutable color: three float channels tagged with the space they are in.

    ``srgb`` channels are gamma-encoded in [0, 1], ``hsl`` carries hue in
    degrees with saturation and lightness in percent, and ``lch`` is CIE LCH
    (D50). Values outside the nominal ranges are kept as given; only
    rendering clamps.
    """

    __slots__ = ('_space', '_channels', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, space: ColorSpace | str, channels: Tuple[float, float, float], alpha: float = 1.0) -> None:
        space = ColorSpace(space)

        if len(channels) != 3:
            raise ValueError(f"{space.value} expects 3 channels, got {len(channels)}")
        if not all(is_real_number(float(v)) for v in channels):
            raise ValueError(f"{space.value} channels must be finite numbers, got {channels!r}")
        if not is_real_number(float(alpha)):
            raise ValueError(f"alpha must be a finite number, got {alpha!r}")

        self._space = space
        self._channels = cast(Channels, tuple(float(v) for v in channels))
        self._alpha = float(clamp(float(alpha), 0.0, 1.0))

        # no more writes after this point
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def parse(cls, text: str) -> ColorValue:
        """
        Build a color from a CSS literal (hex, rgb(), hsl(), lch() or a name).

        Raises:
            ParseError: If the literal is not valid
        """
        space, channels, alpha = parse_color(text)
        return cls(space, channels, alpha)

    @classmethod
    def coerce(cls, value: ColorValue | str) -> ColorValue:
        """Return ``value`` unchanged if it is already a color, else parse it."""
        if isinstance(value, ColorValue):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ParseError(value, "expected a color or a string")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def space(self) -> ColorSpace:
        return self._space

    @property
    def channels(self) -> Channels:
        return self._channels

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def components(self) -> Tuple[str, str, str]:
        """Channel names for this space, e.g. ("l", "c", "h") for lch."""
        return SPACE_COMPONENTS[self._space]

    def __getitem__(self, name: str) -> float:
        try:
            return self._channels[self.components.index(name)]
        except ValueError:
            raise KeyError(f"{self._space.value} has no component {name!r}") from None

    # ------------------ TRANSFORMS ------------------
    def to(self, space: ColorSpace | str) -> ColorValue:
        """Return the same color expressed in ``space``."""
        space = ColorSpace(space)
        if space == self._space:
            return self
        return ColorValue(space, convert(self._channels, self._space, space), self._alpha)

    def set(self, **components: ComponentUpdate) -> ColorValue:
        """
        Replace components in the current space.

        Each keyword is a component name (``l``, ``c``, ``h`` for lch) mapped to
        either a new value or a callable receiving the old value.

        >>> ColorValue.parse("lch(50 40 90)").set(l=70, c=lambda c: c / 2)
        ColorValue('lch', (70.0, 20.0, 90.0))
        """
        names = self.components
        values = list(self._channels)
        for name, update in components.items():
            if name not in names:
                raise KeyError(f"{self._space.value} has no component {name!r}")
            index = names.index(name)
            values[index] = update(values[index]) if callable(update) else update
        return ColorValue(self._space, (values[0], values[1], values[2]), self._alpha)

    def with_alpha(self, alpha: float) -> ColorValue:
        return ColorValue(self._space, self._channels, alpha)

    def in_gamut(self) -> bool:
        """Whether the color is displayable in sRGB without clamping."""
        r, g, b = self.to(ColorSpace.SRGB).channels
        return all(-GAMUT_EPSILON <= v <= 1 + GAMUT_EPSILON for v in (r, g, b))

    # ------------------ SERIALIZATION ------------------
    def to_css(self, precision: int = 4) -> str:
        """CSS literal of this color in its own space."""
        c0, c1, c2 = self._channels
        if self._space == ColorSpace.SRGB:
            body = " ".join(format_number(v * 255, precision) for v in (c0, c1, c2))
            name = "rgb"
        elif self._space == ColorSpace.HSL:
            body = f"{format_number(c0, precision)} {format_number(c1, precision)}% {format_number(c2, precision)}%"
            name = "hsl"
        else:
            body = " ".join(format_number(v, precision) for v in (c0, c1, c2))
            name = "lch"
        if self._alpha < 1:
            body += f" / {format_number(self._alpha, precision)}"
        return f"{name}({body})"

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        suffix = f", alpha={self._alpha!r}" if self._alpha < 1 else ""
        return f"ColorValue({self._space.value!r}, {self._channels!r}{suffix})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return (
            self._space == other._space
            and self._channels == other._channels
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self._space, self._channels, self._alpha))

    def is_close(self, other: ColorValue, tolerance: float = 1e-6) -> bool:
        """Compare channel-wise in this color's space."""
        other = other.to(self._space)
        return all(
            math.isclose(a, b, abs_tol=tolerance) for a, b in zip(self._channels, other.channels)
        ) and math.isclose(self._alpha, other.alpha, abs_tol=tolerance)

"""Basic paletter usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from paletter import (
    ColorValue,
    PaletteSession,
    ShadePolicy,
    build_table,
    contrast,
    foreground_for,
    format_color,
    shade,
)
from paletter.types.format_type import FormatKind


def demonstrate_colors() -> None:
    # Parse CSS literals and move between spaces.
    accent = ColorValue.parse("#3a7bd5")
    print("sRGB channels:", accent.channels)
    print("As LCH:", accent.to("lch"))

    for kind in FormatKind:
        print(f"{kind.value:>4}:", format_color(accent, kind))

    print("Contrast on white:", round(contrast(accent, "white"), 2))
    print("Readable text on accent:", foreground_for(accent))


def demonstrate_shades() -> None:
    # One color at a few levels, under both lightness policies.
    for policy in ShadePolicy:
        ramp = [format_color(shade("lch(70 60 30)", level, policy), "lch") for level in (5, 50, 95)]
        print(f"{policy.value} ramp:", ramp)

    table = build_table(["tomato", "lch(50 50 270)"], [10, 50, 90])
    print("Table shape:", table.shape)
    for column in table:
        print("  ", [format_color(cell, "hex") for cell in column])


def demonstrate_session() -> None:
    # In-memory session; pass a LocalStore(path) to keep state across runs.
    session = PaletteSession(colors=["#ff0000"], shades=[25, 50, 75])
    session.add_color("rebeccapurple")
    session.rotate_format()
    print("Format:", session.format.value)
    print(session.export_css())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_shades()
    demonstrate_session()

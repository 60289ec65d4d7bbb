# sRGB hex -> CIE LCH (D50)
samples_hex_lch = {
    "#ff0000": (54.29, 106.84, 40.85),
    "#00ff00": (87.82, 113.33, 134.38),
    "#0000ff": (29.57, 131.21, 301.36),
    "#ffffff": (100.0, 0.0, 0.0),
    "#000000": (0.0, 0.0, 0.0),
}

# sRGB hex -> HSL (hue, saturation %, lightness %)
samples_hex_hsl = {
    "#ff0000": (0.0, 100.0, 50.0),
    "#00ff00": (120.0, 100.0, 50.0),
    "#0000ff": (240.0, 100.0, 50.0),
    "#ffff00": (60.0, 100.0, 50.0),
    "#663399": (270.0, 50.0, 40.0),
    "#808080": (0.0, 0.0, 50.196),
}

# In-gamut colors used for round trips
samples_hex = [
    "#000000", "#ffffff", "#ff0000", "#00ff00", "#0000ff",
    "#ffff00", "#00ffff", "#ff00ff", "#808080", "#3a7bd5",
    "#663399", "#f4a460", "#2e8b57", "#010101", "#fefefe",
    "#123456", "#abcdef", "#7f7f00", "#c0ffee", "#badbad",
]

# lch tolerance for published reference values
lch_tolerance = 0.1
hsl_tolerance = 1e-2

"""Basic chromacss usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromacss import (
    CssFormat,
    ColorPalette,
    D3_CATEGORY10,
    RED_TO_GREEN,
    convert,
    detect,
    np_convert_channels,
)


def demonstrate_formats() -> None:
    # Detect and re-serialize color strings.
    accent = "rgba(255, 128, 64, 0.5)"
    print("Detected format:", detect(accent))
    print("As HSLA:", CssFormat.HSLA.convert(accent))
    print("As HEX (alpha dropped):", convert("hex", accent))


def demonstrate_palettes() -> None:
    # Categorical colors cycle through the palette.
    for series in range(12):
        print(f"series {series}:", D3_CATEGORY10.color_at(series))

    # Map a percentage onto a red to green hue ramp.
    scale = RED_TO_GREEN.scale_for(0, 100)
    for score in (0, 33.3, 50, 100):
        print(f"score {score}:", RED_TO_GREEN.color_at(score, scale))

    custom = ColorPalette.from_list(["#000", "#fff"]).convert(CssFormat.RGB)
    print("Custom palette:", custom)


def demonstrate_arrays() -> None:
    # Convert a whole batch of RGB triples at once.
    rgb = D3_CATEGORY10.to_rgb_array()
    hsv = np_convert_channels(rgb, "rgb", "hsv")
    print("D3 category10 in HSV:\n", np.asarray(hsv))


if __name__ == "__main__":
    demonstrate_formats()
    demonstrate_palettes()
    demonstrate_arrays()

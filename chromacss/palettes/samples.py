"""
Ready-made palettes.

The D3 categorical palettes come from
https://github.com/d3/d3-3.x-api-reference/blob/master/Ordinal-Scales.md
"""
from .palette import ColorPalette

D3_CATEGORY10_STRINGS = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)

D3_CATEGORY20_STRINGS = (
    "#1f77b4", "#aec7e8", "#ff7f0e", "#ffbb78", "#2ca02c",
    "#98df8a", "#d62728", "#ff9896", "#9467bd", "#c5b0d5",
    "#8c564b", "#c49c94", "#e377c2", "#f7b6d2", "#7f7f7f",
    "#c7c7c7", "#bcbd22", "#dbdb8d", "#17becf", "#9edae5",
)

D3_CATEGORY20B_STRINGS = (
    "#393b79", "#5254a3", "#6b6ecf", "#9c9ede", "#637939",
    "#8ca252", "#b5cf6b", "#cedb9c", "#8c6d31", "#bd9e39",
    "#e7ba52", "#e7cb94", "#843c39", "#ad494a", "#d6616b",
    "#e7969c", "#7b4173", "#a55194", "#ce6dbd", "#de9ed6",
)

D3_CATEGORY20C_STRINGS = (
    "#3182bd", "#6baed6", "#9ecae1", "#c6dbef", "#e6550d",
    "#fd8d3c", "#fdae6b", "#fdd0a2", "#31a354", "#74c476",
    "#a1d99b", "#c7e9c0", "#756bb1", "#9e9ac8", "#bcbddc",
    "#dadaeb", "#636363", "#969696", "#bdbdbd", "#d9d9d9",
)

# Every color below is parsed at import
D3_CATEGORY10 = ColorPalette.from_list(D3_CATEGORY10_STRINGS, validate=True)
D3_CATEGORY20 = ColorPalette.from_list(D3_CATEGORY20_STRINGS, validate=True)
D3_CATEGORY20B = ColorPalette.from_list(D3_CATEGORY20B_STRINGS, validate=True)
D3_CATEGORY20C = ColorPalette.from_list(D3_CATEGORY20C_STRINGS, validate=True)

RED_TO_GREEN = ColorPalette.from_hue_range(0, 120, 100, 50, 1)
ORANGERED_TO_GREEN = ColorPalette.from_hue_range(16, 120, 100, 50, 1)

__all__ = [
    "D3_CATEGORY10_STRINGS",
    "D3_CATEGORY20_STRINGS",
    "D3_CATEGORY20B_STRINGS",
    "D3_CATEGORY20C_STRINGS",
    "D3_CATEGORY10",
    "D3_CATEGORY20",
    "D3_CATEGORY20B",
    "D3_CATEGORY20C",
    "RED_TO_GREEN",
    "ORANGERED_TO_GREEN",
]

"""CIE LCH color space conversions, value types and interpolation.

This module provides:
- LCH <-> LAB <-> XYZ <-> sRGB conversions on floats or numpy arrays
- Immutable color value types (LCHColor and friends)
- Shortest-path hue interpolation
- A parser for lch() color literals

Example:
    from colortokens.colorspace import LCHColor, lerp

    a = LCHColor(l=70, c=40, h=350)
    b = LCHColor(l=50, c=40, h=10)
    lerp(a, b, 0.5).h  # 0.0, through the wrap rather than 180
"""

from .lab import (
    lch_to_lab,
    lab_to_lch,
    lab_to_xyz,
    xyz_to_lab,
    xyz_to_linear_rgb,
    linear_rgb_to_xyz,
    linear_to_srgb,
    srgb_to_linear,
    lch_to_srgb,
    srgb_to_lch,
)

from .interpolation import (
    shortest_hue_delta,
    interpolate_angle,
    normalize_hue,
    lerp_hue,
    lerp_value,
)

from .color import (
    LCHColor,
    LABColor,
    XYZColor,
    RGBColor,
    ColorAdjustment,
    lerp,
)

from .parse import parse_lch

__all__ = [
    # Value types
    'LCHColor',
    'LABColor',
    'XYZColor',
    'RGBColor',
    'ColorAdjustment',
    'lerp',
    'parse_lch',
    # Array conversions
    'lch_to_lab',
    'lab_to_lch',
    'lab_to_xyz',
    'xyz_to_lab',
    'xyz_to_linear_rgb',
    'linear_rgb_to_xyz',
    'linear_to_srgb',
    'srgb_to_linear',
    'lch_to_srgb',
    'srgb_to_lch',
    # Interpolation
    'shortest_hue_delta',
    'interpolate_angle',
    'normalize_hue',
    'lerp_hue',
    'lerp_value',
]

"""colortokens: perceptually uniform color ramps for design tokens.

Colors live in CIE LCH. A ramp for any hue is interpolated from a small
table of hand-tuned anchor ramps, and each stop renders to sRGB only at
the display boundary.

Example:
    from colortokens import get_color_ramp, STOPS

    for stop, color in zip(STOPS, get_color_ramp(210)):
        print(stop, color.to_display_color().to_hex())
"""

from .colorspace import (
    LCHColor,
    LABColor,
    XYZColor,
    RGBColor,
    ColorAdjustment,
    lerp,
    parse_lch,
)
from .ramps import (
    STOPS,
    ANCHORS,
    RampDefinition,
    interpolate_ramp,
    get_color_ramp,
    generate_ramp,
    get_primary_color,
    get_color_at,
    midpoint_color,
    FAMILY_HUES,
    family_ramp,
    list_families,
)
from .ramps.families import (
    gray_ramp,
    pink_ramp,
    red_ramp,
    tomato_ramp,
    orange_ramp,
    brown_ramp,
    gold_ramp,
    yellow_ramp,
    lime_ramp,
    olive_ramp,
    grass_ramp,
    green_ramp,
    mint_ramp,
    cyan_ramp,
    teal_ramp,
    blue_ramp,
    sky_ramp,
    indigo_ramp,
    iris_ramp,
    purple_ramp,
    violet_ramp,
    plum_ramp,
    ruby_ramp,
)
from .errors import (
    ColorTokensError,
    ParseError,
    RampDefinitionError,
    UnknownFamilyError,
)

__version__ = "0.1.0"

__all__ = [
    # Colors
    'LCHColor',
    'LABColor',
    'XYZColor',
    'RGBColor',
    'ColorAdjustment',
    'lerp',
    'parse_lch',
    # Ramps
    'STOPS',
    'ANCHORS',
    'RampDefinition',
    'interpolate_ramp',
    'get_color_ramp',
    'generate_ramp',
    'get_primary_color',
    'get_color_at',
    'midpoint_color',
    'FAMILY_HUES',
    'family_ramp',
    'list_families',
    'gray_ramp',
    'pink_ramp',
    'red_ramp',
    'tomato_ramp',
    'orange_ramp',
    'brown_ramp',
    'gold_ramp',
    'yellow_ramp',
    'lime_ramp',
    'olive_ramp',
    'grass_ramp',
    'green_ramp',
    'mint_ramp',
    'cyan_ramp',
    'teal_ramp',
    'blue_ramp',
    'sky_ramp',
    'indigo_ramp',
    'iris_ramp',
    'purple_ramp',
    'violet_ramp',
    'plum_ramp',
    'ruby_ramp',
    # Errors
    'ColorTokensError',
    'ParseError',
    'RampDefinitionError',
    'UnknownFamilyError',
]

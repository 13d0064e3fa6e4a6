"""Perceptual color ramps built from hand-tuned anchor definitions.

Data flows one way: definitions (static anchor table) -> interpolator
(per-hue blend) -> generator (ordered LCH stops).
"""

from .definitions import STOPS, ANCHORS, RampDefinition
from .interpolator import interpolate_ramp
from .generator import (
    get_color_ramp,
    generate_ramp,
    get_primary_color,
    get_color_at,
    primary_index,
    midpoint_color,
)
from .families import FAMILY_HUES, family_ramp, list_families

__all__ = [
    'STOPS',
    'ANCHORS',
    'RampDefinition',
    'interpolate_ramp',
    'get_color_ramp',
    'generate_ramp',
    'get_primary_color',
    'get_color_at',
    'primary_index',
    'midpoint_color',
    'FAMILY_HUES',
    'family_ramp',
    'list_families',
]

"""Generate ordered LCH color ramps from a hue.

Example:
    from colortokens.ramps import get_color_ramp, get_primary_color

    blues = get_color_ramp(210)                      # 12 stops, lightest first
    grays = get_color_ramp(210, is_grayscale=True)   # same lightness, no chroma
    accent = get_primary_color(210)
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .definitions import ANCHORS, RampDefinition
from .interpolator import interpolate_ramp
from ..colorspace.color import LCHColor
from ..colorspace.interpolation import normalize_hue
from ..colorspace.parse import parse_lch
from ..defaults import (
    FALLBACK_CHROMA,
    FALLBACK_LIGHTNESS,
    GRAYSCALE_CHROMA,
    PRIMARY_STOP_OFFSET,
    RAMP_STOPS,
)

logger = logging.getLogger(__name__)


def _clamp_index(index: int, count: int) -> int:
    return max(0, min(int(index), count - 1))


def _definition_stops(ramp: RampDefinition, is_grayscale: bool) -> list[LCHColor]:
    stops = []
    for l, c, shift in zip(ramp.lightness, ramp.chroma, ramp.hue_shift):
        # +360 keeps negative offsets positive before the modulo
        h = (ramp.base_hue + shift + 360) % 360
        stops.append(LCHColor(l=l, c=GRAYSCALE_CHROMA if is_grayscale else c, h=h))
    return stops


def _resample(stops: list[LCHColor], steps: int) -> list[LCHColor]:
    """Pick `steps` evenly spaced colors along the ramp, blending neighbours."""
    resampled = []
    for pos in np.linspace(0.0, len(stops) - 1, steps):
        i = int(pos)
        frac = float(pos) - i
        if frac == 0.0:
            resampled.append(stops[i])
        else:
            resampled.append(stops[i].lerp(stops[i + 1], frac))
    return resampled


def get_color_ramp(
    hue: float,
    steps: int = RAMP_STOPS,
    is_grayscale: bool = False,
    anchors: Sequence[RampDefinition] = ANCHORS,
) -> list[LCHColor]:
    """Ordered ramp of LCH colors for a hue.

    Args:
        hue: Hue in degrees (wrapped to [0, 360))
        steps: Number of colors. The native stop count returns the stops
            as defined; other counts are resampled along the ramp. Values
            below 1 are treated as 1.
        is_grayscale: Force chroma to zero while keeping the hue family's
            lightness curve
        anchors: Anchor table to interpolate from

    Returns:
        List of `steps` LCHColor, in stop order (lightest first)
    """
    if steps < 1:
        logger.debug("Clamping ramp steps %d to 1", steps)
        steps = 1

    ramp = interpolate_ramp(hue, anchors)
    stops = _definition_stops(ramp, is_grayscale)

    if steps == len(stops):
        return stops
    return _resample(stops, steps)


def generate_ramp(hue: float) -> list[LCHColor]:
    """Ramp for hue with the default stop count."""
    return get_color_ramp(hue)


def primary_index(steps: int = RAMP_STOPS) -> int:
    """Index of the representative stop, clamped for short ramps."""
    return _clamp_index(steps // 2 - PRIMARY_STOP_OFFSET, max(steps, 1))


def get_primary_color(
    hue: float,
    is_grayscale: bool = False,
    steps: int = RAMP_STOPS,
) -> LCHColor:
    """Representative color of the hue's ramp, PRIMARY_STOP_OFFSET before the midpoint."""
    ramp = get_color_ramp(hue, steps=steps, is_grayscale=is_grayscale)
    return ramp[primary_index(len(ramp))]


def get_color_at(
    hue: float,
    index: int,
    steps: int = RAMP_STOPS,
    is_grayscale: bool = False,
) -> LCHColor:
    """Stop at index of the hue's ramp.

    Indices past the end return the last stop; negative indices return the
    first stop. Never raises for an out-of-range index.
    """
    ramp = get_color_ramp(hue, steps=steps, is_grayscale=is_grayscale)
    clamped = _clamp_index(index, len(ramp))
    if clamped != index:
        logger.debug("Clamping ramp index %d to %d", index, clamped)
    return ramp[clamped]


def midpoint_color(stops: Sequence[LCHColor], hue: float) -> LCHColor:
    """Middle stop of a ramp, or a mid-tone fallback when stops is empty."""
    if stops:
        return stops[len(stops) // 2]

    # repr round-trips the hue exactly
    fallback = f"lch({FALLBACK_LIGHTNESS:g}% {FALLBACK_CHROMA:g} {float(normalize_hue(hue))!r})"
    logger.warning("Empty ramp for hue %s, falling back to %s", hue, fallback)
    return parse_lch(fallback)

"""Derive a ramp definition for an arbitrary hue from the anchor table."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .definitions import ANCHORS, RampDefinition
from ..colorspace.interpolation import interpolate_angle, lerp_value, normalize_hue
from ..errors import RampDefinitionError


def _bracketing_anchors(
    hue: float,
    anchors: Sequence[RampDefinition],
) -> tuple[RampDefinition, RampDefinition]:
    """Anchors on either side of hue, wrapping past 360.

    The lower anchor is the last one whose base hue is below hue. When hue
    is below every anchor it wraps to the last anchor.
    """
    lower_index = len(anchors) - 1
    for i, anchor in enumerate(anchors):
        if anchor.base_hue < hue:
            lower_index = i
    upper_index = (lower_index + 1) % len(anchors)
    return anchors[lower_index], anchors[upper_index]


def interpolate_ramp(
    hue: float,
    anchors: Sequence[RampDefinition] = ANCHORS,
) -> RampDefinition:
    """Ramp definition for hue, blended from the two nearest anchors.

    Lightness and chroma blend linearly. Hue offsets blend along the shortest
    arc and stay signed. The returned base_hue is the requested hue.

    Args:
        hue: Hue in degrees; any value, wrapped to [0, 360)
        anchors: Anchor definitions in any order; they are bracketed by base hue

    Returns:
        The matching anchor itself when hue lands exactly on one, otherwise
        a new interpolated RampDefinition

    Raises:
        RampDefinitionError: If anchors is empty
    """
    if not anchors:
        raise RampDefinitionError("Cannot interpolate a ramp without anchors")

    hue = float(normalize_hue(hue))
    anchors = sorted(anchors, key=lambda anchor: anchor.base_hue)

    for anchor in anchors:
        if anchor.base_hue == hue:
            return anchor

    lower, upper = _bracketing_anchors(hue, anchors)

    # Distance is always measured forward from the lower anchor, so a hue
    # exactly halfway between two anchors resolves to t = 0.5 from the lower.
    span = (upper.base_hue - lower.base_hue) % 360 or 360.0
    t = ((hue - lower.base_hue) % 360) / span

    lightness = lerp_value(lower.lightness, upper.lightness, t)
    chroma = lerp_value(lower.chroma, upper.chroma, t)
    hue_shift = interpolate_angle(
        np.asarray(lower.hue_shift, dtype=np.float64),
        np.asarray(upper.hue_shift, dtype=np.float64),
        t,
    )

    return RampDefinition(
        base_hue=hue,
        lightness=tuple(lightness.tolist()),
        chroma=tuple(chroma.tolist()),
        hue_shift=tuple(hue_shift.tolist()),
    )

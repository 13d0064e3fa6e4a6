"""Linear and circular interpolation helpers.

Hue arithmetic always takes the shortest path around the color wheel.
The ramp interpolator and LCHColor.lerp share these functions so that
ramp generation and general-purpose blending agree exactly.
"""

import numpy as np
from numpy.typing import ArrayLike

from ..defaults import HUE_DECIMALS


def shortest_hue_delta(h0: ArrayLike, h1: ArrayLike) -> np.ndarray:
    """Signed angular distance from h0 to h1, in (-180, 180]."""
    dh = np.mod(np.subtract(h1, h0, dtype=np.float64), 360.0)
    return np.where(dh > 180.0, dh - 360.0, dh)


def interpolate_angle(a0: ArrayLike, a1: ArrayLike, t: ArrayLike) -> np.ndarray:
    """Move from a0 toward a1 along the shortest arc; result is not wrapped.

    Used for hue offsets, which stay signed (e.g. -6 rather than 354).
    """
    return np.add(a0, shortest_hue_delta(a0, a1) * t)


def normalize_hue(h: ArrayLike) -> np.ndarray:
    """Wrap hue degrees into [0, 360), rounded to HUE_DECIMALS places.

    Rounding absorbs the modulo error so that h and h + 360 wrap to the
    same float.
    """
    h = np.round(np.mod(h, 360.0), HUE_DECIMALS)
    # tiny negatives wrap to exactly 360.0 in floating point
    return np.where(h >= 360.0, 0.0, h)


def lerp_hue(h0: ArrayLike, h1: ArrayLike, t: ArrayLike) -> np.ndarray:
    """Interpolate hues along the shortest arc, wrapped to [0, 360)."""
    return normalize_hue(interpolate_angle(h0, h1, t))


def lerp_value(a: ArrayLike, b: ArrayLike, t: ArrayLike) -> np.ndarray:
    """Plain linear blend, exact at both ends: a * (1 - t) + b * t."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a * (1.0 - t) + b * t

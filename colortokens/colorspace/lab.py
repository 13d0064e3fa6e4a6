"""CIE LCH / LAB / XYZ / sRGB conversions.

Reference: CIE 15:2004 for LAB, IEC 61966-2-1 for sRGB.

All functions accept floats or numpy arrays and broadcast elementwise.
LAB is relative to the D65 white point in defaults.REFERENCE_WHITE.
"""

import numpy as np
from numpy.typing import ArrayLike

from ..defaults import REFERENCE_WHITE

# === CIE LAB nonlinearity ===

_DELTA = 6 / 29
_DELTA_SQ = _DELTA ** 2
_DELTA_CUBE = _DELTA ** 3
_OFFSET = 4 / 29

# === XYZ <-> Linear sRGB matrices (D65) ===

_XYZ_TO_RGB = np.array([
    [+3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, +1.8760108, +0.0415560],
    [+0.0556434, -0.2040259, +1.0572252],
])

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# === sRGB transfer curve ===

_ENCODE_THRESHOLD = 0.0031308
_DECODE_THRESHOLD = 0.04045


def _apply_matrix(m: np.ndarray, u, v, w) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    u, v, w = np.broadcast_arrays(
        np.asarray(u, dtype=np.float64),
        np.asarray(v, dtype=np.float64),
        np.asarray(w, dtype=np.float64),
    )
    out = np.einsum('ij,j...->i...', m, np.stack([u, v, w]))
    return out[0], out[1], out[2]


# === Core Conversions ===

def lch_to_lab(L: ArrayLike, C: ArrayLike, H: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """LCH -> LAB. H in degrees."""
    H_rad = np.radians(H)
    C = np.asarray(C, dtype=np.float64)
    return np.asarray(L, dtype=np.float64), C * np.cos(H_rad), C * np.sin(H_rad)


def lab_to_lch(L: ArrayLike, a: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """LAB -> LCH. Returns H in degrees [0, 360)."""
    C = np.hypot(a, b)
    H = np.mod(np.degrees(np.arctan2(b, a)), 360.0)
    return np.asarray(L, dtype=np.float64), C, H


def _f_inv(t: np.ndarray) -> np.ndarray:
    return np.where(t > _DELTA, t ** 3, 3 * _DELTA_SQ * (t - _OFFSET))


def _f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _DELTA_CUBE, np.cbrt(t), t / (3 * _DELTA_SQ) + _OFFSET)


def lab_to_xyz(L: ArrayLike, a: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """LAB -> XYZ against the reference white."""
    Xn, Yn, Zn = REFERENCE_WHITE
    fy = (np.asarray(L, dtype=np.float64) + 16) / 116
    fx = fy + np.asarray(a, dtype=np.float64) / 500
    fz = fy - np.asarray(b, dtype=np.float64) / 200
    return Xn * _f_inv(fx), Yn * _f_inv(fy), Zn * _f_inv(fz)


def xyz_to_lab(X: ArrayLike, Y: ArrayLike, Z: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """XYZ -> LAB against the reference white."""
    Xn, Yn, Zn = REFERENCE_WHITE
    fx = _f(np.asarray(X, dtype=np.float64) / Xn)
    fy = _f(np.asarray(Y, dtype=np.float64) / Yn)
    fz = _f(np.asarray(Z, dtype=np.float64) / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def xyz_to_linear_rgb(X: ArrayLike, Y: ArrayLike, Z: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """XYZ -> Linear sRGB (unclamped)."""
    return _apply_matrix(_XYZ_TO_RGB, X, Y, Z)


def linear_rgb_to_xyz(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Linear sRGB -> XYZ."""
    return _apply_matrix(_RGB_TO_XYZ, r, g, b)


def linear_to_srgb(x: ArrayLike) -> np.ndarray:
    """Linear RGB -> sRGB gamma encoding (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    high = 1.055 * np.power(np.maximum(x, 1e-10), 1 / 2.4) - 0.055
    return np.where(x <= _ENCODE_THRESHOLD, x * 12.92, high)


def srgb_to_linear(x: ArrayLike) -> np.ndarray:
    """sRGB -> Linear RGB gamma decoding (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    high = np.power(np.maximum((x + 0.055) / 1.055, 0.0), 2.4)
    return np.where(x <= _DECODE_THRESHOLD, x / 12.92, high)


# === Convenience Composites ===

def lch_to_srgb(L: ArrayLike, C: ArrayLike, H: ArrayLike, clamp: bool = True) -> np.ndarray:
    """LCH -> sRGB in one call.

    Args:
        L: Lightness (0-100)
        C: Chroma (0-~130)
        H: Hue in degrees (0-360)
        clamp: Clamp channels to [0, 1]. Out-of-gamut colors are clamped,
            never reported.

    Returns:
        RGB array with shape (..., 3)
    """
    r, g, b = xyz_to_linear_rgb(*lab_to_xyz(*lch_to_lab(L, C, H)))
    rgb = np.stack([linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)], axis=-1)
    if clamp:
        rgb = np.clip(rgb, 0.0, 1.0)
    return rgb


def srgb_to_lch(rgb: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """sRGB -> LCH.

    Args:
        rgb: RGB array with shape (..., 3), values in [0,1]

    Returns:
        (L, C, H) tuple
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = srgb_to_linear(rgb)
    X, Y, Z = linear_rgb_to_xyz(linear[..., 0], linear[..., 1], linear[..., 2])
    return lab_to_lch(*xyz_to_lab(X, Y, Z))

"""Immutable color value types.

LCHColor is the working type: ramps are built from it and it renders to
RGB only at the display boundary via to_display_color(). The other types
are the intermediate stops of the LCH -> LAB -> XYZ -> RGB pipeline.

Example:
    from colortokens import LCHColor

    teal = LCHColor(l=60, c=40, h=190)
    teal.to_display_color().to_hex()  # sRGB hex string
    teal.get_color(at=8)              # darker stop of the teal ramp
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Optional

import numpy as np

from . import lab
from .interpolation import lerp_hue, lerp_value, normalize_hue
from ..defaults import GRAYSCALE_CHROMA_THRESHOLD


@dataclass(frozen=True)
class ColorAdjustment:
    """Channel overrides for LCHColor.adjusted(); None keeps the current value."""
    l: Optional[float] = None
    c: Optional[float] = None
    h: Optional[float] = None
    alpha: Optional[float] = None


@dataclass(frozen=True)
class RGBColor:
    """Gamma-encoded sRGB, channels in [0, 1]."""
    r: float
    g: float
    b: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, text: str) -> RGBColor:
        """Parse '#rrggbb' or 'rrggbb'."""
        hex_color = text.strip().lstrip('#')
        if len(hex_color) != 6:
            raise ValueError(f"Expected 6 hex digits, got {text!r}")
        r = int(hex_color[0:2], 16) / 255.0
        g = int(hex_color[2:4], 16) / 255.0
        b = int(hex_color[4:6], 16) / 255.0
        return cls(r, g, b)

    def to_rgb255(self) -> tuple[int, int, int]:
        return tuple(int(round(v * 255)) for v in (self.r, self.g, self.b))

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb255())

    def to_xyz(self) -> XYZColor:
        x, y, z = lab.linear_rgb_to_xyz(
            lab.srgb_to_linear(self.r),
            lab.srgb_to_linear(self.g),
            lab.srgb_to_linear(self.b),
        )
        return XYZColor(float(x), float(y), float(z), self.alpha)

    def to_lch(self) -> LCHColor:
        return self.to_xyz().to_lab().to_lch()


@dataclass(frozen=True)
class XYZColor:
    """CIE XYZ relative to the D65 white point."""
    x: float
    y: float
    z: float
    alpha: float = 1.0

    def to_rgb(self) -> RGBColor:
        """Linear sRGB matrix, gamma encoding, then clamp to [0, 1]."""
        linear = lab.xyz_to_linear_rgb(self.x, self.y, self.z)
        r, g, b = (float(np.clip(lab.linear_to_srgb(v), 0.0, 1.0)) for v in linear)
        return RGBColor(r, g, b, self.alpha)

    def to_lab(self) -> LABColor:
        l, a, b = lab.xyz_to_lab(self.x, self.y, self.z)
        return LABColor(float(l), float(a), float(b), self.alpha)


@dataclass(frozen=True)
class LABColor:
    """CIE L*a*b*."""
    l: float
    a: float
    b: float
    alpha: float = 1.0

    def to_xyz(self) -> XYZColor:
        x, y, z = lab.lab_to_xyz(self.l, self.a, self.b)
        return XYZColor(float(x), float(y), float(z), self.alpha)

    def to_lch(self) -> LCHColor:
        l, c, h = lab.lab_to_lch(self.l, self.a, self.b)
        return LCHColor(float(l), float(c), float(h), self.alpha)


@dataclass(frozen=True)
class LCHColor:
    """CIE LCH color.

    Attributes:
        l: Lightness, 0-100
        c: Chroma, >= 0 (practically below ~130)
        h: Hue in degrees, wrapped to [0, 360) on construction
        alpha: Opacity, 0-1
    """
    l: float
    c: float
    h: float
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'l', float(self.l))
        object.__setattr__(self, 'c', float(self.c))
        object.__setattr__(self, 'h', float(normalize_hue(self.h)))
        object.__setattr__(self, 'alpha', float(self.alpha))

    @classmethod
    def from_string(cls, text: str) -> LCHColor:
        """Parse an 'lch(70% 30 210)' literal. Raises ParseError."""
        from .parse import parse_lch
        return parse_lch(text)

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> LCHColor:
        return rgb.to_lch()

    @classmethod
    def from_hex(cls, text: str) -> LCHColor:
        return RGBColor.from_hex(text).to_lch()

    # === Conversions ===

    def to_lab(self) -> LABColor:
        l, a, b = lab.lch_to_lab(self.l, self.c, self.h)
        return LABColor(float(l), float(a), float(b), self.alpha)

    def to_xyz(self) -> XYZColor:
        return self.to_lab().to_xyz()

    def to_rgb(self) -> RGBColor:
        return self.to_xyz().to_rgb()

    def to_display_color(self) -> RGBColor:
        """Final sRGB value for display. Only call at the display boundary."""
        return self.to_rgb()

    # === Derived colors ===

    def lerp(self, other: LCHColor, t: float) -> LCHColor:
        """Blend toward other; hue takes the shortest path around the wheel.

        t=0 returns self's channels and t=1 returns other's, exactly.
        """
        if t == 1:
            h = other.h
        else:
            h = float(lerp_hue(self.h, other.h, t))
        return LCHColor(
            l=float(lerp_value(self.l, other.l, t)),
            c=float(lerp_value(self.c, other.c, t)),
            h=h,
            alpha=float(lerp_value(self.alpha, other.alpha, t)),
        )

    def adjusted(self, adjustment: ColorAdjustment) -> LCHColor:
        """Copy with the channels set in adjustment replaced."""
        changes = {
            name: value
            for name, value in asdict(adjustment).items()
            if value is not None
        }
        return replace(self, **changes)

    def get_display_color(self, adjustment: ColorAdjustment = ColorAdjustment()) -> RGBColor:
        return self.adjusted(adjustment).to_display_color()

    @property
    def is_grayscale(self) -> bool:
        return self.c <= GRAYSCALE_CHROMA_THRESHOLD

    @property
    def all_stops(self) -> list[LCHColor]:
        """Full ramp for this color's hue (gray ramp for near-neutral colors)."""
        from ..ramps.generator import get_color_ramp
        return get_color_ramp(self.h, is_grayscale=self.is_grayscale)

    def get_color(self, at: int) -> LCHColor:
        """Stop `at` of this color's ramp. Out-of-range indices clamp."""
        from ..ramps.generator import get_color_at
        return get_color_at(self.h, at, is_grayscale=self.is_grayscale)


def lerp(a: LCHColor, b: LCHColor, t: float) -> LCHColor:
    """Interpolate between two LCH colors. See LCHColor.lerp."""
    return a.lerp(b, t)

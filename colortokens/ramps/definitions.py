"""Canonical ramp definitions.

Each anchor is a hand-tuned ramp for one base hue: per-stop lightness,
chroma and a hue offset that lets a family drift (yellows warm toward
orange as they darken, blues cool toward violet, and so on). Ramps for
any other hue are interpolated between the two neighbouring anchors.

All stop tuples run lightest to darkest and are index-aligned with STOPS.
"""

from dataclasses import dataclass

from ..colorspace.color import LCHColor
from ..colorspace.interpolation import normalize_hue
from ..errors import RampDefinitionError

# Design-token labels for each stop, lightest first
STOPS: tuple[int, ...] = (25, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)


@dataclass(frozen=True)
class RampDefinition:
    """Lightness/chroma/hue-offset curves for one hue."""
    base_hue: float
    lightness: tuple[float, ...]
    chroma: tuple[float, ...]
    hue_shift: tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, 'lightness', tuple(float(v) for v in self.lightness))
        object.__setattr__(self, 'chroma', tuple(float(v) for v in self.chroma))
        object.__setattr__(self, 'hue_shift', tuple(float(v) for v in self.hue_shift))

        counts = {len(self.lightness), len(self.chroma), len(self.hue_shift)}
        if counts != {len(STOPS)}:
            raise RampDefinitionError(
                f"Ramp at hue {self.base_hue} needs {len(STOPS)} values per curve, got "
                f"lightness={len(self.lightness)}, chroma={len(self.chroma)}, "
                f"hue_shift={len(self.hue_shift)}"
            )

    @property
    def count(self) -> int:
        return len(self.lightness)

    def to_color(self) -> LCHColor:
        """Midpoint stop as a color."""
        mid = self.count // 2
        return LCHColor(
            l=self.lightness[mid],
            c=self.chroma[mid],
            h=self.base_hue + self.hue_shift[mid],
        )


def _anchor(base_hue, lightness, chroma, hue_shift) -> RampDefinition:
    return RampDefinition(float(normalize_hue(base_hue)), lightness, chroma, hue_shift)


# Sorted by base hue. Spaced roughly every 15-35 degrees, tighter where
# perceived hue changes fastest (reds through yellows).
ANCHORS: tuple[RampDefinition, ...] = (
    # Pink
    _anchor(0,
            (97, 94, 88, 80, 71, 62, 53, 44, 36, 28, 20, 13),
            (4, 9, 18, 30, 44, 56, 62, 58, 50, 40, 30, 20),
            (4, 4, 3, 2, 1, 0, -1, -2, -3, -4, -5, -6)),
    # Red
    _anchor(20,
            (97, 94, 88, 80, 71, 61, 52, 44, 36, 28, 20, 13),
            (4, 9, 19, 33, 50, 64, 72, 68, 58, 46, 34, 22),
            (-4, -3, -2, -1, 0, 0, 0, 1, 2, 3, 4, 5)),
    # Orange
    _anchor(35,
            (98, 95, 90, 83, 75, 67, 59, 50, 41, 32, 23, 15),
            (5, 11, 22, 38, 55, 68, 74, 68, 58, 46, 34, 22),
            (6, 6, 5, 4, 3, 2, 0, -2, -4, -6, -8, -10)),
    # Brown
    _anchor(50,
            (98, 95, 90, 83, 75, 67, 58, 49, 40, 31, 22, 15),
            (4, 8, 15, 24, 33, 40, 44, 42, 38, 32, 25, 17),
            (6, 5, 4, 3, 2, 1, 0, -1, -2, -3, -4, -5)),
    # Gold
    _anchor(70,
            (98, 96, 92, 86, 79, 71, 62, 52, 42, 32, 23, 15),
            (6, 13, 26, 42, 56, 64, 66, 60, 50, 40, 30, 20),
            (8, 7, 6, 4, 2, 0, -2, -4, -7, -10, -13, -16)),
    # Yellow
    _anchor(85,
            (98, 97, 95, 91, 86, 80, 72, 62, 50, 39, 28, 18),
            (8, 18, 34, 52, 68, 80, 84, 76, 64, 50, 36, 24),
            (4, 3, 2, 1, 0, -1, -3, -6, -9, -12, -15, -18)),
    # Lime
    _anchor(100,
            (98, 96, 93, 88, 82, 75, 67, 58, 48, 38, 28, 18),
            (7, 15, 30, 47, 62, 73, 78, 72, 61, 49, 36, 24),
            (6, 5, 4, 3, 2, 1, 0, -1, -2, -3, -4, -5)),
    # Grass
    _anchor(120,
            (98, 96, 92, 86, 79, 71, 62, 53, 44, 35, 26, 17),
            (6, 13, 26, 42, 56, 66, 70, 65, 56, 45, 34, 22),
            (4, 4, 3, 2, 1, 0, 0, 1, 2, 3, 4, 5)),
    # Green
    _anchor(140,
            (98, 95, 90, 83, 75, 66, 57, 48, 40, 32, 23, 15),
            (5, 11, 22, 36, 50, 60, 64, 60, 52, 42, 32, 21),
            (-2, -2, -1, -1, 0, 0, 0, 1, 1, 2, 2, 3)),
    # Mint
    _anchor(160,
            (98, 96, 91, 84, 76, 67, 58, 49, 40, 32, 23, 15),
            (4, 9, 18, 30, 41, 49, 52, 48, 42, 34, 26, 17),
            (-6, -5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5)),
    # Cyan
    _anchor(180,
            (98, 95, 90, 83, 75, 66, 57, 48, 40, 31, 22, 15),
            (4, 8, 16, 26, 36, 43, 46, 43, 38, 31, 24, 16),
            (10, 9, 8, 6, 4, 2, 0, -1, -2, -3, -4, -5)),
    # Blue
    _anchor(210,
            (97, 94, 89, 81, 72, 63, 54, 45, 37, 29, 21, 14),
            (4, 8, 16, 26, 36, 44, 48, 46, 40, 32, 24, 16),
            (-6, -5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5)),
    # Sky
    _anchor(235,
            (97, 94, 88, 80, 71, 62, 53, 44, 36, 28, 20, 13),
            (4, 9, 18, 30, 42, 52, 58, 56, 50, 41, 31, 21),
            (-10, -9, -8, -6, -4, -2, 0, 2, 4, 6, 8, 10)),
    # Indigo
    _anchor(270,
            (97, 93, 87, 78, 68, 58, 48, 40, 32, 25, 18, 12),
            (4, 10, 20, 34, 48, 60, 66, 62, 54, 44, 33, 22),
            (-8, -7, -6, -5, -3, -1, 0, 1, 2, 3, 4, 5)),
    # Iris
    _anchor(292.5,
            (97, 94, 88, 79, 70, 60, 50, 42, 34, 26, 19, 12),
            (4, 10, 20, 34, 48, 60, 66, 62, 54, 44, 33, 22),
            (-4, -4, -3, -2, -1, 0, 0, 0, 1, 1, 2, 2)),
    # Purple
    _anchor(310,
            (97, 94, 88, 80, 71, 62, 52, 43, 35, 27, 19, 12),
            (4, 9, 18, 31, 45, 56, 62, 58, 51, 42, 32, 21),
            (-2, -2, -1, -1, 0, 0, 0, 0, 1, 1, 2, 2)),
    # Violet
    _anchor(325,
            (97, 94, 88, 80, 71, 62, 53, 44, 36, 28, 20, 13),
            (4, 9, 18, 31, 45, 56, 62, 59, 52, 42, 32, 21),
            (0, 0, 0, 0, 0, 0, 0, 1, 1, 2, 2, 3)),
    # Plum
    _anchor(345,
            (97, 94, 88, 80, 71, 62, 53, 44, 36, 28, 20, 13),
            (4, 9, 18, 30, 44, 56, 62, 58, 50, 41, 31, 20),
            (2, 2, 1, 1, 0, 0, 0, -1, -1, -2, -2, -3)),
)

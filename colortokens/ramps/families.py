"""Named hue families.

Each family is a fixed hue fed to the ramp generator. Gray uses the pink
family's lightness curve with chroma removed.
"""

from .generator import generate_ramp, get_color_ramp
from ..colorspace.color import LCHColor
from ..errors import UnknownFamilyError

FAMILY_HUES: dict[str, float] = {
    "gray": 0,
    "pink": 0,
    "red": 10,
    "tomato": 20,
    "orange": 35,
    "brown": 50,
    "gold": 70,
    "yellow": 85,
    "lime": 100,
    "olive": 110,
    "grass": 120,
    "green": 140,
    "mint": 160,
    "cyan": 180,
    "teal": 190,
    "blue": 210,
    "sky": 235,
    "indigo": 270,
    "iris": 292.5,
    "purple": 310,
    "violet": 325,
    "plum": 345,
    "ruby": 360,
}

GRAYSCALE_FAMILIES = frozenset({"gray"})


def list_families() -> list[str]:
    """All family names, in hue order."""
    return list(FAMILY_HUES.keys())


def family_ramp(name: str) -> list[LCHColor]:
    """Ramp for a named family.

    Raises:
        UnknownFamilyError: If name is not in FAMILY_HUES
    """
    try:
        hue = FAMILY_HUES[name]
    except KeyError:
        raise UnknownFamilyError(f"Unknown color family: {name}") from None
    if name in GRAYSCALE_FAMILIES:
        return get_color_ramp(hue, is_grayscale=True)
    return generate_ramp(hue)


# === Per-family accessors ===

def gray_ramp() -> list[LCHColor]:
    return get_color_ramp(FAMILY_HUES["gray"], is_grayscale=True)


def pink_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["pink"])


def red_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["red"])


def tomato_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["tomato"])


def orange_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["orange"])


def brown_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["brown"])


def gold_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["gold"])


def yellow_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["yellow"])


def lime_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["lime"])


def olive_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["olive"])


def grass_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["grass"])


def green_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["green"])


def mint_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["mint"])


def cyan_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["cyan"])


def teal_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["teal"])


def blue_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["blue"])


def sky_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["sky"])


def indigo_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["indigo"])


def iris_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["iris"])


def purple_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["purple"])


def violet_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["violet"])


def plum_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["plum"])


def ruby_ramp() -> list[LCHColor]:
    return generate_ramp(FAMILY_HUES["ruby"])

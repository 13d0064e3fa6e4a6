"""Parse CSS-style lch() color literals.

Accepted form (case-insensitive, whitespace-tolerant):

    lch(<L>% <C> <H>[deg] [/ <alpha>[%]])

Lightness must carry a percent sign and lie in [0, 100]; chroma and hue
are bare numbers.
A missing alpha defaults to 1.
"""

import re

from .color import LCHColor
from ..errors import ParseError

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

_LCH_PATTERN = re.compile(
    rf"""
    ^\s*lch\(\s*
    (?P<l>{_NUMBER})%\s+
    (?P<c>{_NUMBER})\s+
    (?P<h>{_NUMBER})(?:deg)?
    (?:\s*/\s*(?P<alpha>{_NUMBER})(?P<alpha_pct>%)?)?
    \s*\)\s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)


def parse_lch(text: str) -> LCHColor:
    """Parse an lch() literal into an LCHColor.

    Args:
        text: Literal such as "lch(70% 30 210)" or "lch(52.2% 72.2 50 / 0.5)"

    Returns:
        LCHColor with lightness in 0-100 and hue wrapped to [0, 360)

    Raises:
        ParseError: If text is not a well-formed lch() literal. The offending
            string is available as ParseError.text.
    """
    if not isinstance(text, str):
        raise ParseError("Color literal must be a string", repr(text))

    match = _LCH_PATTERN.match(text)
    if match is None:
        raise ParseError("Malformed lch() literal", text)

    lightness = float(match.group('l'))
    if not 0.0 <= lightness <= 100.0:
        raise ParseError("Lightness must be within [0, 100]", text)

    chroma = float(match.group('c'))
    if chroma < 0:
        raise ParseError("Chroma must be non-negative", text)

    alpha = 1.0
    if match.group('alpha') is not None:
        alpha = float(match.group('alpha'))
        if match.group('alpha_pct'):
            alpha /= 100.0
        if not 0.0 <= alpha <= 1.0:
            raise ParseError("Alpha must be within [0, 1]", text)

    return LCHColor(
        l=lightness,
        c=chroma,
        h=float(match.group('h')),
        alpha=alpha,
    )

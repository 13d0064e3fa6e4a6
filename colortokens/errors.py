"""Color token errors."""


class ColorTokensError(Exception):
    """Base class for colortokens errors."""
    pass


class ParseError(ColorTokensError):
    """Failed to parse a color literal."""

    def __init__(self, message: str, text: str):
        super().__init__(f"{message}: {text!r}")
        self.text = text


class RampDefinitionError(ColorTokensError):
    """Static ramp data is malformed."""
    pass


class UnknownFamilyError(ColorTokensError, KeyError):
    """Lookup of a hue family that does not exist."""

    def __str__(self) -> str:
        return Exception.__str__(self)

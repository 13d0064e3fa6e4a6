"""Central place for colortokens default settings."""

# Ramp shape
RAMP_STOPS: int = 12  # Stops per generated ramp, matches ramps.definitions.STOPS
PRIMARY_STOP_OFFSET: int = 2  # Primary color sits this many stops before the midpoint

# Grayscale handling
GRAYSCALE_CHROMA: float = 0.0
GRAYSCALE_CHROMA_THRESHOLD: float = 0.1  # Colors at or below this chroma get gray ramps

# Fallback used when a ramp unexpectedly has no stops
FALLBACK_LIGHTNESS: float = 70.0
FALLBACK_CHROMA: float = 30.0

# CIE XYZ of the D65 reference white (Y normalized to 1)
REFERENCE_WHITE: tuple[float, float, float] = (0.95047, 1.0, 1.08883)

# Normalized hues are rounded to this many decimal places
HUE_DECIMALS: int = 9

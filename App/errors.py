"""Error types raised by the pattern core.

All errors subclass ValueError so callers that only care about bad input can
keep catching ValueError, as the image loader always has.
"""


class PatternError(ValueError):
    """Base class for invalid pattern data."""


class InvalidGridSize(PatternError):
    """Grid dimensions are not positive, or a grid does not match its size."""


class InvalidPalette(PatternError):
    """Palette is empty, holds a malformed colour, or an id is out of range."""


class InvalidImage(PatternError):
    """Source image has no pixels or could not be decoded."""

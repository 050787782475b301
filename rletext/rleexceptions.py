__all__ = [
    "RLEException",
    "RLETypeError",
    "RLEValueError",
]


class RLEException(Exception):
    """Base class for RLE-related exceptions."""


class RLETypeError(RLEException, TypeError):
    """Raised when an unsupported input type is passed in."""


class RLEValueError(RLEException, ValueError):
    """Raised when a decoder option or reader operation is invalid."""

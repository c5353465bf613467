class EdiError(Exception):
    """Base exception for EDI parsing and generation failures."""


class InvalidArgumentError(EdiError, ValueError):
    """Raised when a required argument is missing (``None``)."""


class EdiSyntaxError(EdiError, ValueError):
    """Raised when EDI text cannot be interpreted."""


class SegmentTooShortError(EdiSyntaxError):
    """Raised when a segment is too short to carry a three-character tag."""


def require(value, name: str):
    """Return ``value`` or raise InvalidArgumentError when it is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' is required")
    return value

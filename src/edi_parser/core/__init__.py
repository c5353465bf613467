from edi_parser.core.exceptions import (
    EdiError,
    EdiSyntaxError,
    InvalidArgumentError,
    SegmentTooShortError,
    require,
)

__all__ = [
    "EdiError",
    "EdiSyntaxError",
    "InvalidArgumentError",
    "SegmentTooShortError",
    "require",
]

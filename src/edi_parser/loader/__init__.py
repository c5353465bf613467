# src/edi_parser/loader/__init__.py

"""
Public interface for the EDI loader stack.

Intended usage from other parts of the project and tests:

    from edi_parser.loader import (
        Separators,
        SegmentTag,
        split_with_escape,
        get_segments,
        get_data_elements,
        read_segment,
        read_file,
        to_segment_tag,
    )
"""

from __future__ import annotations

from .separators import Separators
from .tokenizer import (
    get_component_data_elements,
    get_data_elements,
    get_repetitions,
    get_segments,
    split_with_escape,
)
from .segment_reader import iter_segments, read_file, read_segment
from .classifiers import (
    SegmentTag,
    escape_line,
    is_separator,
    to_segment_tag,
    unescape_line,
)

__all__ = [
    "Separators",
    "SegmentTag",
    "split_with_escape",
    "get_segments",
    "get_data_elements",
    "get_component_data_elements",
    "get_repetitions",
    "read_segment",
    "iter_segments",
    "read_file",
    "is_separator",
    "escape_line",
    "unescape_line",
    "to_segment_tag",
]

"""
Envelope containers: header / items / derived trailer.
"""

from .container import (
    EdiContainer,
    pad_control_number,
    set_trailer,
    to_text,
    trailer_tag_for,
    write_edi,
)
from .envelopes import (
    build_interchange,
    edifact_group,
    edifact_interchange,
    x12_group,
    x12_interchange,
)
from .tree import SegmentNode, TreeBuilder

__all__ = [
    "EdiContainer",
    "pad_control_number",
    "set_trailer",
    "to_text",
    "trailer_tag_for",
    "write_edi",
    "build_interchange",
    "edifact_group",
    "edifact_interchange",
    "x12_group",
    "x12_interchange",
    "SegmentNode",
    "TreeBuilder",
]

"""
Schema-less segment model and the tree builder the containers use by default.
"""

from .base import Element, Message, Segment, SegmentTreeBuilder
from .edifact import EdifactMessage, une_trailer, unz_trailer
from .x12 import X12Message, ge_trailer, iea_trailer

__all__ = [
    "Element",
    "Message",
    "Segment",
    "SegmentTreeBuilder",
    "EdifactMessage",
    "une_trailer",
    "unz_trailer",
    "X12Message",
    "ge_trailer",
    "iea_trailer",
]

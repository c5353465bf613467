# src/edi_parser/models/edifact.py

"""
EDIFACT flavoured message type and envelope trailer factories.

Interchange: UNB ... UNZ+<message or group count>+<UNB control reference>
Group:       UNG ... UNE+<message count>+<UNG reference>
Message:     UNH ... UNT+<segment count>+<UNH reference>
"""

from __future__ import annotations

from .base import Message, Segment

UNB_CONTROL_REFERENCE = 4
UNG_REFERENCE = 4


class EdifactMessage(Message):
    """A message closed by UNT when rendered inside a container."""


def unz_trailer(header: Segment, count: int) -> Segment:
    return Segment("UNZ", [str(count), header.element(UNB_CONTROL_REFERENCE)])


def une_trailer(header: Segment, count: int) -> Segment:
    return Segment("UNE", [str(count), header.element(UNG_REFERENCE)])

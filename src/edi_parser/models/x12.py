# src/edi_parser/models/x12.py

"""
X12 flavoured message type and envelope trailer factories.

Interchange: ISA ... IEA*<group count>*<ISA13>
Group:       GS  ... GE*<transaction count>*<GS06>
Transaction: ST  ... SE*<segment count>*<ST02>
"""

from __future__ import annotations

from .base import Message, Segment

ISA_CONTROL_NUMBER = 12
GS_CONTROL_NUMBER = 5


class X12Message(Message):
    """A transaction set closed by SE when rendered inside a container."""


def iea_trailer(header: Segment, count: int) -> Segment:
    return Segment("IEA", [str(count), header.element(ISA_CONTROL_NUMBER)])


def ge_trailer(header: Segment, count: int) -> Segment:
    return Segment("GE", [str(count), header.element(GS_CONTROL_NUMBER)])

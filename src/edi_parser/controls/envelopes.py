# src/edi_parser/controls/envelopes.py

"""
Ready-made containers for EDIFACT and X12 envelopes, and the loader that
turns a flat segment list back into interchange -> group -> message.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from edi_parser.core.exceptions import EdiSyntaxError, require
from edi_parser.loader.classifiers import SegmentTag, to_segment_tag
from edi_parser.loader.separators import Separators
from edi_parser.logging import get_logger
from edi_parser.models import (
    EdifactMessage,
    Message,
    Segment,
    X12Message,
    ge_trailer,
    iea_trailer,
    une_trailer,
    unz_trailer,
)
from .container import EdiContainer

log = get_logger(__name__)

Envelope = EdiContainer[Segment, Any, Segment]

_INTERCHANGE_HEADERS = (SegmentTag.UNB, SegmentTag.ISA)
_GROUP_HEADERS = (SegmentTag.UNG, SegmentTag.GS)
_MESSAGE_HEADERS = (SegmentTag.UNH, SegmentTag.ST)
_MESSAGE_TRAILERS = (SegmentTag.UNT, SegmentTag.SE)
_GROUP_TRAILERS = (SegmentTag.UNE, SegmentTag.GE)
_INTERCHANGE_TRAILERS = (SegmentTag.UNZ, SegmentTag.IEA)


def edifact_interchange(header: Segment, separators: Optional[Separators] = None) -> Envelope:
    return EdiContainer(header, unz_trailer, separators or Separators.edifact())


def edifact_group(header: Segment, separators: Optional[Separators] = None) -> Envelope:
    return EdiContainer(header, une_trailer, separators or Separators.edifact())


def x12_interchange(header: Segment, separators: Optional[Separators] = None) -> Envelope:
    return EdiContainer(header, iea_trailer, separators or Separators.x12())


def x12_group(header: Segment, separators: Optional[Separators] = None) -> Envelope:
    return EdiContainer(header, ge_trailer, separators or Separators.x12())


def build_interchange(segments: Iterable[str], separators: Separators) -> Envelope:
    """
    Assemble parsed segment texts into nested containers.

    Envelope trailers in the input (UNZ, UNE, IEA, GE) are dropped because the
    containers derive them. Message trailers (UNT, SE) are kept inside the
    message and replaced when the message is rendered.

    Raises:
        EdiSyntaxError: segments outside their envelope, segments after the
            interchange trailer, or unterminated groups/messages.
        SegmentTooShortError: a segment too short to carry a tag.
    """
    require(segments, "segments")
    require(separators, "separators")

    interchange: Optional[Envelope] = None
    group: Optional[Envelope] = None
    message: Optional[Message] = None
    closed = False

    for position, text in enumerate(segments, start=1):
        tag = to_segment_tag(text)
        if tag is SegmentTag.UNA:
            continue

        segment = Segment.parse(text, separators)

        if closed:
            raise EdiSyntaxError(f"Segment {position}: {segment.tag} after interchange trailer")

        if tag in _INTERCHANGE_HEADERS:
            if interchange is not None:
                raise EdiSyntaxError(f"Segment {position}: second interchange header {segment.tag}")
            factory = x12_interchange if tag is SegmentTag.ISA else edifact_interchange
            interchange = factory(segment, separators)

        elif tag in _GROUP_HEADERS:
            if interchange is None or group is not None or message is not None:
                raise EdiSyntaxError(f"Segment {position}: unexpected group header {segment.tag}")
            factory = x12_group if tag is SegmentTag.GS else edifact_group
            group = factory(segment, separators)

        elif tag in _MESSAGE_HEADERS:
            if interchange is None or message is not None:
                raise EdiSyntaxError(f"Segment {position}: unexpected message header {segment.tag}")
            message_type = X12Message if tag is SegmentTag.ST else EdifactMessage
            message = message_type(segments=[segment])

        elif tag in _MESSAGE_TRAILERS:
            if message is None:
                raise EdiSyntaxError(f"Segment {position}: {segment.tag} outside a message")
            message.segments.append(segment)
            (group if group is not None else interchange).add_item(message)
            message = None

        elif tag in _GROUP_TRAILERS:
            if group is None or message is not None:
                raise EdiSyntaxError(f"Segment {position}: {segment.tag} outside a group")
            interchange.add_item(group)
            group = None

        elif tag in _INTERCHANGE_TRAILERS:
            if interchange is None or group is not None or message is not None:
                raise EdiSyntaxError(f"Segment {position}: unexpected {segment.tag}")
            closed = True

        else:
            if message is None:
                raise EdiSyntaxError(f"Segment {position}: {segment.tag} outside a message")
            message.segments.append(segment)

    if interchange is None:
        raise EdiSyntaxError("No interchange header (UNB or ISA) found")
    if message is not None or group is not None:
        raise EdiSyntaxError("Interchange ended inside an open group or message")

    log.debug(f"Built interchange with {len(interchange)} top-level items")
    return interchange

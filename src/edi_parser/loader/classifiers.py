# src/edi_parser/loader/classifiers.py

from __future__ import annotations

from enum import Enum

from edi_parser.core.exceptions import SegmentTooShortError, require
from .separators import Separators


class SegmentTag(Enum):
    """Envelope and control segments recognized by tag; everything else is REGULAR."""

    UNA = "UNA"
    UNB = "UNB"
    UNG = "UNG"
    UNH = "UNH"
    UNT = "UNT"
    UNE = "UNE"
    UNZ = "UNZ"
    ISA = "ISA"
    GS = "GS"
    ST = "ST"
    SE = "SE"
    GE = "GE"
    IEA = "IEA"
    TA1 = "TA1"
    REGULAR = "REGULAR"


_THREE_LETTER = {t.value: t for t in SegmentTag if len(t.value) == 3}
_TWO_LETTER = {t.value: t for t in SegmentTag if len(t.value) == 2}


def is_separator(value: str, separators: Separators) -> bool:
    """True if the character occurs in any of the five separator strings."""
    if not value:
        return False
    return (
        value in separators.component_data_element
        or value in separators.data_element
        or value in separators.escape
        or value in separators.repetition_data_element
        or value in separators.segment
    )


def escape_line(line: str, separators: Separators) -> str:
    """
    Prefix every separator character in ``line`` with the escape marker.

    With no escape marker configured the text is returned unchanged.
    """
    require(line, "line")
    require(separators, "separators")

    if not separators.escape:
        return line

    return "".join(
        separators.escape + ch if is_separator(ch, separators) else ch
        for ch in line
    )


def unescape_line(line: str, separators: Separators) -> str:
    """
    Remove escape markers left in front of segment terminator or repetition
    characters once a value has been split down to components.
    """
    if not separators.escape or not line:
        return line

    for sep in (separators.segment[:1], separators.repetition_data_element[:1]):
        if sep:
            line = line.replace(separators.escape + sep, sep)
    return line


def to_segment_tag(segment: str) -> SegmentTag:
    """
    Classify a segment by its leading three characters.

    Two-letter X12 tags match when followed by a non-alphanumeric character
    (the data element separator), so "SE*4*0001" is SE but "SEQ+1" is not.

    Raises:
        SegmentTooShortError: fewer than three characters after removing
            line breaks.
    """
    require(segment, "segment")

    clean = segment.replace("\r", "").replace("\n", "").upper()
    if len(clean) < 3:
        raise SegmentTooShortError(f"Segment too short to classify: {segment!r}")

    head = clean[:3]
    if head in _THREE_LETTER:
        return _THREE_LETTER[head]
    if head[:2] in _TWO_LETTER and not head[2].isalnum():
        return _TWO_LETTER[head[:2]]

    return SegmentTag.REGULAR

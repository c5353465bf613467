# tests/test_envelopes.py

from __future__ import annotations

import pytest

from edi_parser.controls import EdiContainer, build_interchange
from edi_parser.core.exceptions import EdiSyntaxError, SegmentTooShortError
from edi_parser.loader import read_file
from edi_parser.models import EdifactMessage, Segment, X12Message
from edi_parser.utils import mock_file_path


def test_edifact_file_round_trip() -> None:
    separators, segments = read_file(mock_file_path("edifact_orders.edi"))

    interchange = build_interchange(segments, separators)

    assert interchange.header.tag == "UNB"
    assert len(interchange) == 1
    assert isinstance(interchange.items[0], EdifactMessage)
    assert interchange.trailer == Segment("UNZ", ["1", "REF001"])

    assert interchange.generate_text() == [
        "UNB+UNOC:3+SENDER+RECEIVER+210101:1200+REF001'",
        "UNH+1+ORDERS:D:96A:UN'",
        "BGM+220+PO?+123+9'",
        "FTX+AAI+++IT?'S URGENT'",
        "UNT+4+0001'",
        "UNZ+1+REF001'",
    ]


def test_x12_file_round_trip() -> None:
    path = mock_file_path("x12_850.edi")
    separators, segments = read_file(path)

    interchange = build_interchange(segments, separators)
    group = interchange.items[0]

    assert isinstance(group, EdiContainer)
    assert isinstance(group.items[0], X12Message)

    expected = [line for line in path.read_text(encoding="utf-8").splitlines() if line]
    assert interchange.generate_text() == expected


def test_groups_count_towards_interchange_trailer(edifact) -> None:
    segments = [
        "UNB+UNOC:3+S+R+210101:1200+REF1",
        "UNG+ORDERS+S+R+210101:1200+G1+UN+D:96A",
        "UNH+1+ORDERS:D:96A:UN",
        "BGM+220",
        "UNT+3+1",
        "UNH+2+ORDERS:D:96A:UN",
        "UNT+2+2",
        "UNE+2+G1",
        "UNZ+1+REF1",
    ]

    interchange = build_interchange(segments, edifact)
    group = interchange.items[0]

    assert interchange.trailer == Segment("UNZ", ["1", "REF1"])
    assert group.trailer == Segment("UNE", ["2", "G1"])
    assert interchange.generate_text()[4:7] == ["UNT+3+0001'", "UNH+2+ORDERS:D:96A:UN'", "UNT+2+0002'"]


@pytest.mark.parametrize(
    "segments",
    [
        ["UNH+1+ORDERS"],
        ["UNB+A", "BGM+220"],
        ["UNB+A", "UNH+1", "BGM+220"],
        ["UNB+A", "UNG+X", "UNH+1", "UNT+2+1", "UNZ+1+A"],
        ["UNB+A", "UNB+B"],
        ["UNB+A", "UNH+1", "UNT+2+1", "UNZ+1+A", "UNH+2", "UNT+2+2"],
        ["BGM+220"],
    ],
)
def test_malformed_envelopes(segments, edifact) -> None:
    with pytest.raises(EdiSyntaxError):
        build_interchange(segments, edifact)


def test_message_after_interchange_trailer_is_rejected(edifact) -> None:
    segments = [
        "UNB+UNOC:3+S+R+210101:1200+REF",
        "UNH+1+ORDERS:D:96A:UN",
        "UNT+2+1",
        "UNZ+1+REF",
        "UNH+2+ORDERS:D:96A:UN",
        "UNT+2+2",
    ]

    with pytest.raises(EdiSyntaxError, match="Segment 5: UNH after interchange trailer"):
        build_interchange(segments, edifact)


def test_short_segment_is_reported(edifact) -> None:
    with pytest.raises(SegmentTooShortError):
        build_interchange(["UNB+A", "XY"], edifact)

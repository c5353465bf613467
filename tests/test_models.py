# tests/test_models.py

from __future__ import annotations

import pytest

from edi_parser.models import Message, Segment, SegmentTreeBuilder, unz_trailer, iea_trailer


def test_segment_render_escapes_and_trims(edifact) -> None:
    seg = Segment("FTX", ["AAI", "", "", "IT'S A+B", "", ""])
    assert seg.render(edifact) == "FTX+AAI+++IT?'S A?+B'"


def test_segment_render_composite(edifact) -> None:
    seg = Segment("DTM", [["137", "20210101", "102"], ""])
    assert seg.render(edifact) == "DTM+137:20210101:102'"


def test_segment_parse(edifact) -> None:
    seg = Segment.parse("UNH+1+ORDERS:D:96A:UN", edifact)

    assert seg.tag == "UNH"
    assert seg.elements == ["1", ["ORDERS", "D", "96A", "UN"]]
    assert seg.element(0) == "1"
    assert seg.element(1, 2) == "96A"
    assert seg.element(5) == ""


def test_segment_parse_then_render_restores_text(edifact) -> None:
    for text in ["BGM+220+PO?+123+9", "FTX+AAI+++IT?'S URGENT", "FTX+A??B"]:
        assert Segment.parse(text, edifact).render(edifact) == text + "'"


def test_escaped_escape_at_end_of_segment(edifact) -> None:
    seg = Segment.parse("FTX+A??", edifact)
    assert seg.elements == ["A?"]
    assert seg.render(edifact) == "FTX+A??'"

    composite = Segment.parse("FTX+C:A??", edifact)
    assert composite.elements == [["C", "A?"]]
    assert composite.render(edifact) == "FTX+C:A??'"

    assert Segment.parse("FTX+A??+B", edifact).elements == ["A?", "B"]


def test_isa_is_not_split_into_components(x12) -> None:
    seg = Segment.parse("ISA*00*01*P*>", x12)
    assert seg.elements == ["00", "01", "P", ">"]


def test_una_is_kept_verbatim(edifact) -> None:
    seg = Segment.parse("UNA:+.? ", edifact)
    assert seg.raw == "UNA:+.? "
    assert seg.render(edifact) == "UNA:+.? '"


def test_message_add_and_from_text(edifact) -> None:
    msg = Message()
    msg.add("UNH", "1", ["ORDERS", "D", "96A", "UN"])
    msg.add("BGM", "220")

    parsed = Message.from_text("UNH+1+ORDERS:D:96A:UN'BGM+220'", edifact)
    assert parsed == msg
    assert len(parsed) == 2


def test_tree_builder_build() -> None:
    builder = SegmentTreeBuilder()
    seg = Segment("BGM", ["220"])

    assert builder.build(seg) == [seg]
    assert builder.build(Message([seg])) == [seg]
    assert builder.build((seg,)) == [seg]

    with pytest.raises(TypeError):
        builder.build(42)


def test_tree_builder_control_number() -> None:
    builder = SegmentTreeBuilder()

    assert builder.control_number([Segment("BGM"), Segment("UNH", ["77"])]) == "77"
    assert builder.control_number([Segment("ST", ["850", "0001"])]) == "0001"
    assert builder.control_number([Segment("BGM", ["220"])]) == ""


def test_trailer_factories() -> None:
    unb = Segment("UNB", [["UNOC", "3"], "S", "R", ["210101", "1200"], "REF9"])
    assert unz_trailer(unb, 3) == Segment("UNZ", ["3", "REF9"])

    isa = Segment("ISA", ["00"] * 12 + ["000000042", "0", "P", ">"])
    assert iea_trailer(isa, 1) == Segment("IEA", ["1", "000000042"])

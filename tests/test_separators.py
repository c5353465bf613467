# tests/test_separators.py

from __future__ import annotations

import dataclasses

import pytest

from edi_parser.core.exceptions import EdiSyntaxError
from edi_parser.loader import Separators
from edi_parser.utils import mock_file_path


def test_presets() -> None:
    edifact = Separators.edifact()
    assert (edifact.segment, edifact.data_element, edifact.escape) == ("'", "+", "?")

    x12 = Separators.x12()
    assert (x12.segment, x12.data_element, x12.escape) == ("~", "*", "")


def test_separators_are_immutable(edifact) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        edifact.segment = "~"  # type: ignore[misc]


def test_from_una() -> None:
    seps = Separators.from_una("UNA:+.? 'UNB+UNOC:3")
    assert seps == Separators.edifact()


def test_from_una_with_repetition_and_custom_chars() -> None:
    seps = Separators.from_una("UNA|#,!^~")
    assert seps.component_data_element == "|"
    assert seps.data_element == "#"
    assert seps.escape == "!"
    assert seps.repetition_data_element == "^"
    assert seps.segment == "~"


def test_from_una_rejects_short_text() -> None:
    with pytest.raises(EdiSyntaxError):
        Separators.from_una("UNA:+")


def test_from_isa() -> None:
    header = mock_file_path("x12_850.edi").read_text(encoding="utf-8")
    assert Separators.from_isa(header) == Separators.x12()


def test_from_isa_rejects_short_text() -> None:
    with pytest.raises(EdiSyntaxError):
        Separators.from_isa("ISA*00*")


def test_detect() -> None:
    assert Separators.detect("\r\n  UNB+UNOC:3+A'") == Separators.edifact()
    assert Separators.detect("UNA:+.? 'UNB") == Separators.edifact()

    with pytest.raises(EdiSyntaxError):
        Separators.detect("XYZ+1'")


def test_from_config_presets() -> None:
    assert Separators.from_config("x12") == Separators.x12()
    assert Separators.from_config() == Separators.edifact()

    with pytest.raises(KeyError):
        Separators.from_config("tradacoms")


def test_as_dict(edifact) -> None:
    assert edifact.as_dict()["component_data_element"] == ":"

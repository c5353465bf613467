# src/edi_parser/loader/separators.py

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional

from edi_parser.config import get_config
from edi_parser.core.exceptions import EdiSyntaxError

UNA_LENGTH = 9
ISA_LENGTH = 106


@dataclass(frozen=True)
class Separators:
    """
    The five delimiter strings in effect for one interchange.

    Attributes:
        segment: Segment terminator. May be longer than one character,
            e.g. "'\\r\\n" or a bare newline.
        data_element: Separates data elements inside a segment.
        component_data_element: Separates components inside a data element.
        repetition_data_element: Separates repetitions of a data element.
        escape: Release character. Empty means "no escaping" (X12).

    All comparisons against these fields are exact string matches.
    """

    segment: str
    data_element: str
    component_data_element: str
    repetition_data_element: str
    escape: str = ""

    # ---------- Presets ----------

    @classmethod
    def edifact(cls) -> "Separators":
        return cls(
            segment="'",
            data_element="+",
            component_data_element=":",
            repetition_data_element="*",
            escape="?",
        )

    @classmethod
    def x12(cls) -> "Separators":
        return cls(
            segment="~",
            data_element="*",
            component_data_element=">",
            repetition_data_element="^",
            escape="",
        )

    @classmethod
    def from_config(cls, preset: Optional[str] = None) -> "Separators":
        """Build separators from a preset in ``config/edi_parser.yml``.

        Falls back to the built-in EDIFACT / X12 presets when the config file
        does not define ``separators.presets``.
        """
        cfg = get_config()
        if not cfg.separators.get("presets"):
            name = preset or cfg.separators.get("default", "edifact")
            if name == "x12":
                return cls.x12()
            if name == "edifact":
                return cls.edifact()
            raise KeyError(f"Unknown separator preset: {name}")

        return cls(**cfg.separator_preset(preset))

    # ---------- Detection from envelope text ----------

    @classmethod
    def from_una(cls, text: str) -> "Separators":
        """
        Read the EDIFACT service string advice, e.g. ``UNA:+.? '``.

        Layout: UNA, component, data element, decimal mark, release
        character, repetition (space = not used), segment terminator.
        """
        if not text.startswith("UNA") or len(text) < UNA_LENGTH:
            raise EdiSyntaxError(f"Invalid UNA service string advice: {text[:UNA_LENGTH]!r}")

        repetition = text[7] if text[7] != " " else "*"
        escape = text[6] if text[6] != " " else ""

        return cls(
            segment=text[8],
            data_element=text[4],
            component_data_element=text[3],
            repetition_data_element=repetition,
            escape=escape,
        )

    @classmethod
    def from_isa(cls, text: str) -> "Separators":
        """
        Read delimiters from the fixed-width X12 ISA header.

        The data element separator is the 4th character, the repetition
        separator is ISA11, the component separator is ISA16 and the segment
        terminator is the character right after it.
        """
        if not text.startswith("ISA") or len(text) < ISA_LENGTH:
            raise EdiSyntaxError(f"Invalid ISA header: {text[:ISA_LENGTH]!r}")

        return cls(
            segment=text[105],
            data_element=text[3],
            component_data_element=text[104],
            repetition_data_element=text[82],
            escape="",
        )

    @classmethod
    def detect(cls, text: str) -> "Separators":
        """Pick separators from the start of an interchange."""
        head = text.lstrip()

        if head.startswith("UNA"):
            return cls.from_una(head)
        if head.startswith("ISA"):
            return cls.from_isa(head)
        if head.startswith("UNB"):
            return cls.edifact()

        raise EdiSyntaxError(
            f"Cannot detect separators: expected UNA, UNB or ISA, got {head[:3]!r}"
        )

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

# src/edi_parser/models/base.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from edi_parser.loader.classifiers import SegmentTag, escape_line, unescape_line
from edi_parser.loader.separators import Separators
from edi_parser.loader.tokenizer import (
    get_component_data_elements,
    get_data_elements,
    get_segments,
    split_with_escape,
)

Element = Union[str, List[str]]


def _collapse_trailing_escape(value: str, separators: Separators) -> str:
    # The tokenizer only collapses an escaped escape at a boundary; the last
    # token of a segment has none.
    doubled = separators.escape + separators.escape
    if separators.escape and value.endswith(doubled):
        return value[: -len(separators.escape)]
    return value


@dataclass
class Segment:
    """
    One EDI segment.

    Attributes:
        tag: Segment tag, e.g. "UNH", "BGM", "ST".
        elements: Data elements in order. A plain string is a simple element,
            a list of strings is a composite element (its components).
        raw: Verbatim text for service segments that are not element based
            (UNA). Rendered as-is, followed by the terminator.
    """

    tag: str
    elements: List[Element] = field(default_factory=list)
    raw: Optional[str] = None

    def element(self, index: int, component: int = 0) -> str:
        """Return one (component of a) data element, or "" if it is absent."""
        if index >= len(self.elements):
            return ""
        value = self.elements[index]
        if isinstance(value, str):
            return value if component == 0 else ""
        return value[component] if component < len(value) else ""

    def render(self, separators: Separators) -> str:
        """Render to text, escaping content and trimming trailing empty elements."""
        if self.raw is not None:
            return self.raw + separators.segment

        rendered: List[str] = []
        for value in self.elements:
            components = [value] if isinstance(value, str) else list(value)
            while components and not components[-1]:
                components.pop()
            rendered.append(
                separators.component_data_element.join(
                    escape_line(c, separators) for c in components
                )
            )

        while rendered and not rendered[-1]:
            rendered.pop()

        return separators.data_element.join([self.tag, *rendered]) + separators.segment

    @classmethod
    def parse(cls, text: str, separators: Separators) -> "Segment":
        """Build a Segment from one segment text (terminator already removed)."""
        if text.upper().startswith(SegmentTag.UNA.value):
            return cls(tag=SegmentTag.UNA.value, raw=text)

        tag = split_with_escape(text, separators.escape, separators.data_element)[0]
        # ISA is fixed width and carries the component separator as a value
        split_components = tag.strip().upper() != SegmentTag.ISA.value
        elements: List[Element] = []

        for value in get_data_elements(text, separators):
            if not value or not split_components:
                elements.append(value)
                continue
            components = [
                unescape_line(_collapse_trailing_escape(c, separators), separators)
                for c in get_component_data_elements(value, separators)
            ]
            elements.append(components[0] if len(components) == 1 else components)

        return cls(tag=tag.strip(), elements=elements)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Segment {self.tag} elements={len(self.elements)}>"


@dataclass
class Message:
    """A business document: an ordered list of segments."""

    segments: List[Segment] = field(default_factory=list)

    def add(self, tag: str, *elements: Element) -> Segment:
        segment = Segment(tag=tag, elements=list(elements))
        self.segments.append(segment)
        return segment

    @classmethod
    def from_text(cls, text: str, separators: Separators) -> "Message":
        return cls(segments=[Segment.parse(s, separators) for s in get_segments(text, separators)])

    def __len__(self) -> int:
        return len(self.segments)


class SegmentTreeBuilder:
    """
    Schema-less tree builder for the types in this package.

    * a Segment yields itself;
    * anything with a ``segments`` attribute yields those segments;
    * a list/tuple of Segments yields itself.
    """

    def build(self, item: Any) -> List[Segment]:
        if isinstance(item, Segment):
            return [item]

        segments = getattr(item, "segments", None)
        if segments is not None:
            return list(segments)

        if isinstance(item, (list, tuple)) and all(isinstance(s, Segment) for s in item):
            return list(item)

        raise TypeError(f"Cannot build segments from {type(item).__name__}")

    def control_number(self, nodes: Sequence[Any]) -> str:
        """UNH reference (element 1) or ST control number (element 2), else ""."""
        segments = [n for n in nodes if isinstance(n, Segment)]

        for seg in segments:
            if seg.tag.upper() == SegmentTag.UNH.value:
                return seg.element(0)
        for seg in segments:
            if seg.tag.upper() == SegmentTag.ST.value:
                return seg.element(1)

        return ""

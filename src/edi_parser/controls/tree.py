# src/edi_parser/controls/tree.py

"""
Narrow interface to the component that turns a domain value into segments.

The container never inspects message structure itself. It asks a tree
builder for the ordered segment-level nodes of a value and for the control
number carried by those nodes.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from edi_parser.loader.separators import Separators


@runtime_checkable
class SegmentNode(Protocol):
    """A segment-level node that renders to one line of EDI text."""

    def render(self, separators: Separators) -> str:
        """Return the segment text, terminator included."""
        ...


@runtime_checkable
class TreeBuilder(Protocol):
    def build(self, item: Any) -> Sequence[SegmentNode]:
        """Return the segment nodes of ``item`` in document order."""
        ...

    def control_number(self, nodes: Sequence[SegmentNode]) -> str:
        """Return the message control number found among ``nodes``."""
        ...

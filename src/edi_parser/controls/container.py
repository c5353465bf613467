# src/edi_parser/controls/container.py

"""
Header / items / trailer aggregate used for interchanges and groups.

    EdiContainer(header=UNB, trailer_setter=unz_trailer, ...)
        .add_item(message)          -> trailer = UNZ(count=1)
        .add_items([m2, m3])        -> trailer = UNZ(count=3)
        .generate_text()            -> [UNB, <m1 segments>, ..., UNZ]

The trailer is never assigned by callers. It is derived from the header and
the current item count through the ``trailer_setter`` callable bound at
construction, and recomputed after every append.

Messages get their own trailer (UNT / SE) rebuilt while they are rendered:
an existing trailer at the end of the message is replaced, otherwise one is
appended.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from edi_parser.core.exceptions import InvalidArgumentError, require
from edi_parser.loader.separators import Separators
from edi_parser.logging import get_logger
from edi_parser.models.base import SegmentTreeBuilder
from .tree import TreeBuilder

log = get_logger(__name__)

H = TypeVar("H")
M = TypeVar("M")
T = TypeVar("T")

X12_FAMILY_MARKER = ".x12"
X12_TRAILER_TAG = "SE"
EDIFACT_TRAILER_TAG = "UNT"


# ---------- Message trailer synthesis ----------


def trailer_tag_for(item: Any) -> str:
    """
    Pick the message trailer tag from the item's type identity.

    The match is case-insensitive on ``.module.qualname``: a type closes with
    SE when some dotted part of that path starts with ``x12`` (``models.x12``,
    ``X12Message``, ``app.X12Order``). Everything else, ``app.MyX12Order``
    included, closes with UNT.
    """
    cls = type(item)
    qualified = f".{cls.__module__}.{cls.__qualname__}".lower()
    return X12_TRAILER_TAG if X12_FAMILY_MARKER in qualified else EDIFACT_TRAILER_TAG


def pad_control_number(control_number: str, width: Optional[int] = None) -> str:
    """Left-pad with zeros to ``width``; 9 for numbers longer than 4, else 4."""
    if width is None:
        width = 9 if len(control_number) > 4 else 4
    return control_number.rjust(width, "0")


def set_trailer(
    segments: List[str],
    separators: Separators,
    trailer_tag: str,
    control_number: str,
) -> None:
    """
    Replace or append the message trailer in ``segments`` (in place).

    The segment count always includes the trailer row itself. Nothing is
    added to an empty segment list.
    """
    if not segments:
        return

    count = len(segments)
    last = segments[-1]

    if last.startswith(trailer_tag + separators.data_element) or last.startswith(
        trailer_tag + separators.segment
    ):
        segments.pop()
        log.debug(f"Replacing existing {trailer_tag} trailer: {last!r}")
    else:
        count += 1

    segments.append(
        trailer_tag
        + separators.data_element
        + str(count)
        + separators.data_element
        + pad_control_number(control_number)
        + separators.segment
    )


def to_text(
    item: Any,
    separators: Separators,
    is_message: bool = False,
    tree_builder: Optional[TreeBuilder] = None,
) -> List[str]:
    """
    Render ``item`` to segment lines in document order.

    With ``is_message`` the trailer is synthesized from the rendered
    segments and the control number the tree builder extracts.
    """
    require(item, "item")
    require(separators, "separators")

    builder = tree_builder if tree_builder is not None else SegmentTreeBuilder()
    nodes = list(builder.build(item))
    result = [node.render(separators) for node in nodes]

    if not is_message:
        return result

    control_number = builder.control_number(nodes)
    set_trailer(result, separators, trailer_tag_for(item), control_number)
    return result


# ---------- Container ----------


class EdiContainer(Generic[H, M, T]):
    """
    An interchange or group: optional header, ordered items, derived trailer.

    Items are messages, or nested containers (groups inside an interchange).
    Not safe for concurrent mutation; use one writer per instance.
    """

    def __init__(
        self,
        header: Optional[H],
        trailer_setter: Callable[[H, int], T],
        default_separators: Separators,
        tree_builder: Optional[TreeBuilder] = None,
    ) -> None:
        require(trailer_setter, "trailer_setter")
        require(default_separators, "default_separators")

        self._header = header
        self._trailer_setter = trailer_setter
        self._default_separators = default_separators
        self._tree_builder = tree_builder if tree_builder is not None else SegmentTreeBuilder()
        self._items: List[M] = []
        self._trailer: Optional[T] = None

        self._refresh_trailer()

    @property
    def header(self) -> Optional[H]:
        return self._header

    @property
    def items(self) -> Tuple[M, ...]:
        return tuple(self._items)

    @property
    def trailer(self) -> Optional[T]:
        return self._trailer

    def __len__(self) -> int:
        return len(self._items)

    def _refresh_trailer(self) -> None:
        if self._header is None:
            return
        self._trailer = self._trailer_setter(self._header, len(self._items))

    def add_item(self, item: M) -> None:
        require(item, "item")

        self._items.append(item)
        self._refresh_trailer()

    def add_items(self, items: Iterable[M]) -> None:
        require(items, "items")

        batch = list(items)
        if any(item is None for item in batch):
            raise InvalidArgumentError("Argument 'items' must not contain None")

        self._items.extend(batch)
        self._refresh_trailer()
        log.debug(f"Added {len(batch)} items, container now holds {len(self._items)}")

    def generate_text(self, separators: Optional[Separators] = None) -> List[str]:
        """
        Render header, every item and the trailer to segment lines.

        Each line carries its own segment terminator; join them with "" (or a
        line break for readability) to build the final text.
        """
        current = separators if separators is not None else self._default_separators
        result: List[str] = []

        if self._header is not None:
            result.extend(to_text(self._header, current, tree_builder=self._tree_builder))

        for item in self._items:
            if isinstance(item, EdiContainer):
                result.extend(item.generate_text(current))
            else:
                result.extend(to_text(item, current, True, self._tree_builder))

        if self._trailer is not None:
            result.extend(to_text(self._trailer, current, tree_builder=self._tree_builder))

        return result

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<EdiContainer header={self._header!r} items={len(self._items)}>"


def write_edi(lines: Iterable[str], stream, newline: str = "") -> int:
    """Write generated segment lines to a text stream; returns the count written."""
    require(stream, "stream")

    count = 0
    for line in lines:
        if count and newline:
            stream.write(newline)
        stream.write(line)
        count += 1
    return count

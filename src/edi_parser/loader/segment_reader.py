# src/edi_parser/loader/segment_reader.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple, Union

from edi_parser.core.exceptions import require
from edi_parser.logging import get_logger
from .separators import ISA_LENGTH, Separators

log = get_logger(__name__)

_EOL = "\r\n"


def _is_newline(terminator: str) -> bool:
    return terminator.strip(_EOL) == ""


def read_segment(stream: TextIO, separators: Separators) -> str:
    """
    Read the next segment from a character stream.

    Characters are consumed one at a time until the buffer ends with the
    segment terminator. A terminator preceded by the escape marker is
    content, not a boundary. Blank segments (e.g. line breaks between
    segments) are skipped.

    Returns:
        The segment text without its terminator, or "" once the stream is
        exhausted.
    """
    require(stream, "stream")
    require(separators, "separators")

    terminator = separators.segment
    escaped = separators.escape + terminator if separators.escape else None
    keep_eol = _is_newline(terminator)

    line = ""
    while True:
        symbol = stream.read(1)
        if not symbol:
            break

        line += symbol
        if not line.endswith(terminator):
            continue
        if escaped and line.endswith(escaped):
            continue

        line = line[: -len(terminator)]
        if not keep_eol:
            line = line.strip(_EOL)

        if line.strip(_EOL):
            break
        line = ""

    return line.strip(_EOL)


def iter_segments(stream: TextIO, separators: Separators) -> Iterator[str]:
    """Yield segments from ``stream`` until it is exhausted."""
    while True:
        segment = read_segment(stream, separators)
        if not segment:
            return
        yield segment


def read_file(
    path: Union[str, Path],
    separators: Optional[Separators] = None,
) -> Tuple[Separators, List[str]]:
    """
    Read every segment of an EDI file.

    Args:
        path: Path to the interchange file.
        separators: Delimiters to use. Detected from the UNA / UNB / ISA
            header when omitted.

    Returns:
        (separators used, segment texts in document order)

    Raises:
        FileNotFoundError: if `path` does not exist.
        EdiSyntaxError: if separators are omitted and cannot be detected.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"EDI file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace", newline="") as f:
        if separators is None:
            # Enough for an ISA header plus leading line breaks
            separators = Separators.detect(f.read(ISA_LENGTH + 16))
            f.seek(0)
            log.debug(f"Detected separators for {file_path.name}: {separators}")

        segments = list(iter_segments(f, separators))

    log.info(f"Read {len(segments)} segments from {file_path}")
    return separators, segments

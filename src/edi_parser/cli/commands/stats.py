
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from edi_parser.cli.utils import load_segments
from edi_parser.core.exceptions import SegmentTooShortError
from edi_parser.loader import SegmentTag, to_segment_tag

console = Console()

_MESSAGE_HEADERS = {SegmentTag.UNH, SegmentTag.ST}


def stats_command(
    edi_file: Path = typer.Argument(..., exists=True, readable=True),
    preset: Optional[str] = typer.Option(
        None,
        "--preset",
        "-p",
        help="Separator preset from config (detected from the envelope if omitted)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show segment class counts for an EDI file.
    """
    _, segments = load_segments(edi_file, preset=preset, verbose=verbose)

    counts: Counter = Counter()
    for text in segments:
        try:
            counts[to_segment_tag(text)] += 1
        except SegmentTooShortError:
            counts[None] += 1

    table = Table(title="EDI Statistics")
    table.add_column("Segment class", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Segments", str(len(segments)))
    table.add_row("Messages", str(sum(counts[t] for t in _MESSAGE_HEADERS)))
    for tag, count in sorted(counts.items(), key=lambda kv: kv[0].value if kv[0] else ""):
        table.add_row(tag.value if tag else "TOO SHORT", str(count))

    console.print(table)

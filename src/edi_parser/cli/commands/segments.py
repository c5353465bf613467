from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from edi_parser.cli.utils import load_segments
from edi_parser.core.exceptions import SegmentTooShortError
from edi_parser.loader import get_data_elements, to_segment_tag

console = Console()


def segments_command(
    edi_file: Path = typer.Argument(..., exists=True, readable=True),
    preset: Optional[str] = typer.Option(
        None,
        "--preset",
        "-p",
        help="Separator preset from config (detected from the envelope if omitted)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most N segments",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    List the segments of an EDI file.
    """
    separators, segments = load_segments(edi_file, preset=preset, verbose=verbose)
    shown = segments[:limit] if limit else segments

    table = Table(title=f"{edi_file.name}: {len(segments)} segments")
    table.add_column("#", justify="right")
    table.add_column("Class", style="bold")
    table.add_column("Elements", justify="right")
    table.add_column("Text", overflow="fold")

    for index, text in enumerate(shown, start=1):
        try:
            tag = to_segment_tag(text).value
        except SegmentTooShortError:
            tag = "TOO SHORT"

        table.add_row(
            str(index),
            tag,
            str(len(get_data_elements(text, separators))),
            text,
        )

    console.print(table)

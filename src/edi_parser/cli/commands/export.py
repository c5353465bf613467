from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from edi_parser.cli.utils import load_segments, segment_to_dict, write_json

console = Console()


def export_command(
    edi_file: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
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
    Export EDI segments to JSON (stdout by default).
    """
    separators, segments = load_segments(edi_file, preset=preset, verbose=verbose)

    data = {
        "separators": separators.as_dict(),
        "segments": [segment_to_dict(text, separators) for text in segments],
    }

    if verbose:
        console.log("Exporting JSON")

    write_json(data, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")

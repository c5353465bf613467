from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from edi_parser.cli.utils import err_console, load_segments
from edi_parser.controls import build_interchange, write_edi
from edi_parser.core.exceptions import EdiError
from edi_parser.logger import get_logger

console = Console()


def regenerate_command(
    edi_file: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    line_breaks: bool = typer.Option(
        False,
        "--line-breaks",
        help="Put every segment on its own line",
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
    Rebuild an interchange with recomputed trailers (UNT/SE, UNE/GE, UNZ/IEA).
    """
    separators, segments = load_segments(edi_file, preset=preset, verbose=verbose)
    log = get_logger("cli")

    try:
        interchange = build_interchange(segments, separators)
    except EdiError as exc:
        log.error(f"Cannot rebuild {edi_file}: {exc}")
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    lines = interchange.generate_text(separators)
    newline = "\n" if line_breaks else ""

    if out:
        with out.open("w", encoding="utf-8", newline="") as f:
            write_edi(lines, f, newline=newline)
    else:
        write_edi(lines, sys.stdout, newline=newline)
        sys.stdout.write("\n")

    if verbose:
        console.log(f"Wrote {len(lines)} segments")

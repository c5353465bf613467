
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import typer
from rich.console import Console

from edi_parser.core.exceptions import EdiError
from edi_parser.loader import Separators, read_file
from edi_parser.logger import get_logger
from edi_parser.logging import configure_logging
from edi_parser.models import Segment

console = Console()
err_console = Console(stderr=True)


def load_segments(
    path: Path,
    *,
    preset: Optional[str] = None,
    verbose: bool = False,
) -> Tuple[Separators, List[str]]:
    """
    Read every segment of an EDI file, with separators taken from a config
    preset or detected from the envelope when no preset is given.
    """
    configure_logging(debug=True if verbose else None)
    log = get_logger("cli")

    t0 = time.perf_counter()
    try:
        separators = Separators.from_config(preset) if preset else None
        separators, segments = read_file(path, separators)
    except (EdiError, KeyError) as exc:
        log.error(f"Cannot read {path}: {exc}")
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0
    if verbose:
        console.log(f"Read {len(segments)} segments in {elapsed:.3f}s")

    return separators, segments


def segment_to_dict(text: str, separators: Separators) -> Dict[str, Any]:
    """Represent one segment as {tag, elements: [[component, ...], ...]}."""
    segment = Segment.parse(text, separators)
    if segment.raw is not None:
        return {"tag": segment.tag, "raw": segment.raw}

    return {
        "tag": segment.tag,
        "elements": [[e] if isinstance(e, str) else list(e) for e in segment.elements],
    }


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)


from __future__ import annotations

import typer

from edi_parser.cli.commands import (
    export_command,
    regenerate_command,
    segments_command,
    stats_command,
)

app = typer.Typer(
    name="edi",
    help="EDIFACT / X12 segment inspector, exporter and regenerator",
    add_completion=False,
)

app.command("segments")(segments_command)
app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("regenerate")(regenerate_command)


def main():
    app()


if __name__ == "__main__":
    main()

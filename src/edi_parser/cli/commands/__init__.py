
"""
CLI command modules for edi_parser.

Each command module defines a single Typer-compatible command function.
"""

from edi_parser.cli.commands.export import export_command
from edi_parser.cli.commands.regenerate import regenerate_command
from edi_parser.cli.commands.segments import segments_command
from edi_parser.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "regenerate_command",
    "segments_command",
    "stats_command",
]


"""
CLI package for edi_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from edi_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]

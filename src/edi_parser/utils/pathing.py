# src/edi_parser/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <project_root>/src/edi_parser/utils/pathing.py -> parents[3] is the root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains src/, tests/, config/
    and mock_files/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Example:
        resolve_project_path("mock_files/edifact_orders.edi")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Return the absolute path to a file under the top-level mock_files/ directory."""
    return resolve_project_path(Path("mock_files") / filename)

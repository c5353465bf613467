import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from edi_parser.loader import Separators  # noqa: E402


@pytest.fixture
def edifact() -> Separators:
    return Separators.edifact()


@pytest.fixture
def x12() -> Separators:
    return Separators.x12()

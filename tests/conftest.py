# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "linesolver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from linesolver.csp.board import Board  # noqa: E402
from linesolver.grid.parser import parse_grid  # noqa: E402


@pytest.fixture
def make_board():
    """Build an empty Board from grid text such as "RR\\nGG"."""
    def _make(text):
        return Board.from_grid(parse_grid(text))
    return _make

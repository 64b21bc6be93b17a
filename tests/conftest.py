# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver", "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DATA = Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA


@pytest.fixture
def puzzle_text() -> str:
    return (DATA / "puzzle_1.txt").read_text(encoding="utf-8")


@pytest.fixture
def solution_text() -> str:
    return (DATA / "solution_1.txt").read_text(encoding="utf-8")


@pytest.fixture
def dead_end_rows():
    # r1c1 is empty but its row holds 1..8 and its column holds 9.
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    rows[1][0] = 9
    return rows

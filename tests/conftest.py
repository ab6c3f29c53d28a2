"""Shared fixtures for solver tests."""

from pathlib import Path

import pytest

from sudoku_solver.gridio.text_format import read_grid
from sudoku_solver.models.grid import grid_from_rows

PROJECT_ROOT = Path(__file__).resolve().parents[1]
PUZZLE_DIR = PROJECT_ROOT / "data" / "puzzles"


@pytest.fixture
def puzzle_dir() -> Path:
    return PUZZLE_DIR


@pytest.fixture
def wikipedia_puzzle():
    return read_grid(PUZZLE_DIR / "wikipedia.sud")


@pytest.fixture
def solved_grid():
    """Known solution of the Wikipedia sample puzzle."""
    return grid_from_rows(
        [
            [5, 3, 4, 6, 7, 8, 9, 1, 2],
            [6, 7, 2, 1, 9, 5, 3, 4, 8],
            [1, 9, 8, 3, 4, 2, 5, 6, 7],
            [8, 5, 9, 7, 6, 1, 4, 2, 3],
            [4, 2, 6, 8, 5, 3, 7, 9, 1],
            [7, 1, 3, 9, 2, 4, 8, 5, 6],
            [9, 6, 1, 5, 3, 7, 2, 8, 4],
            [2, 8, 7, 4, 1, 9, 6, 3, 5],
            [3, 4, 5, 2, 8, 6, 1, 7, 9],
        ]
    )

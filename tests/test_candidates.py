"""Tests for candidate digits of a cell."""

import numpy as np
import pytest

from sudoku_solver.gridio.random_grid import random_grid
from sudoku_solver.models.grid import EXAMPLE, blank_grid, place, well_formed
from sudoku_solver.solver.candidates import candidates
from sudoku_solver.solver.validator import legal


@pytest.mark.parametrize("pos", [(0, 0), (4, 4), (8, 8), (2, 7)])
def test_blank_grid_allows_every_digit(pos):
    assert candidates(blank_grid(), pos) == list(range(1, 10))


def test_candidates_exclude_row_column_and_box():
    grid = blank_grid()
    grid = place(grid, (0, 8), 1)  # same row
    grid = place(grid, (8, 0), 2)  # same column
    grid = place(grid, (1, 1), 3)  # same box
    grid = place(grid, (5, 5), 4)  # unrelated

    assert candidates(grid, (0, 0)) == [4, 5, 6, 7, 8, 9]


def test_candidates_for_example_cell():
    # Row 0 holds 3 6 7 1 2, column 2 holds 9 5 3 7, box 0 holds 3 6 5 9.
    assert candidates(EXAMPLE, (0, 2)) == [4, 8]


def test_illegal_grid_has_no_candidates():
    grid = place(place(blank_grid(), (0, 0), 5), (0, 1), 5)

    assert candidates(grid, (8, 8)) == []


def test_candidates_are_ascending_and_deterministic():
    first = candidates(EXAMPLE, (1, 0))

    assert first == sorted(first)
    assert candidates(EXAMPLE, (1, 0)) == first


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_every_candidate_keeps_grid_legal(seed):
    grid = random_grid(np.random.default_rng(seed))

    for row in range(9):
        for col in range(9):
            for digit in candidates(grid, (row, col)):
                updated = place(grid, (row, col), digit)
                assert legal(updated)
                assert well_formed(updated)

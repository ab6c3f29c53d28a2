"""Property checks over randomly generated grids."""

import numpy as np
import pytest

from sudoku_solver.gridio.random_grid import blank_out, random_cell, random_grid
from sudoku_solver.models.grid import (
    EMPTY,
    blanks,
    cell_at,
    is_solved,
    place,
    well_formed,
)
from sudoku_solver.solver.backtracking import solve
from sudoku_solver.solver.validator import blocks, legal

SEEDS = list(range(8))


@pytest.mark.parametrize("seed", SEEDS)
def test_random_grid_is_well_formed(seed):
    grid = random_grid(np.random.default_rng(seed))

    assert well_formed(grid)
    assert all(cell is EMPTY or type(cell) is int for row in grid for cell in row)


def test_random_grid_is_mostly_blank():
    rng = np.random.default_rng(123)
    cells = [random_cell(rng) for _ in range(5000)]
    blank_share = sum(cell is EMPTY for cell in cells) / len(cells)

    assert 0.85 < blank_share < 0.95
    assert {cell for cell in cells if cell is not EMPTY} == set(range(1, 10))


def test_random_grid_weights():
    rng = np.random.default_rng(5)

    assert is_solved(random_grid(rng, blank_weight=0, digit_weight=1))
    assert len(blanks(random_grid(rng, blank_weight=1, digit_weight=0))) == 81


@pytest.mark.parametrize("blank_weight, digit_weight", [(0, 0), (-1, 1), (1, -1)])
def test_random_cell_rejects_bad_weights(blank_weight, digit_weight):
    rng = np.random.default_rng(0)

    with pytest.raises(ValueError, match="Weights must be non-negative"):
        random_cell(rng, blank_weight, digit_weight)

    with pytest.raises(ValueError, match="Weights must be non-negative"):
        random_grid(rng, blank_weight, digit_weight)


@pytest.mark.parametrize("seed", SEEDS)
def test_blocks_shape(seed):
    result = blocks(random_grid(np.random.default_rng(seed)))

    assert len(result) == 27
    assert all(len(block) == 9 for block in result)


@pytest.mark.parametrize("seed", SEEDS)
def test_place_preserves_shape_and_frame(seed):
    rng = np.random.default_rng(seed)
    grid = random_grid(rng)
    row, col = (int(v) for v in rng.integers(0, 9, size=2))
    value = random_cell(rng, blank_weight=1, digit_weight=1)

    updated = place(grid, (row, col), value)

    assert well_formed(updated)
    assert cell_at(updated, (row, col)) == value
    for r in range(9):
        for c in range(9):
            if (r, c) != (row, col):
                assert updated[r][c] == grid[r][c]


@pytest.mark.parametrize("seed", SEEDS)
def test_blanks_are_empty(seed):
    grid = random_grid(np.random.default_rng(seed))

    assert all(cell_at(grid, pos) is EMPTY for pos in blanks(grid))


@pytest.mark.parametrize("seed", SEEDS)
def test_illegal_random_grids_have_no_solution(seed):
    grid = random_grid(np.random.default_rng(seed), blank_weight=1, digit_weight=1)
    if legal(grid):
        pytest.skip("random grid happens to be legal")

    assert solve(grid) is None


def test_blank_out_empties_exact_count(solved_grid):
    puzzle = blank_out(solved_grid, 30, np.random.default_rng(9))

    assert len(blanks(puzzle)) == 30
    for r, c in set(
        (r, c) for r in range(9) for c in range(9)
    ) - set(blanks(puzzle)):
        assert puzzle[r][c] == solved_grid[r][c]

"""Sudoku solver using backtracking with a most-constrained-cell heuristic."""

import logging
from typing import List, Optional, Tuple

from ..models.grid import (
    EMPTY,
    Grid,
    Position,
    blanks,
    grid_from_rows,
    is_solved,
    place,
    well_formed,
)
from .candidates import candidates
from .validator import legal

_LOGGER = logging.getLogger(__name__)


class SudokuSolver:
    """Solves Sudoku puzzles using backtracking."""

    def __init__(self):
        self.solutions_count = 0
        self.nodes_visited = 0

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: 9x9 grid with ``EMPTY`` for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise. A malformed
            grid or one whose givens already conflict also gives None. A grid
            with no blanks is returned as given; any other solution comes back
            as a tuple of tuples.
        """
        self.solutions_count = 0
        self.nodes_visited = 0
        if not self._is_solvable_input(grid):
            return None

        if is_solved(grid):
            self.nodes_visited = 1
            self.solutions_count = 1
            return grid

        solution = self._solve_recursive(grid_from_rows(grid))
        if solution is not None:
            self.solutions_count = 1
        _LOGGER.debug(
            "Search finished: solved=%s nodes=%d",
            solution is not None,
            self.nodes_visited,
        )
        return solution

    def _solve_recursive(self, grid: Grid) -> Optional[Grid]:
        """Fill the most constrained blank, trying its candidates in order."""
        self.nodes_visited += 1
        choice = self._best_blank(grid)
        if choice is None:
            return grid

        pos, options = choice
        for num in options:
            solved = self._solve_recursive(place(grid, pos, num))
            if solved is not None:
                return solved

        return None

    def _best_blank(self, grid: Grid) -> Optional[Tuple[Position, List[int]]]:
        """
        Find the blank with the fewest candidates.

        Ties go to the first blank in row-major order. Returns None when the
        grid has no blanks left.
        """
        best: Optional[Tuple[Position, List[int]]] = None
        for pos in blanks(grid):
            options = candidates(grid, pos)
            if best is None or len(options) < len(best[1]):
                best = (pos, options)
                if not options:
                    break
        return best

    def count_solutions(self, grid: Grid, max_count: int = 2) -> int:
        """
        Count number of solutions (up to max_count).

        Args:
            grid: 9x9 grid to solve
            max_count: Stop counting after finding this many solutions

        Returns:
            Number of solutions found
        """
        self.solutions_count = 0
        self.nodes_visited = 0
        if not self._is_solvable_input(grid):
            return 0
        self._count_solutions_recursive(grid_from_rows(grid), max_count)
        _LOGGER.debug(
            "Counted %d solution(s) in %d nodes (limit %d)",
            self.solutions_count,
            self.nodes_visited,
            max_count,
        )
        return self.solutions_count

    def _count_solutions_recursive(self, grid: Grid, max_count: int) -> None:
        """Recursively count solutions, stopping at max_count."""
        if self.solutions_count >= max_count:
            return

        self.nodes_visited += 1
        choice = self._best_blank(grid)
        if choice is None:
            self.solutions_count += 1
            return

        pos, options = choice
        for num in options:
            self._count_solutions_recursive(place(grid, pos, num), max_count)
            if self.solutions_count >= max_count:
                return

    def _is_solvable_input(self, grid: Grid) -> bool:
        if not well_formed(grid):
            _LOGGER.debug("Rejecting grid: not a 9x9 grid of digits 1-9")
            return False
        if not legal(grid):
            _LOGGER.debug("Rejecting grid: givens conflict")
            return False
        return True


def solve(grid: Grid) -> Optional[Grid]:
    """Convenience function to solve a Sudoku grid."""
    solver = SudokuSolver()
    return solver.solve(grid)


def is_solution_of(candidate: Grid, original: Grid) -> bool:
    """
    Check that candidate is a completed version of original.

    Args:
        candidate: Proposed solution
        original: Puzzle with its givens

    Returns:
        True if candidate has no blanks and keeps every given of original
    """
    if not well_formed(candidate) or not well_formed(original):
        return False
    if not is_solved(candidate):
        return False
    return all(
        given is EMPTY or given == value
        for cand_row, orig_row in zip(candidate, original)
        for value, given in zip(cand_row, orig_row)
    )

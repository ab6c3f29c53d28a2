"""Solver module exports."""

from .backtracking import SudokuSolver, is_solution_of, solve
from .candidates import candidates
from .validator import blocks, find_conflicts, is_legal_block, is_valid_placement, legal

__all__ = [
    "SudokuSolver",
    "blocks",
    "candidates",
    "find_conflicts",
    "is_legal_block",
    "is_solution_of",
    "is_valid_placement",
    "legal",
    "solve",
]

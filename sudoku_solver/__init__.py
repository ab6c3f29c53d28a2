"""9x9 Sudoku solver."""

from .gridio.text_format import StructuralError, parse, read_grid, render
from .models.grid import (
    EMPTY,
    EXAMPLE,
    blank_grid,
    blanks,
    is_solved,
    place,
    well_formed,
)
from .solver import SudokuSolver, blocks, candidates, is_solution_of, legal, solve

__all__ = [
    "EMPTY",
    "EXAMPLE",
    "StructuralError",
    "SudokuSolver",
    "blank_grid",
    "blanks",
    "blocks",
    "candidates",
    "is_solution_of",
    "is_solved",
    "legal",
    "parse",
    "place",
    "read_grid",
    "render",
    "solve",
    "well_formed",
]

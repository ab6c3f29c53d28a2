"""Legal digits for an empty cell."""

from typing import List

from ..models.grid import DIGITS, Grid, Position, place
from .validator import legal


def candidates(grid: Grid, pos: Position) -> List[int]:
    """
    Find every digit that can be placed at pos without breaking a constraint.

    Each digit is tried on its own copy of the grid and the whole grid is
    re-validated.

    Args:
        grid: Current grid state
        pos: (row, col) of the cell

    Returns:
        Digits in ascending order
    """
    return [digit for digit in DIGITS if legal(place(grid, pos, digit))]

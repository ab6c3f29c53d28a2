"""Grid data model for 9x9 Sudoku puzzles."""

from typing import List, Optional, Sequence, Tuple


Cell = Optional[int]
Grid = Tuple[Tuple[Cell, ...], ...]
Position = Tuple[int, int]
Block = List[Cell]

SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)
EMPTY: Cell = None


def grid_from_rows(rows: Sequence[Sequence[Optional[int]]], empty: int = 0) -> Grid:
    """
    Build an immutable grid from a list of rows.

    Args:
        rows: Row-major cell values
        empty: Integer marker used for empty cells (``None`` is always empty)

    Returns:
        Grid as a tuple of tuples with ``EMPTY`` for empty cells
    """
    return tuple(
        tuple(EMPTY if cell is None or cell == empty else cell for cell in row)
        for row in rows
    )


def to_int_rows(grid: Grid) -> List[List[int]]:
    """Convert a grid to lists of ints with 0 for empty cells."""
    return [[0 if cell is EMPTY else int(cell) for cell in row] for row in grid]


def blank_grid() -> Grid:
    """Return a grid where every cell is empty."""
    return tuple(tuple(EMPTY for _ in range(SIZE)) for _ in range(SIZE))


def well_formed(grid) -> bool:
    """
    Check that a grid has the right shape and only holds valid cells.

    Args:
        grid: Candidate grid of any type

    Returns:
        True if grid is 9 rows of 9 cells, each empty or a digit 1-9
    """
    if not isinstance(grid, (list, tuple)) or len(grid) != SIZE:
        return False

    for row in grid:
        if not isinstance(row, (list, tuple)) or len(row) != SIZE:
            return False
        for cell in row:
            if cell is EMPTY:
                continue
            if isinstance(cell, bool) or not isinstance(cell, int):
                return False
            if cell not in DIGITS:
                return False
    return True


def is_solved(grid: Grid) -> bool:
    """True if no cell is empty."""
    return all(cell is not EMPTY for row in grid for cell in row)


def blanks(grid: Grid) -> List[Position]:
    """Positions of the empty cells in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell is EMPTY
    ]


def cell_at(grid: Grid, pos: Position) -> Cell:
    row, col = pos
    return grid[row][col]


def in_bounds(pos: Position) -> bool:
    row, col = pos
    return 0 <= row < SIZE and 0 <= col < SIZE


def place(grid: Grid, pos: Position, value: Cell) -> Grid:
    """
    Return a copy of grid with value stored at pos.

    The input grid is never modified. A position outside the 9x9 board is
    ignored and the input grid is returned as is.

    Args:
        grid: Current grid state
        pos: (row, col) to update
        value: Digit 1-9 or ``EMPTY``

    Returns:
        Updated grid
    """
    if not in_bounds(pos):
        return grid

    row, col = pos
    old_row = tuple(grid[row])
    new_row = old_row[:col] + (value,) + old_row[col + 1:]
    return tuple(grid[:row]) + (new_row,) + tuple(grid[row + 1:])


# Sample puzzle shipped with the solver; also data/puzzles/example.sud.
EXAMPLE: Grid = grid_from_rows(
    [
        [3, 6, 0, 0, 7, 1, 2, 0, 0],
        [0, 5, 0, 0, 0, 0, 1, 8, 0],
        [0, 0, 9, 2, 0, 4, 7, 0, 0],
        [0, 0, 0, 0, 1, 3, 0, 2, 8],
        [4, 0, 0, 5, 0, 2, 0, 0, 9],
        [2, 7, 0, 4, 6, 0, 0, 0, 0],
        [0, 0, 5, 3, 0, 8, 9, 0, 0],
        [0, 8, 3, 0, 0, 0, 0, 6, 0],
        [0, 0, 7, 6, 9, 0, 0, 4, 3],
    ]
)

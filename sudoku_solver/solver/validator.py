"""Constraint checks over rows, columns and 3x3 boxes."""

from typing import List

from ..models.grid import BOX_SIZE, EMPTY, SIZE, Block, Grid, Position


def rows_of(grid: Grid) -> List[Block]:
    return [list(row) for row in grid]


def columns_of(grid: Grid) -> List[Block]:
    return [list(column) for column in zip(*grid)]


def boxes_of(grid: Grid) -> List[Block]:
    """Boxes in box-row-major, then box-column-major order."""
    boxes = []
    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            boxes.append(
                [
                    grid[r][c]
                    for r in range(box_row, box_row + BOX_SIZE)
                    for c in range(box_col, box_col + BOX_SIZE)
                ]
            )
    return boxes


def blocks(grid: Grid) -> List[Block]:
    """
    Return all 27 blocks of a grid.

    Rows come first, then columns, then the nine 3x3 boxes.
    """
    return rows_of(grid) + columns_of(grid) + boxes_of(grid)


def is_legal_block(block: Block) -> bool:
    """True if no digit repeats among the filled cells of block."""
    filled = [cell for cell in block if cell is not EMPTY]
    return len(filled) == len(set(filled))


def legal(grid: Grid) -> bool:
    """True if every row, column and box of grid is a legal block."""
    return all(is_legal_block(block) for block in blocks(grid))


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The cell at (row, col) itself is ignored, so a filled cell can be checked
    against its peers.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1-9)

    Returns:
        True if placement is valid, False otherwise
    """
    # Check row
    for c in range(SIZE):
        if c != col and grid[row][c] == num:
            return False

    # Check column
    for r in range(SIZE):
        if r != row and grid[r][col] == num:
            return False

    # Check 3x3 box
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE

    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == num:
                return False

    return True


def find_conflicts(grid: Grid) -> List[Position]:
    """Filled cells whose digit also appears in their row, column or box."""
    conflicts = []
    for row in range(SIZE):
        for col in range(SIZE):
            num = grid[row][col]
            if num is EMPTY:
                continue
            if not is_valid_placement(grid, row, col, num):
                conflicts.append((row, col))
    return conflicts

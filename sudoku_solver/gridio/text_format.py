"""Read and write grids in the plain-text puzzle format.

A puzzle is nine lines of nine characters: ``1``-``9`` for givens and ``.``
for empty cells.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..models.grid import EMPTY, SIZE, Grid

BLANK_SYMBOL = "."


class StructuralError(ValueError):
    """Raised when text does not describe a 9x9 grid of valid symbols."""


def _parse_symbol(symbol: str, row: int, col: int) -> int | None:
    if symbol == BLANK_SYMBOL:
        return EMPTY
    if symbol in "123456789":
        return int(symbol)
    raise StructuralError(
        f"Invalid symbol {symbol!r} at line {row + 1}, column {col + 1}"
    )


def parse(text: str) -> Grid:
    """Parse puzzle text into a grid, raising ``StructuralError`` if malformed."""
    lines = text.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) != SIZE:
        raise StructuralError(f"Expected {SIZE} lines, got {len(lines)}")

    rows = []
    for r, line in enumerate(lines):
        if len(line) != SIZE:
            raise StructuralError(
                f"Line {r + 1} has {len(line)} characters, expected {SIZE}"
            )
        rows.append(tuple(_parse_symbol(ch, r, c) for c, ch in enumerate(line)))
    return tuple(rows)


def render(grid: Grid) -> str:
    """Render a grid as nine newline-terminated lines."""
    return "".join(
        "".join(BLANK_SYMBOL if cell is EMPTY else str(cell) for cell in row) + "\n"
        for row in grid
    )


def read_grid(path: str | os.PathLike[str]) -> Grid:
    """Read and parse a puzzle file."""
    return parse(Path(path).read_text(encoding="utf-8"))

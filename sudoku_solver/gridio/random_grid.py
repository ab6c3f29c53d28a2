"""Random grids for property-style tests."""

from __future__ import annotations

import numpy as np

from ..models.grid import EMPTY, SIZE, Cell, Grid


def random_cell(
    rng: np.random.Generator,
    blank_weight: int = 9,
    digit_weight: int = 1,
) -> Cell:
    """Draw an empty cell or a uniformly chosen digit, by the given weights."""
    total = blank_weight + digit_weight
    if blank_weight < 0 or digit_weight < 0 or total < 1:
        raise ValueError(
            f"Weights must be non-negative with a positive sum, "
            f"got blank_weight={blank_weight} digit_weight={digit_weight}"
        )
    if rng.integers(0, total) < blank_weight:
        return EMPTY
    return int(rng.integers(1, SIZE + 1))


def random_grid(
    rng: np.random.Generator | None = None,
    blank_weight: int = 9,
    digit_weight: int = 1,
) -> Grid:
    """
    Generate a well-formed grid with mostly empty cells.

    The result is not necessarily legal or solvable.
    """
    if rng is None:
        rng = np.random.default_rng()
    return tuple(
        tuple(random_cell(rng, blank_weight, digit_weight) for _ in range(SIZE))
        for _ in range(SIZE)
    )


def blank_out(
    grid: Grid,
    count: int,
    rng: np.random.Generator | None = None,
) -> Grid:
    """Return a copy of grid with ``count`` distinct random cells emptied."""
    if rng is None:
        rng = np.random.default_rng()
    count = max(0, min(SIZE * SIZE, int(count)))
    picked = {int(idx) for idx in rng.choice(SIZE * SIZE, size=count, replace=False)}
    return tuple(
        tuple(
            EMPTY if r * SIZE + c in picked else cell
            for c, cell in enumerate(row)
        )
        for r, row in enumerate(grid)
    )

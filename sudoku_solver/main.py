"""Command line entry point: read a puzzle file and print its solution."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import CliConfig, default_count_limit, default_debug
from .gridio.text_format import StructuralError, read_grid, render
from .models.grid import Grid, grid_from_rows, to_int_rows
from .models.schemas import SolveResponse
from .solver.backtracking import SudokuSolver
from .solver.validator import find_conflicts

_LOGGER = logging.getLogger(__name__)

NO_SOLUTION = "No solution"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _parse_args(argv: Optional[Sequence[str]] = None) -> CliConfig:
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle file")
    parser.add_argument(
        "puzzle",
        type=Path,
        help="Puzzle file: 9 lines of 9 characters, '1'-'9' or '.' for empty",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--count-solutions",
        action="store_true",
        help="Also count solutions, up to --count-limit",
    )
    parser.add_argument(
        "--count-limit",
        type=int,
        default=default_count_limit(),
        help="Stop counting after this many solutions (SUDOKU_COUNT_LIMIT env)",
    )
    parser.add_argument("--debug", action="store_true", default=default_debug())
    args = parser.parse_args(argv)

    return CliConfig(
        puzzle_path=args.puzzle,
        json_output=args.json_output,
        count_solutions=args.count_solutions,
        count_limit=max(1, args.count_limit),
        debug=args.debug,
    )


def solve_puzzle(grid: Grid, config: CliConfig) -> SolveResponse:
    """Solve a parsed puzzle and describe the outcome."""
    solver = SudokuSolver()
    solved = solver.solve(grid)
    nodes_visited = solver.nodes_visited

    solutions = None
    if config.count_solutions:
        solutions = solver.count_solutions(grid, max_count=config.count_limit)

    conflicts = find_conflicts(grid)
    if solved is not None:
        message = "Puzzle solved successfully"
        if solutions is not None and solutions > 1:
            message += " (puzzle has multiple solutions)"
    elif conflicts:
        message = "Puzzle has conflicting givens"
    else:
        message = "Puzzle has no solution"

    return SolveResponse(
        success=solved is not None,
        original=to_int_rows(grid),
        solved=to_int_rows(solved) if solved is not None else None,
        message=message,
        solutions=solutions,
        nodes_visited=nodes_visited,
        conflicts=[[row, col] for row, col in conflicts],
    )


def run(config: CliConfig) -> int:
    _configure_logging(config.debug)

    try:
        grid = read_grid(config.puzzle_path)
    except StructuralError as exc:
        _LOGGER.error("Malformed puzzle %s: %s", config.puzzle_path, exc)
        return 2
    except OSError as exc:
        _LOGGER.error("Cannot read puzzle %s: %s", config.puzzle_path, exc)
        return 2

    response = solve_puzzle(grid, config)
    _LOGGER.info(
        "%s: %s (%d nodes)",
        config.puzzle_path,
        response.message,
        response.nodes_visited,
    )

    if config.json_output:
        print(response.model_dump_json(indent=2))
    elif response.solved is not None:
        print(render(grid_from_rows(response.solved)), end="")
    else:
        print(NO_SOLUTION)

    return 0 if response.success else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = _parse_args(argv)
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())

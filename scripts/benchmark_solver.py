"""Benchmark solver runtime over a set of puzzle files."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku_solver.gridio.text_format import read_grid
from sudoku_solver.models.grid import Grid
from sudoku_solver.solver.backtracking import SudokuSolver


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        nargs="+",
        default=["example.sud", "wikipedia.sud", "menneske_3241368.sud"],
        help="Puzzle paths or names under data/puzzles",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of rounds over all puzzles",
    )
    return parser.parse_args()


def load_puzzles(refs: list[str]) -> dict[str, Grid]:
    return {ref: read_grid(resolve_puzzle_path(ref)) for ref in refs}


def run_benchmark(
    solver: SudokuSolver,
    puzzles: dict[str, Grid],
    rounds: int,
) -> tuple[float, float, dict[str, int]]:
    """Solve every puzzle ``rounds`` times.

    Returns total seconds, average seconds per solve and the node count of the
    last solve of each puzzle.
    """
    nodes: dict[str, int] = {}
    start = time.perf_counter()

    for _ in range(rounds):
        for name, grid in puzzles.items():
            solver.solve(grid)
            nodes[name] = solver.nodes_visited

    elapsed = time.perf_counter() - start
    avg_per_solve = elapsed / max(1, rounds * len(puzzles))
    return elapsed, avg_per_solve, nodes


def main() -> int:
    args = parse_args()
    rounds = max(1, args.rounds)

    puzzles = load_puzzles(args.puzzles)
    elapsed, avg_per_solve, nodes = run_benchmark(SudokuSolver(), puzzles, rounds)

    print(f"Puzzles: {len(puzzles)}")
    print(f"Rounds: {rounds}")
    for name, count in nodes.items():
        print(f"  {name}: {count} nodes")
    print(f"Total: {elapsed:.3f}s")
    print(f"Avg/solve: {avg_per_solve * 1000.0:.1f}ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

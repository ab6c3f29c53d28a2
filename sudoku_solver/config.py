"""Runtime configuration for the command line solver."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TypeVar

_T = TypeVar("_T", int, float)

COUNT_LIMIT_ENV = "SUDOKU_COUNT_LIMIT"
DEBUG_ENV = "SUDOKU_DEBUG"


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def default_count_limit() -> int:
    return max(1, _env(COUNT_LIMIT_ENV, 2))


def default_debug() -> bool:
    return _env_flag(DEBUG_ENV)


@dataclass
class CliConfig:
    puzzle_path: Optional[Path] = None
    json_output: bool = False
    count_solutions: bool = False
    count_limit: int = 2
    debug: bool = False

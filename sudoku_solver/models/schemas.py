"""Pydantic models for JSON solve results."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SolveResponse(BaseModel):
    """Result of solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid (0 for empty cells)")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    solutions: int | None = Field(
        default=None, description="Solutions found, capped at the counting limit"
    )
    nodes_visited: int = Field(default=0, description="Search nodes expanded")
    conflicts: list[list[int]] = Field(
        default_factory=list, description="[row, col] of conflicting givens"
    )

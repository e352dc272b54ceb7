"""Plain result records returned by the search engine and benchmark harness."""

from __future__ import annotations

from dataclasses import dataclass

from fifteen.models.board import Direction


@dataclass(frozen=True)
class HeuristicSolveResult:
    moves: list[Direction] | None
    steps: int
    solved: bool


@dataclass(frozen=True)
class BenchmarkRow:
    """One heuristic's benchmark outcome.

    ``time`` is wall-clock milliseconds rounded to one decimal place and
    ``moves`` is ``"-"`` when the run did not reach the goal.
    """

    name: str
    time: float
    moves: int | str
    steps: int
    solved: bool

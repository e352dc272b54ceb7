"""Compares heuristics by solving the same board once with each."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from time import perf_counter

from fifteen.engine.gamesolver.search import DEFAULT_MAX_STEPS, solve_with_heuristic
from fifteen.engine.heuristics import ALL_HEURISTICS, HeuristicDescriptor
from fifteen.models.board import Board
from fifteen.models.results import BenchmarkRow

logger = logging.getLogger(__name__)

UNSOLVED_MOVES = "-"


def run_benchmarks(
    board: Board | Sequence[int | None],
    size: int,
    max_steps: int = DEFAULT_MAX_STEPS,
    heuristics: Iterable[HeuristicDescriptor] = ALL_HEURISTICS,
) -> list[BenchmarkRow]:
    """Run the single-heuristic search once per heuristic.

    Every run starts from the same board with a fresh queue and visited set.
    Times are wall-clock milliseconds rounded to one decimal place.
    """
    rows: list[BenchmarkRow] = []
    for h in heuristics:
        t0 = perf_counter()
        res = solve_with_heuristic(board, size, h.fn, max_steps)
        elapsed_ms = (perf_counter() - t0) * 1000

        row = BenchmarkRow(
            name=h.name,
            time=round(elapsed_ms, 1),
            moves=len(res.moves) if res.moves is not None else UNSOLVED_MOVES,
            steps=res.steps,
            solved=res.solved,
        )
        logger.info(
            "%-40s %8.1f ms  moves=%s  steps=%d",
            row.name, row.time, row.moves, row.steps,
        )
        rows.append(row)
    return rows

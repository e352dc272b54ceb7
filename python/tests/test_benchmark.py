from __future__ import annotations

import logging

from fifteen.engine.benchmark import UNSOLVED_MOVES, run_benchmarks
from fifteen.engine.heuristics import HEURISTIC_NAMES, MANHATTAN
from fifteen.models.board import Board


def test_one_row_per_heuristic() -> None:
    rows = run_benchmarks([1, 2, 3, 4, 5, 6, None, 7, 8], 3)
    assert [r.name for r in rows] == list(HEURISTIC_NAMES)
    for row in rows:
        assert row.solved is True
        assert row.moves == 2
        assert row.steps == 2
        assert row.time >= 0
        assert row.time == round(row.time, 1)


def test_solved_start() -> None:
    rows = run_benchmarks([1, 2, 3, 4, 5, 6, 7, 8, None], 3)
    assert all(r.solved and r.moves == 0 and r.steps == 0 for r in rows)


def test_unsolved_rows_use_placeholder() -> None:
    rows = run_benchmarks([2, 1, 3, 4, 5, 6, 7, 8, None], 3, max_steps=200)
    for row in rows:
        assert row.solved is False
        assert row.moves == UNSOLVED_MOVES
        assert row.steps == 200


def test_custom_heuristic_list_and_board_model() -> None:
    board = Board.from_flat(2, [1, 2, 0, 3])
    rows = run_benchmarks(board, 2, heuristics=[MANHATTAN])
    assert len(rows) == 1
    assert rows[0].moves == 1


def test_rows_are_logged(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="fifteen.engine.benchmark"):
        run_benchmarks([1, 2, 3, 4, 5, 6, 7, None, 8], 3)
    assert sum("Manhattan" in rec.getMessage() for rec in caplog.records) == 3

"""Heuristic values on hand-checked boards, plus catalog and ordering checks."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.heuristics import (
    ADVANCED,
    ALL_HEURISTICS,
    HEURISTIC_NAMES,
    LINEAR_CONFLICT,
    MANHATTAN,
    advanced_heuristic,
    corner_tiles,
    get_heuristic,
    linear_conflict,
    manhattan_distance,
)


def test_catalog_names() -> None:
    assert len(ALL_HEURISTICS) == 3
    assert HEURISTIC_NAMES == (
        "Manhattan",
        "Manhattan + Linear Conflict",
        "Advanced (Manhattan + Linear + Corners)",
    )


def test_get_heuristic() -> None:
    assert get_heuristic("Manhattan") is MANHATTAN
    with pytest.raises(KeyError):
        get_heuristic("Euclidean")


@pytest.mark.parametrize("size", [2, 3, 4, 5, 7])
@pytest.mark.parametrize("h", ALL_HEURISTICS, ids=lambda h: h.name)
def test_goal_scores_zero(h, size: int) -> None:
    assert h(GameGenerator.solved(size).tiles, size) == 0


# -- hand-checked values ------------------------------------------------------


def test_swapped_pair_in_goal_row() -> None:
    board = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert manhattan_distance(board, 3) == 2
    assert linear_conflict(board, 3) == 2
    assert LINEAR_CONFLICT(board, 3) == 4
    assert corner_tiles(board, 3) == 0
    assert ADVANCED(board, 3) == 4


def test_column_conflicts_count_every_reversed_pair() -> None:
    # 7, 4, 1 in column 0, all reversed: three pairs.
    board = (7, 2, 3, 4, 5, 6, 1, 8, 0)
    assert manhattan_distance(board, 3) == 4
    assert linear_conflict(board, 3) == 6


def test_blank_is_ignored_by_manhattan() -> None:
    assert manhattan_distance((1, 2, 3, 4, 5, 6, 7, 0, 8), 3) == 1


def test_top_left_corner_penalty() -> None:
    board = (5, 4, 3, 2, 1, 6, 7, 8, 0)
    assert manhattan_distance(board, 3) == 8
    assert linear_conflict(board, 3) == 0
    assert corner_tiles(board, 3) == 2
    assert advanced_heuristic(board, 3) == 10


@pytest.mark.parametrize(
    "board, size",
    [
        # top-right: 4 missing, 3 and 8 misplaced
        ((1, 2, 8, 3, 5, 6, 7, 4, 9, 10, 11, 12, 13, 14, 15, 0), 4),
        # bottom-left: 13 missing, 14 and 9 misplaced
        ((1, 2, 3, 4, 5, 6, 7, 8, 13, 10, 11, 12, 14, 9, 15, 0), 4),
        # bottom-right: blank missing, 8 and 6 misplaced
        ((1, 2, 3, 4, 5, 0, 7, 6, 8), 3),
    ],
    ids=["top-right", "bottom-left", "bottom-right"],
)
def test_single_corner_penalty(board: tuple[int, ...], size: int) -> None:
    assert corner_tiles(board, size) == 2


def test_no_corner_penalty_when_a_feed_tile_is_home() -> None:
    # corner tile 1 missing but tile 4 sits in its feed cell
    assert corner_tiles((2, 3, 1, 4, 5, 6, 7, 8, 0), 3) == 0


# -- ordering -----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_heuristic_ordering(size: int) -> None:
    rng = random.Random(size)
    for _ in range(50):
        board = GameGenerator.shuffled(size, rng).tiles
        m = manhattan_distance(board, size)
        lc = LINEAR_CONFLICT(board, size)
        adv = ADVANCED(board, size)
        assert adv >= lc >= m >= 0

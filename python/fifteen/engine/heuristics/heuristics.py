"""Distance-to-goal estimators for the sliding puzzle.

Every heuristic takes a flat board (blank = 0) and its edge length and
returns a non-negative int. The goal board scores 0 under all of them, and
for any board ``advanced >= manhattan + linear conflict >= manhattan``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

HeuristicFn = Callable[[Sequence[int], int], int]

CORNER_PENALTY = 2


def manhattan_distance(board: Sequence[int], size: int) -> int:
    dist = 0
    for idx, val in enumerate(board):
        if val == 0:
            continue
        r, c = divmod(idx, size)
        gr, gc = divmod(val - 1, size)
        dist += abs(r - gr) + abs(c - gc)
    return dist


def linear_conflict(board: Sequence[int], size: int) -> int:
    """Penalty term only: 2 per pair of tiles reversed within their goal line."""
    conflicts = 0
    # Rows
    for r in range(size):
        in_row = [
            v for v in board[r * size : (r + 1) * size]
            if v != 0 and (v - 1) // size == r
        ]
        for i in range(len(in_row)):
            for j in range(i + 1, len(in_row)):
                if in_row[i] > in_row[j]:
                    conflicts += 1
    # Columns
    for c in range(size):
        in_col = [
            v for v in board[c::size]
            if v != 0 and (v - 1) % size == c
        ]
        for i in range(len(in_col)):
            for j in range(i + 1, len(in_col)):
                if in_col[i] > in_col[j]:
                    conflicts += 1
    return conflicts * 2


def _corner_cells(size: int) -> tuple[tuple[int, int, int], ...]:
    """(corner, row feed, column feed) cell indices for the four corners."""
    top_right = size - 1
    bottom_left = (size - 1) * size
    bottom_right = size * size - 1
    return (
        (0, 1, size),
        (top_right, top_right - 1, top_right + size),
        (bottom_left, bottom_left + 1, bottom_left - size),
        (bottom_right, bottom_right - 1, bottom_right - size),
    )


def corner_tiles(board: Sequence[int], size: int) -> int:
    """Penalise corners whose tile is missing while both feed cells are wrong.

    The tile at cell ``i`` belongs there when it is ``i + 1``; the last cell
    belongs to the blank.
    """
    last = size * size - 1

    def misplaced(i: int) -> bool:
        return board[i] != (0 if i == last else i + 1)

    penalty = 0
    for corner, row_feed, col_feed in _corner_cells(size):
        if misplaced(corner) and misplaced(row_feed) and misplaced(col_feed):
            penalty += CORNER_PENALTY
    return penalty


def manhattan_linear_conflict(board: Sequence[int], size: int) -> int:
    return manhattan_distance(board, size) + linear_conflict(board, size)


def advanced_heuristic(board: Sequence[int], size: int) -> int:
    return (
        manhattan_distance(board, size)
        + linear_conflict(board, size)
        + corner_tiles(board, size)
    )


# -- catalog ------------------------------------------------------------------


@dataclass(frozen=True)
class HeuristicDescriptor:
    name: str
    fn: HeuristicFn

    def __call__(self, board: Sequence[int], size: int) -> int:
        return self.fn(board, size)


MANHATTAN = HeuristicDescriptor("Manhattan", manhattan_distance)
LINEAR_CONFLICT = HeuristicDescriptor(
    "Manhattan + Linear Conflict", manhattan_linear_conflict
)
ADVANCED = HeuristicDescriptor(
    "Advanced (Manhattan + Linear + Corners)", advanced_heuristic
)

ALL_HEURISTICS: tuple[HeuristicDescriptor, ...] = (MANHATTAN, LINEAR_CONFLICT, ADVANCED)
HEURISTIC_NAMES: tuple[str, ...] = tuple(h.name for h in ALL_HEURISTICS)


def get_heuristic(name: str) -> HeuristicDescriptor:
    """Look up a catalog entry by its display name."""
    for h in ALL_HEURISTICS:
        if h.name == name:
            return h
    raise KeyError(f"Unknown heuristic {name!r}; expected one of {HEURISTIC_NAMES}")

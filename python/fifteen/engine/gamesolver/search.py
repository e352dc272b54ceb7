"""A*-style informed search over sliding puzzle states.

Two entry points share one loop:

* :func:`solve_with_heuristic` scores states with any heuristic and only
  remembers which states it has expanded. It is heuristic-only: a cheaper
  route to an expanded state is never reconsidered, so the answer is not
  necessarily shortest.
* :func:`solve_sliding_puzzle` always uses the advanced heuristic and keeps
  the best cost seen per state, re-opening a state reached more cheaply.

Both stop on the goal, on an empty queue, or once ``max_steps`` states have
been expanded. Running out of budget is an ordinary result, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, replace
from typing import Protocol

from fifteen.engine.codec import BoardKey, encode_compact, is_goal, key_for_size
from fifteen.engine.gamesolver.heap import MinHeap
from fifteen.engine.heuristics import HeuristicFn, advanced_heuristic
from fifteen.models.board import Board, Direction
from fifteen.models.results import HeuristicSolveResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 200_000


@dataclass(frozen=True, slots=True)
class PuzzleState:
    board: tuple[int, ...]
    size: int
    moves: tuple[Direction, ...] = ()
    cost: int = 0
    estimate: int = 0

    @property
    def priority(self) -> int:
        return self.cost + self.estimate

    def scored(self, estimate: int) -> PuzzleState:
        return replace(self, estimate=estimate)


def neighbors(state: PuzzleState, prune_reversals: bool = True) -> list[PuzzleState]:
    """Expand *state* by every legal blank move, estimates left at 0.

    With *prune_reversals* the move that would undo the previous one is not
    generated.
    """
    board, size = state.board, state.size
    blank = board.index(0)
    row, col = divmod(blank, size)
    last = state.moves[-1] if state.moves else None

    out: list[PuzzleState] = []
    for direction in Direction:
        if prune_reversals and last is not None and direction is last.opposite:
            continue
        dr, dc = direction.delta
        r, c = row + dr, col + dc
        if not (0 <= r < size and 0 <= c < size):
            continue
        target = r * size + c
        tiles = list(board)
        tiles[blank] = tiles[target]
        tiles[target] = 0
        out.append(
            PuzzleState(
                board=tuple(tiles),
                size=size,
                moves=state.moves + (direction,),
                cost=state.cost + 1,
            )
        )
    return out


# -- visited-set strategies ---------------------------------------------------


class VisitedSet(Protocol):
    def should_expand(self, key: Hashable, cost: int) -> bool: ...

    def should_push(self, key: Hashable, cost: int) -> bool: ...


class ExpandedKeys:
    """Remembers expanded states; any state not yet expanded may be pushed."""

    def __init__(self) -> None:
        self._seen: set[Hashable] = set()

    def should_expand(self, key: Hashable, cost: int) -> bool:
        self._seen.add(key)
        return True

    def should_push(self, key: Hashable, cost: int) -> bool:
        return key not in self._seen

    def __len__(self) -> int:
        return len(self._seen)


class BestCostMap:
    """Remembers the cheapest cost per state and only admits improvements."""

    def __init__(self) -> None:
        self._best: dict[Hashable, int] = {}

    def should_expand(self, key: Hashable, cost: int) -> bool:
        best = self._best.get(key)
        if best is not None and best <= cost:
            return False
        self._best[key] = cost
        return True

    def should_push(self, key: Hashable, cost: int) -> bool:
        best = self._best.get(key)
        return best is None or cost < best

    def __len__(self) -> int:
        return len(self._best)


# -- core loop ----------------------------------------------------------------


def _as_tiles(board: Board | Sequence[int | None]) -> tuple[int, ...]:
    if isinstance(board, Board):
        return board.tiles
    return tuple(0 if v is None else v for v in board)


def _search(
    board: tuple[int, ...],
    size: int,
    heuristic: HeuristicFn,
    max_steps: int,
    key: BoardKey,
    visited: VisitedSet,
    prune_reversals: bool,
) -> tuple[list[Direction] | None, int]:
    open_set: MinHeap[PuzzleState] = MinHeap(lambda s: s.priority)
    open_set.push(PuzzleState(board=board, size=size).scored(heuristic(board, size)))

    steps = 0
    while open_set and steps < max_steps:
        curr = open_set.pop()
        if is_goal(curr.board):
            return list(curr.moves), steps

        # A state that is no improvement is dropped without costing a step.
        if not visited.should_expand(key(curr.board), curr.cost):
            continue

        for child in neighbors(curr, prune_reversals):
            if visited.should_push(key(child.board), child.cost):
                open_set.push(child.scored(heuristic(child.board, size)))
        steps += 1

    return None, steps


# -- public API ---------------------------------------------------------------


def solve_with_heuristic(
    board: Board | Sequence[int | None],
    size: int,
    heuristic: HeuristicFn,
    max_steps: int = DEFAULT_MAX_STEPS,
    key: BoardKey = encode_compact,
    *,
    cost_aware: bool = False,
    prune_reversals: bool = True,
) -> HeuristicSolveResult:
    """Search with *heuristic* and report moves, expansions and success.

    By default only expanded states are remembered; pass ``cost_aware=True``
    to re-open states reached more cheaply.
    """
    visited: VisitedSet = BestCostMap() if cost_aware else ExpandedKeys()
    moves, steps = _search(
        _as_tiles(board), size, heuristic, max_steps, key, visited, prune_reversals
    )
    logger.debug(
        "%s on %dx%d: %s after %d steps",
        getattr(heuristic, "name", getattr(heuristic, "__name__", "heuristic")),
        size, size,
        "solved" if moves is not None else "unsolved",
        steps,
    )
    return HeuristicSolveResult(moves=moves, steps=steps, solved=moves is not None)


def solve_sliding_puzzle(
    board: Board | Sequence[int | None],
    size: int,
    max_steps: int = DEFAULT_MAX_STEPS,
    *,
    prune_reversals: bool = True,
) -> list[Direction] | None:
    """Best-effort full solve; ``None`` if the budget runs out first."""
    moves, steps = _search(
        _as_tiles(board),
        size,
        advanced_heuristic,
        max_steps,
        key_for_size(size),
        BestCostMap(),
        prune_reversals,
    )
    if moves is None:
        logger.debug("No solution for %dx%d board within %d steps", size, size, steps)
    else:
        logger.debug("Solved %dx%d board in %d moves (%d steps)", size, size, len(moves), steps)
    return moves

"""Sliding puzzle solver facade used by the CLI."""

from __future__ import annotations

import logging

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver.search import solve_sliding_puzzle
from fifteen.models.board import Board, Direction

logger = logging.getLogger(__name__)

# Interactive budget; the search engine's own default is far larger.
SOLVER_MAX_STEPS = 20_000


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board, max_steps: int = SOLVER_MAX_STEPS) -> list[Direction] | None:
        """Return a move sequence that solves *board*.

        ``[]`` if already solved, ``None`` if unsolvable or not solved within
        *max_steps* expansions.
        """
        if board.is_solved():
            return []

        if not Solver.is_solvable(board):
            logger.info("Board %s is unsolvable", board.to_list())
            return None

        return solve_sliding_puzzle(board, board.size, max_steps)

    @staticmethod
    def hint(board: Board, max_steps: int = SOLVER_MAX_STEPS) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolved."""
        moves = Solver.solve(board, max_steps)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return GameGenerator.is_solvable(board)

"""Applies moves to a board and checks the win condition."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fifteen.models.board import Board, Direction, IllegalMoveError, move_direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Replays moves against a board, one session at a time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile **above** it.
        Returns True if the move was valid.
        """
        try:
            self.board = self.board.slide(direction)
        except IllegalMoveError as exc:
            logger.debug("Rejected move: %s", exc)
            return False
        self.moves += 1
        return True

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        size = self.board.size
        direction = move_direction(row * size + col, self.board.blank_index, size)
        if direction is None:
            return False
        return self.move(direction)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()


def solution_boards(board: Board, moves: Iterable[Direction]) -> list[Board]:
    """Return *board* followed by the board after each move."""
    boards = [board]
    for direction in moves:
        boards.append(boards[-1].slide(direction))
    return boards

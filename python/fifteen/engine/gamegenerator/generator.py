"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from fifteen.models.board import Board, Direction


class GameGenerator:
    """Creates puzzles and decides whether an arrangement can be solved."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board(size=size, tiles=tuple(range(1, size * size)) + (0,))

    @staticmethod
    def scramble(
        board: Board,
        num_shuffles: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after a random walk of valid blank moves.

        The walk never immediately undoes its previous move. Defaults to
        ``size * size * 100`` moves.
        """
        rng = rng or random.Random()
        if num_shuffles is None:
            num_shuffles = board.size * board.size * 100

        prev: Direction | None = None
        for _ in range(num_shuffles):
            options = GameGenerator._legal_moves(board)
            if prev is not None and prev.opposite in options and len(options) > 1:
                options.remove(prev.opposite)
            prev = rng.choice(options)
            board = board.slide(prev)
        return board

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        rng = rng or random.Random()
        while True:
            board = GameGenerator.scramble(GameGenerator.solved(size), rng=rng)
            # Ensure the board is not already solved
            if not board.is_solved():
                return board

    @staticmethod
    def shuffled(size: int, rng: random.Random | None = None) -> Board:
        """Uniformly shuffle the tiles, retrying until the result is solvable."""
        rng = rng or random.Random()
        tiles = list(range(1, size * size)) + [0]
        while True:
            rng.shuffle(tiles)
            board = Board(size=size, tiles=tuple(tiles))
            if GameGenerator.is_solvable(board):
                return board

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        n = board.size
        flat = [v for v in board.tiles if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _legal_moves(board: Board) -> list[Direction]:
        br, bc = board.blank_pos
        moves: list[Direction] = []
        for direction in Direction:
            dr, dc = direction.delta
            if 0 <= br + dr < board.size and 0 <= bc + dc < board.size:
                moves.append(direction)
        return moves

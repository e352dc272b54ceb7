"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum


class InvalidBoardError(ValueError):
    """Raised when a tile arrangement is not a well-formed puzzle board."""


class IllegalMoveError(ValueError):
    """Raised when a move would push the blank off the grid."""


class Direction(StrEnum):
    """Direction the *blank* moves when swapping with a neighbouring tile."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def move_direction(index: int, blank_index: int, size: int) -> Direction | None:
    """Return the move that brings the blank onto the tile at *index*.

    ``None`` when the tile is not orthogonally adjacent to the blank.
    """
    br, bc = divmod(blank_index, size)
    tr, tc = divmod(index, size)
    for direction, (dr, dc) in _DELTAS.items():
        if (br + dr, bc + dc) == (tr, tc):
            return direction
    return None


@dataclass(frozen=True)
class Board:
    """Immutable sliding puzzle board.

    Tiles are stored as a flat row-major tuple of ints. 0 represents the
    blank space.
    """

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int | None]) -> Board:
        """Create a board from a flat row-major tile list.

        The blank may be given as ``0`` or ``None``.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, None, 8])
        """
        tiles = tuple(0 if v is None else v for v in flat)
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        if len(tiles) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        blanks = tiles.count(0)
        if blanks != 1:
            raise InvalidBoardError(f"Expected exactly one blank, got {blanks}.")
        if sorted(tiles) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be the labels 1..{size * size - 1} exactly once each."
            )
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | None]]) -> Board:
        return cls.from_flat(len(rows), [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def to_list(self) -> list[int | None]:
        """Flat tile list with the blank as ``None``."""
        return [None if v == 0 else v for v in self.tiles]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        if self.tiles[last] != 0:
            return False
        return all(self.tiles[i] == i + 1 for i in range(last))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- transformations ------------------------------------------------------

    def slide(self, direction: Direction) -> Board:
        """Return the board after moving the blank one cell in *direction*."""
        br, bc = self.blank_pos
        dr, dc = direction.delta
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            raise IllegalMoveError(
                f"Cannot move {direction.value}: blank at {(br, bc)} is on the edge."
            )
        blank = br * self.size + bc
        target = tr * self.size + tc
        tiles = list(self.tiles)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        return Board(size=self.size, tiles=tuple(tiles))

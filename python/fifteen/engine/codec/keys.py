"""Visited-set keys and the goal test.

Boards reaching the codec are flat tuples with the blank as ``0``; they are
produced by the engine itself, so nothing here validates its input.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence

# Board edge for which the packed integer key is used.
WIDE_KEY_SIZE = 4

BoardKey = Callable[[Sequence[int]], Hashable]


def encode_compact(board: Sequence[int]) -> str:
    """One character per cell, concatenated. Works for every board size."""
    return "".join(map(chr, board))


def encode_wide(board: Sequence[int]) -> int:
    """Pack a 4×4 board into one integer, 4 bits per cell, big-endian."""
    key = 0
    for i in range(16):
        key = (key << 4) | board[i]
    return key


def is_goal(board: Sequence[int]) -> bool:
    last = len(board) - 1
    if board[last] != 0:
        return False
    for i in range(last):
        if board[i] != i + 1:
            return False
    return True


def key_for_size(size: int) -> BoardKey:
    """Pick the dedup key representation for a board edge length."""
    if size == WIDE_KEY_SIZE:
        return encode_wide
    return encode_compact

from __future__ import annotations

from fifteen.engine.codec import (
    encode_compact,
    encode_wide,
    is_goal,
    key_for_size,
)


def test_compact_key_is_one_char_per_cell() -> None:
    assert encode_compact((1, 2, 3, 0)) == "\x01\x02\x03\x00"
    assert len(encode_compact(tuple(range(25)))) == 25


def test_compact_key_distinguishes_boards() -> None:
    a = (1, 2, 3, 4, 5, 6, 7, 8, 0)
    b = (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert encode_compact(a) != encode_compact(b)
    assert encode_compact(a) == encode_compact(list(a))


def test_wide_key_packs_nibbles_big_endian() -> None:
    goal = tuple(range(1, 16)) + (0,)
    assert encode_wide(goal) == 0x123456789ABCDEF0
    assert encode_wide((0,) + tuple(range(1, 16))) == 0x0123456789ABCDEF


def test_key_for_size() -> None:
    assert key_for_size(4) is encode_wide
    assert key_for_size(3) is encode_compact
    assert key_for_size(5) is encode_compact


def test_is_goal() -> None:
    assert is_goal((1, 2, 3, 0))
    assert is_goal(tuple(range(1, 16)) + (0,))
    assert not is_goal((1, 2, 0, 3))
    assert not is_goal((2, 1, 3, 0))

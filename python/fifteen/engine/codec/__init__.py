from fifteen.engine.codec.keys import (
    WIDE_KEY_SIZE,
    BoardKey,
    encode_compact,
    encode_wide,
    is_goal,
    key_for_size,
)

__all__ = [
    "WIDE_KEY_SIZE",
    "BoardKey",
    "encode_compact",
    "encode_wide",
    "is_goal",
    "key_for_size",
]

from fifteen.models.board import (
    Board,
    Direction,
    IllegalMoveError,
    InvalidBoardError,
    move_direction,
)
from fifteen.models.results import BenchmarkRow, HeuristicSolveResult

__all__ = [
    "BenchmarkRow",
    "Board",
    "Direction",
    "HeuristicSolveResult",
    "IllegalMoveError",
    "InvalidBoardError",
    "move_direction",
]

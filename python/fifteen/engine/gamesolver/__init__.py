from fifteen.engine.gamesolver.heap import MinHeap
from fifteen.engine.gamesolver.search import (
    DEFAULT_MAX_STEPS,
    BestCostMap,
    ExpandedKeys,
    PuzzleState,
    neighbors,
    solve_sliding_puzzle,
    solve_with_heuristic,
)
from fifteen.engine.gamesolver.solver import SOLVER_MAX_STEPS, Solver

__all__ = [
    "DEFAULT_MAX_STEPS",
    "SOLVER_MAX_STEPS",
    "BestCostMap",
    "ExpandedKeys",
    "MinHeap",
    "PuzzleState",
    "Solver",
    "neighbors",
    "solve_sliding_puzzle",
    "solve_with_heuristic",
]

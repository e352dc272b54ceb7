from fifteen.engine.heuristics.heuristics import (
    ADVANCED,
    ALL_HEURISTICS,
    HEURISTIC_NAMES,
    LINEAR_CONFLICT,
    MANHATTAN,
    HeuristicDescriptor,
    HeuristicFn,
    advanced_heuristic,
    corner_tiles,
    get_heuristic,
    linear_conflict,
    manhattan_distance,
    manhattan_linear_conflict,
)

__all__ = [
    "ADVANCED",
    "ALL_HEURISTICS",
    "HEURISTIC_NAMES",
    "LINEAR_CONFLICT",
    "MANHATTAN",
    "HeuristicDescriptor",
    "HeuristicFn",
    "advanced_heuristic",
    "corner_tiles",
    "get_heuristic",
    "linear_conflict",
    "manhattan_distance",
    "manhattan_linear_conflict",
]

from fifteen.engine.benchmark.runner import UNSOLVED_MOVES, run_benchmarks

__all__ = ["UNSOLVED_MOVES", "run_benchmarks"]

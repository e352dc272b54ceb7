from fifteen.engine.gameplay.game import GamePlay, solution_boards

__all__ = ["GamePlay", "solution_boards"]

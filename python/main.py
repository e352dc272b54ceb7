#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve 1 2 3 4 5 6 _ 7 8         # solve a 3×3 board
    python main.py solve -r -s 4 --shuffles 30 --show
    python main.py bench -r -s 3 --seed 42         # compare heuristics
    python main.py -v bench 1 2 3 4 5 6 7 0 8      # with debug logging
"""

import logging
import math
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fifteen.engine.benchmark import run_benchmarks  # noqa: E402
from fifteen.engine.gamegenerator import GameGenerator  # noqa: E402
from fifteen.engine.gamesolver import DEFAULT_MAX_STEPS, SOLVER_MAX_STEPS, Solver  # noqa: E402
from fifteen.frontend.cli.app import print_benchmark, print_solution  # noqa: E402
from fifteen.models.board import Board, InvalidBoardError  # noqa: E402

MAX_STEPS_ENVVAR = "FIFTEEN_MAX_STEPS"
DEFAULT_RANDOM_SIZE = 3
_BLANK_TOKENS = {"0", "_", "."}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _parse_tiles(tokens: list[str]) -> list[Optional[int]]:
    tiles: list[Optional[int]] = []
    for tok in tokens:
        if tok in _BLANK_TOKENS:
            tiles.append(None)
            continue
        try:
            tiles.append(int(tok))
        except ValueError:
            raise typer.BadParameter(f"Not a tile label: {tok!r}") from None
    return tiles


def _load_board(
    tiles: Optional[list[str]],
    size: Optional[int],
    random_board: bool,
    shuffles: Optional[int],
    seed: Optional[int],
) -> Board:
    if random_board:
        rng = random.Random(seed)
        size = size or DEFAULT_RANDOM_SIZE
        if shuffles is not None:
            return GameGenerator.scramble(GameGenerator.solved(size), shuffles, rng)
        return GameGenerator.shuffled(size, rng)

    if not tiles:
        raise typer.BadParameter("Give the board tiles, or pass --random.")
    flat = _parse_tiles(tiles)
    try:
        return Board.from_flat(size or math.isqrt(len(flat)), flat)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc)) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding puzzle solver.")

_TILES = typer.Argument(
    None, help="Row-major tiles; 0, _ or . marks the blank.", show_default=False,
)
_SIZE = typer.Option(
    None, "-s", "--size", min=2, max=8,
    help="Grid size (2-8). Inferred from the tile count when omitted.",
)
_RANDOM = typer.Option(False, "-r", "--random", help="Solve a random solvable board.")
_SHUFFLES = typer.Option(
    None, "--shuffles", min=0,
    help="With --random, scramble the goal by this many moves instead of shuffling.",
)
_SEED = typer.Option(None, "--seed", help="Random seed for --random.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search details."),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(verbose)


@app.command()
def solve(
    tiles: Optional[list[str]] = _TILES,
    size: Optional[int] = _SIZE,
    random_board: bool = _RANDOM,
    shuffles: Optional[int] = _SHUFFLES,
    seed: Optional[int] = _SEED,
    max_steps: int = typer.Option(
        SOLVER_MAX_STEPS, "--max-steps", min=1, envvar=MAX_STEPS_ENVVAR,
        help="Search budget in expanded states.",
    ),
    show: bool = typer.Option(False, "--show", help="Print the board after every move."),
) -> None:
    """Find a move sequence that sorts the board."""
    board = _load_board(tiles, size, random_board, shuffles, seed)
    solvable = Solver.is_solvable(board)
    moves = Solver.solve(board, max_steps)
    print_solution(board, moves, max_steps, show=show, solvable=solvable)
    if moves is None:
        raise typer.Exit(code=1)


@app.command()
def bench(
    tiles: Optional[list[str]] = _TILES,
    size: Optional[int] = _SIZE,
    random_board: bool = _RANDOM,
    shuffles: Optional[int] = _SHUFFLES,
    seed: Optional[int] = _SEED,
    max_steps: int = typer.Option(
        DEFAULT_MAX_STEPS, "--max-steps", min=1, envvar=MAX_STEPS_ENVVAR,
        help="Search budget per heuristic.",
    ),
) -> None:
    """Solve one board with every heuristic and compare them."""
    board = _load_board(tiles, size, random_board, shuffles, seed)
    rows = run_benchmarks(board, board.size, max_steps)
    print_benchmark(board, rows)


if __name__ == "__main__":
    app()

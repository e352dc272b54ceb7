"""Rich terminal output for the solver CLI: boards, solutions and benchmarks."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.engine.gameplay import solution_boards
from fifteen.models.board import Board, Direction
from fifteen.models.results import BenchmarkRow

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str) -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(0, 2),
        expand=False,
    )


# -- solve --------------------------------------------------------------------


def print_solution(
    board: Board,
    moves: list[Direction] | None,
    max_steps: int,
    show: bool = False,
    solvable: bool = True,
) -> None:
    size = board.size
    console.print(_board_panel(board, f"Start  {size}×{size}"))

    if not solvable:
        console.print("[red]Board is unsolvable.[/red]")
        return
    if moves is None:
        console.print(
            f"[red]No solution found within {max_steps:,} steps.[/red]"
        )
        return
    if not moves:
        console.print("[green]Already solved![/green]")
        return

    if show:
        boards = solution_boards(board, moves)
        for i, (direction, step_board) in enumerate(zip(moves, boards[1:]), 1):
            console.print(
                _board_panel(step_board, f"Move {i}/{len(moves)}  ({direction.value})")
            )

    path = Text(" ".join(m.value for m in moves), style="bold")
    console.print(Group(Text("Moves:", style="cyan"), path))
    console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")


# -- benchmark ----------------------------------------------------------------


def render_benchmark(rows: list[BenchmarkRow]) -> Table:
    table = Table(
        title="Heuristic Benchmark",
        box=rich.box.ROUNDED,
        header_style="bold cyan",
    )
    table.add_column("Heuristic", style="bold")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Moves", justify="right")
    table.add_column("Steps", justify="right")
    table.add_column("Solved", justify="center")

    for row in rows:
        table.add_row(
            row.name,
            f"{row.time:.1f}",
            str(row.moves),
            f"{row.steps:,}",
            "[green]✓[/green]" if row.solved else "[red]✗[/red]",
        )
    return table


def print_benchmark(board: Board, rows: list[BenchmarkRow]) -> None:
    size = board.size
    console.print(_board_panel(board, f"Benchmark  {size}×{size}"))
    console.print(render_benchmark(rows))

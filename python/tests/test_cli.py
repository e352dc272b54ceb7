"""Command-line interface, driven through Typer's test runner."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_solve_board() -> None:
    result = runner.invoke(app, ["solve", "1", "2", "3", "4", "5", "6", "_", "7", "8"])
    assert result.exit_code == 0, result.output
    assert "right right" in result.output
    assert "Solved in 2 moves!" in result.output


def test_solve_show_prints_each_move() -> None:
    result = runner.invoke(
        app, ["solve", "--show", "1", "2", "3", "4", "5", "6", "0", "7", "8"]
    )
    assert result.exit_code == 0, result.output
    assert "Move 1/2" in result.output
    assert "Move 2/2" in result.output


def test_solve_already_solved() -> None:
    result = runner.invoke(app, ["solve", "1", "2", "3", "_"])
    assert result.exit_code == 0
    assert "Already solved" in result.output


def test_solve_unsolvable_exits_1() -> None:
    result = runner.invoke(app, ["solve", "2", "1", "3", "_"])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_solve_budget_exhausted_exits_1() -> None:
    result = runner.invoke(
        app,
        ["solve", "--max-steps", "1", "1", "2", "3", "_", "5", "6", "4", "7", "8"],
    )
    assert result.exit_code == 1
    assert "No solution found" in result.output


def test_max_steps_from_environment() -> None:
    result = runner.invoke(
        app,
        ["solve", "1", "2", "3", "_", "5", "6", "4", "7", "8"],
        env={"FIFTEEN_MAX_STEPS": "1"},
    )
    assert result.exit_code == 1


def test_solve_random_scramble() -> None:
    result = runner.invoke(
        app, ["solve", "-r", "-s", "3", "--shuffles", "12", "--seed", "4"]
    )
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output or "Already solved" in result.output


def test_malformed_board_is_usage_error() -> None:
    assert runner.invoke(app, ["solve", "1", "2", "2", "_"]).exit_code == 2
    assert runner.invoke(app, ["solve", "1", "2", "x", "_"]).exit_code == 2
    assert runner.invoke(app, ["solve"]).exit_code == 2


def test_bench_table() -> None:
    result = runner.invoke(app, ["bench", "1", "2", "3", "4", "5", "6", "7", "_", "8"])
    assert result.exit_code == 0, result.output
    assert "Heuristic Benchmark" in result.output
    assert "Manhattan" in result.output


def test_verbose_flag() -> None:
    result = runner.invoke(app, ["-v", "bench", "-r", "-s", "2", "--seed", "1"])
    assert result.exit_code == 0, result.output

#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    slidesolver solve "1 2 3/4 5 6/7 0 8"          # A* by default
    slidesolver solve "8 1 3 4 0 2 7 6 5" -a bfs --play
    slidesolver compare "1 2 3/4 0 6/7 5 8"
    slidesolver scramble -s 4 -m 30
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slidesolver.config import DEFAULT_ALGORITHM, DEFAULT_PLAYBACK_DELAY, SolverSettings
from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.engine.gamesolver import DEFAULT_MAX_DEPTH, Algorithm, Solver
from slidesolver.frontend.cli.rich import app as frontend
from slidesolver.models.board import Board

_LOGGER = logging.getLogger(__name__)


# -- helpers ------------------------------------------------------------------


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr; DEBUG when *verbose*."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_board(text: str, param: str) -> Board:
    try:
        return Board.parse(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=param) from exc


def _resolve_goal(board: Board, goal_text: Optional[str]) -> Board:
    if goal_text is None:
        return GameGenerator.solved(board.size)
    goal = _parse_board(goal_text, "--goal")
    if goal.size != board.size:
        raise typer.BadParameter(
            f"goal is {goal.size}×{goal.size} but board is {board.size}×{board.size}",
            param_hint="--goal",
        )
    return goal


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding puzzle solver.")

_BOARD_HELP = 'Board as rows ("1 2 3/4 5 6/7 0 8") or N² flat values; 0 is the blank.'


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Sliding puzzle solver."""
    setup_logging(verbose)


@app.command()
def solve(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    algorithm: Algorithm = typer.Option(
        DEFAULT_ALGORITHM, "-a", "--algorithm",
        help="Search strategy.",
    ),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "-d", "--max-depth",
        min=0,
        help="Depth bound for dfs / iddfs.",
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal board. Defaults to the solved layout.",
    ),
    play: bool = typer.Option(
        False, "--play",
        help="Animate the solution on the board.",
    ),
    delay: float = typer.Option(
        DEFAULT_PLAYBACK_DELAY, "--delay",
        min=0.0,
        help="Seconds between animated moves.",
    ),
) -> None:
    """Solve BOARD and print the blank moves."""
    start = _parse_board(board, "BOARD")
    target = _resolve_goal(start, goal)
    settings = SolverSettings(algorithm=algorithm, max_depth=max_depth, play=play, delay=delay)
    _LOGGER.debug("Solving %s with %s", start, settings)

    moves = frontend.run(start, target, settings)
    if moves is None:
        raise typer.Exit(code=1)


@app.command()
def compare(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "-d", "--max-depth",
        min=0,
        help="Depth bound for dfs / iddfs.",
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal board. Defaults to the solved layout.",
    ),
) -> None:
    """Run every search strategy on BOARD and compare path lengths."""
    start = _parse_board(board, "BOARD")
    frontend.compare(start, _resolve_goal(start, goal), max_depth)


@app.command()
def check(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal board. Defaults to the solved layout.",
    ),
) -> None:
    """Report whether BOARD can reach the goal."""
    start = _parse_board(board, "BOARD")
    if Solver.is_solvable(start, _resolve_goal(start, goal)):
        typer.echo("solvable")
        return
    typer.echo("unsolvable")
    raise typer.Exit(code=1)


@app.command()
def scramble(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves",
        min=1,
        help="Random blank moves from the solved board. Defaults to size² × 100.",
    ),
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.generate(size, moves)
    typer.echo(" ".join(str(v) for v in board.flat()))


if __name__ == "__main__":
    app()

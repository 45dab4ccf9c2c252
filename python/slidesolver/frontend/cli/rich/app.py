"""Rich terminal frontend: board tables, solver runs and move playback.

The frontend owns the live board.  It hands the solver a snapshot and then
replays the returned directions through ``GamePlay`` one swap at a time.
"""

from __future__ import annotations

import logging
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidesolver.config import SolverSettings
from slidesolver.engine.gameplay import GamePlay
from slidesolver.engine.gamesolver import Algorithm, Solver
from slidesolver.models.board import Board, Direction

_LOGGER = logging.getLogger(__name__)

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already sitting on their goal cell are highlighted.
    """
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

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if goal is None:
                correct = board.is_tile_correct(r, c)
            else:
                correct = goal.get_tile(r, c) == val
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif correct:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, goal: Board | None = None) -> Panel:
    return Panel(
        Align.center(render_board(board, goal)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )


def _format_moves(moves: list[Direction]) -> Text:
    text = Text()
    for i, direction in enumerate(moves):
        if i:
            text.append(", ", style="dim")
        text.append(direction.value, style="bold")
    return text


# -- playback -----------------------------------------------------------------


def play_solution(board: Board, moves: list[Direction], delay: float) -> GamePlay:
    """Replay *moves* on a copy of *board*, redrawing after every swap."""
    game = GamePlay.from_board(board.copy())
    size = board.size
    for i, direction in enumerate(moves):
        if not game.move(direction):
            _LOGGER.error("Move %d (%s) left the board; playback stopped", i, direction.value)
            break
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        console.print()
        console.print(Align.center(_board_panel(game.board, f"Playback  {size}×{size}")))
        console.print(Align.center(progress))
        sys.stdout.flush()
        if delay:
            time.sleep(delay)
    return game


# -- commands -----------------------------------------------------------------


def run(board: Board, goal: Board, settings: SolverSettings) -> list[Direction] | None:
    """Solve *board* with the configured strategy and report the result."""
    size = board.size
    console.print(_board_panel(board, f"Start  {size}×{size}", goal))

    with console.status(f"Searching with {settings.algorithm.value}…"):
        moves = Solver.solve(board, settings.algorithm, goal, settings.max_depth)

    if moves is None:
        console.print("[red]No solution found.[/red]")
        return None
    if not moves:
        console.print("[green]Already solved![/green]")
        return moves

    if settings.play:
        game = play_solution(board, moves, settings.delay)
        if not game.matches(goal):
            _LOGGER.warning("Playback ended on a board that differs from the goal")

    console.print(_format_moves(moves))
    console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")
    return moves


def compare(board: Board, goal: Board, max_depth: int) -> dict[Algorithm, list[Direction] | None]:
    """Run every strategy on the same board and tabulate the results."""
    results: dict[Algorithm, list[Direction] | None] = {}
    table = Table(title=f"{board.size}×{board.size}  {board}", box=rich.box.SIMPLE_HEAVY)
    table.add_column("Algorithm", style="bold cyan")
    table.add_column("Moves", justify="right")
    table.add_column("Time", justify="right", style="dim")

    for algorithm in Algorithm:
        t0 = time.perf_counter()
        moves = Solver.solve(board, algorithm, goal, max_depth)
        elapsed = time.perf_counter() - t0
        results[algorithm] = moves
        length = "[red]none[/red]" if moves is None else str(len(moves))
        table.add_row(algorithm.value, length, f"{elapsed:.3f}s")

    console.print(table)
    return results

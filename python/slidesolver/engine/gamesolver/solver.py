"""Sliding puzzle solver."""

from __future__ import annotations

from bisect import bisect_left, insort
from enum import StrEnum

from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.engine.gamesolver.astar import solve_astar
from slidesolver.engine.gamesolver.bfs import solve_bfs
from slidesolver.engine.gamesolver.dfs import DEFAULT_MAX_DEPTH, solve_dfs, solve_iddfs
from slidesolver.models.board import Board, Direction


class Algorithm(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    iddfs = "iddfs"
    astar = "astar"


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        algorithm: Algorithm = Algorithm.astar,
        goal: Board | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[Direction] | None:
        """Return the blank moves that turn *board* into *goal*.

        *goal* defaults to the solved board of the same size.  Returns
        ``[]`` when the board already matches and ``None`` when the chosen
        strategy finds no path.  *max_depth* only applies to the DFS
        strategies.
        """
        if goal is None:
            goal = GameGenerator.solved(board.size)

        start, blank = board.tiles, board.blank_pos
        if algorithm == Algorithm.bfs:
            return solve_bfs(start, blank, goal.tiles, board.size)
        if algorithm == Algorithm.dfs:
            return solve_dfs(start, blank, goal.tiles, max_depth, board.size)
        if algorithm == Algorithm.iddfs:
            return solve_iddfs(start, blank, goal.tiles, max_depth, board.size)
        return solve_astar(start, blank, goal.tiles, board.size)

    @staticmethod
    def hint(board: Board, goal: Board | None = None) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        if goal is None and board.is_solved():
            return None
        if not Solver.is_solvable(board, goal):
            return None
        moves = Solver.solve(board, Algorithm.astar, goal)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board, goal: Board | None = None) -> bool:
        """Return True if *board* can reach *goal* (canonical goal by default).

        Two boards of the same size are mutually reachable iff they share
        the same permutation parity invariant.
        """
        if goal is None:
            goal = GameGenerator.solved(board.size)
        return _parity(board) == _parity(goal)


def _parity(board: Board) -> int:
    """Inversion parity, plus the blank's row from the bottom on even sizes."""
    n = board.size
    inv = 0
    seen: list[int] = []
    for v in board.flat():
        if v == 0:
            continue
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    if n % 2 == 1:
        return inv % 2
    blank_from_bottom = n - 1 - board.blank_pos.row
    return (inv + blank_from_bottom) % 2

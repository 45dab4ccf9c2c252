"""Sliding puzzle solving engine: BFS, depth-limited DFS and A* over N×N boards."""

from slidesolver.engine.gamesolver import (
    Algorithm,
    Solver,
    manhattan_distance,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_iddfs,
)
from slidesolver.models.board import Board, Direction, Position

__all__ = [
    "Algorithm",
    "Board",
    "Direction",
    "Position",
    "Solver",
    "manhattan_distance",
    "solve_astar",
    "solve_bfs",
    "solve_dfs",
    "solve_iddfs",
]

from slidesolver.engine.gamesolver.astar import solve_astar
from slidesolver.engine.gamesolver.bfs import solve_bfs
from slidesolver.engine.gamesolver.dfs import DEFAULT_MAX_DEPTH, solve_dfs, solve_iddfs
from slidesolver.engine.gamesolver.heuristic import ManhattanHeuristic, manhattan_distance
from slidesolver.engine.gamesolver.solver import Algorithm, Solver
from slidesolver.engine.gamesolver.state import SearchState

__all__ = [
    "Algorithm",
    "DEFAULT_MAX_DEPTH",
    "ManhattanHeuristic",
    "SearchState",
    "Solver",
    "manhattan_distance",
    "solve_astar",
    "solve_bfs",
    "solve_dfs",
    "solve_iddfs",
]

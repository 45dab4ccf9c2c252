"""Solver test suite: every strategy against the walk fixtures.

Boards come from ``<project_root>/fixtures/3x3.json``: each entry is a blank
walk from the solved board, replayed through the game engine to build the
start position.  Every returned move list is replayed the same way to check
that it really reaches the goal.  Per-test time limits come from
``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.engine.gameplay import GamePlay
from slidesolver.engine.gamesolver import (
    Algorithm,
    Solver,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_iddfs,
)
from slidesolver.models.board import Board, Direction, Position

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

GOAL_3x3 = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


# Loaded once at import time; each entry becomes one parametrised case.
_WALKS_3x3 = _load("3x3.json")
_SHORT_WALKS_3x3 = [w for w in _WALKS_3x3 if len(w["scramble"]) <= 8]


# -- helpers ------------------------------------------------------------------


def _board_from_walk(data: dict) -> Board:
    """Rebuild the scrambled board by replaying its walk on the solved board."""
    board = GameGenerator.solved(data["size"])
    game = GamePlay.from_board(board)
    walk = [Direction(d) for d in data["scramble"]]
    assert game.play(walk) == len(walk), f"Fixture walk leaves the board ({data['id']})"
    return board


def _assert_reaches(board: Board, goal: list[list[int]], moves: list[Direction] | None) -> None:
    """Replay *moves* on a copy of *board* and check it lands on *goal*."""
    assert moves is not None, "solver returned no solution"
    assert all(isinstance(m, Direction) for m in moves), "Every element must be a Direction"

    game = GamePlay.from_board(board.copy())
    for i, direction in enumerate(moves):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid at blank {game.board.blank_pos}"

    assert game.board.tiles == goal, f"Board not at goal after {len(moves)} moves"


def _swap_tiles(rows: list[list[int]], a: tuple[int, int], b: tuple[int, int]) -> list[list[int]]:
    """Copy of *rows* with the tiles at (row, col) *a* and *b* exchanged."""
    out = [row[:] for row in rows]
    (ra, ca), (rb, cb) = a, b
    out[ra][ca], out[rb][cb] = out[rb][cb], out[ra][ca]
    return out


# -- optimal strategies -------------------------------------------------------


@pytest.mark.parametrize("board_data", _WALKS_3x3, ids=_ids)
def test_bfs_and_astar_agree_on_optimal_length(board_data: dict) -> None:
    board = _board_from_walk(board_data)

    bfs = solve_bfs(board.tiles, board.blank_pos, GOAL_3x3, 3)
    astar = solve_astar(board.tiles, board.blank_pos, GOAL_3x3, 3)

    _assert_reaches(board, GOAL_3x3, bfs)
    _assert_reaches(board, GOAL_3x3, astar)
    assert len(astar) == len(bfs)
    assert len(bfs) <= len(board_data["scramble"])


@pytest.mark.parametrize("board_data", _SHORT_WALKS_3x3, ids=_ids)
def test_iddfs_finds_shortest_path(board_data: dict) -> None:
    board = _board_from_walk(board_data)

    bfs = solve_bfs(board.tiles, board.blank_pos, GOAL_3x3)
    iddfs = solve_iddfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=len(board_data["scramble"]))

    _assert_reaches(board, GOAL_3x3, iddfs)
    assert len(iddfs) == len(bfs)


@pytest.mark.parametrize("board_data", _WALKS_3x3, ids=_ids)
def test_dfs_solution_is_valid_when_found(board_data: dict) -> None:
    board = _board_from_walk(board_data)

    moves = solve_dfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=25)

    # Shared visited set: a solution is not guaranteed, only its validity.
    if moves is not None:
        _assert_reaches(board, GOAL_3x3, moves)
        assert len(moves) <= 25


def test_one_move_from_goal() -> None:
    start = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    blank = Position(col=1, row=2)

    assert solve_bfs(start, blank, GOAL_3x3, 3) == [Direction.RIGHT]
    assert solve_astar(start, blank, GOAL_3x3, 3) == [Direction.RIGHT]


def test_blank_move_directions() -> None:
    goal = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]

    assert solve_astar([[1, 2, 3], [4, 5, 0], [7, 8, 6]], (2, 1), goal) == [Direction.DOWN]
    assert solve_astar([[1, 2, 3], [4, 5, 6], [7, 0, 8]], (1, 2), goal) == [Direction.RIGHT]


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_start_equals_goal_returns_empty(algorithm: Algorithm) -> None:
    board = GameGenerator.solved(3)

    moves = Solver.solve(board, algorithm)

    assert moves == []


def test_start_equals_goal_with_zero_depth() -> None:
    assert solve_dfs(GOAL_3x3, (2, 2), GOAL_3x3, max_depth=0) == []
    assert solve_iddfs(GOAL_3x3, (2, 2), GOAL_3x3, max_depth=0) == []


# -- unsolvable boards --------------------------------------------------------


def test_unsolvable_2x2_reports_no_solution() -> None:
    goal = [[1, 2], [3, 0]]
    start = _swap_tiles(goal, (0, 0), (0, 1))

    assert solve_bfs(start, (1, 1), goal) is None
    assert solve_dfs(start, (1, 1), goal, max_depth=20) is None
    assert solve_iddfs(start, (1, 1), goal, max_depth=12) is None
    assert solve_astar(start, (1, 1), goal) is None


def test_unsolvable_3x3_reports_no_solution() -> None:
    start = _swap_tiles(GOAL_3x3, (2, 0), (2, 1))

    assert solve_bfs(start, (2, 2), GOAL_3x3) is None
    assert solve_astar(start, (2, 2), GOAL_3x3) is None
    assert solve_dfs(start, (2, 2), GOAL_3x3, max_depth=20) is None


# -- depth limits -------------------------------------------------------------


def test_dfs_below_shortest_length_returns_none() -> None:
    board = GameGenerator.solved(3)
    GamePlay.from_board(board).play([Direction.LEFT, Direction.UP])

    assert solve_bfs(board.tiles, board.blank_pos, GOAL_3x3) is not None
    assert solve_dfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=1) is None
    assert solve_iddfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=1) is None


def test_dfs_checks_goal_at_depth_bound() -> None:
    start = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]

    assert solve_dfs(start, (1, 2), GOAL_3x3, max_depth=1) == [Direction.RIGHT]
    assert solve_dfs(start, (1, 2), GOAL_3x3, max_depth=0) is None


def test_dfs_within_depth_finds_two_move_solution() -> None:
    board = GameGenerator.solved(3)
    GamePlay.from_board(board).play([Direction.LEFT, Direction.UP])

    moves = solve_dfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=2)

    _assert_reaches(board, GOAL_3x3, moves)
    assert moves == [Direction.DOWN, Direction.RIGHT]


def test_iddfs_within_depth_finds_two_move_solution() -> None:
    board = GameGenerator.solved(3)
    GamePlay.from_board(board).play([Direction.LEFT, Direction.UP])

    moves = solve_iddfs(board.tiles, board.blank_pos, GOAL_3x3, max_depth=2)

    assert moves == [Direction.DOWN, Direction.RIGHT]


# -- other sizes and goals ----------------------------------------------------


def test_astar_solves_4x4() -> None:
    board = GameGenerator.solved(4)
    walk = [
        Direction.UP, Direction.LEFT, Direction.LEFT, Direction.UP,
        Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.LEFT,
        Direction.UP, Direction.RIGHT,
    ]
    assert GamePlay.from_board(board).play(walk) == len(walk)
    goal = GameGenerator.solved(4)

    moves = solve_astar(board.tiles, board.blank_pos, goal.tiles, 4)

    _assert_reaches(board, goal.tiles, moves)
    assert len(moves) <= len(walk)


def test_non_canonical_goal_is_solved_optimally() -> None:
    goal = Board.from_rows([[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    board = goal.copy()
    walk = [Direction.RIGHT, Direction.DOWN, Direction.RIGHT, Direction.DOWN, Direction.LEFT]
    assert GamePlay.from_board(board).play(walk) == len(walk)

    bfs = solve_bfs(board.tiles, board.blank_pos, goal.tiles)
    astar = solve_astar(board.tiles, board.blank_pos, goal.tiles)

    _assert_reaches(board, goal.tiles, astar)
    assert len(astar) == len(bfs)


def test_inputs_are_not_mutated() -> None:
    start = [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    goal = [row[:] for row in GOAL_3x3]
    snapshot = [row[:] for row in start]

    solve_astar(start, (1, 1), goal)
    solve_bfs(start, (1, 1), goal)

    assert start == snapshot
    assert goal == GOAL_3x3


# -- Solver facade ------------------------------------------------------------


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_facade_dispatches_to_strategy(algorithm: Algorithm) -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])

    moves = Solver.solve(board, algorithm, max_depth=2)

    _assert_reaches(board, GOAL_3x3, moves)
    assert len(moves) == 2


def test_hint_returns_first_optimal_move() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])

    assert Solver.hint(board) is Direction.RIGHT
    assert Solver.hint(GameGenerator.solved(3)) is None


def test_hint_on_unsolvable_board_is_none() -> None:
    board = Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0])

    assert Solver.hint(board) is None


@pytest.mark.parametrize(
    ("flat", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], True),
        ([1, 2, 3, 4, 5, 6, 7, 0, 8], True),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], False),
        ([8, 1, 3, 4, 0, 2, 7, 6, 5], True),
        (list(range(1, 16)) + [0], True),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0], False),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12], True),
    ],
)
def test_is_solvable(flat: list[int], expected: bool) -> None:
    size = 4 if len(flat) == 16 else 3
    assert Solver.is_solvable(Board.from_flat(size, flat)) is expected


def test_is_solvable_against_custom_goal() -> None:
    goal = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])

    assert Solver.is_solvable(Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8]), goal)
    assert not Solver.is_solvable(Board.from_flat(3, [0, 2, 1, 3, 4, 5, 6, 7, 8]), goal)

from __future__ import annotations

import pytest

from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.engine.gamesolver.heuristic import ManhattanHeuristic, manhattan_distance
from slidesolver.engine.gamesolver.state import SearchState


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_zero_on_canonical_goal(size: int) -> None:
    goal = GameGenerator.solved(size)

    assert manhattan_distance(goal.tiles, size) == 0


def test_zero_only_on_goal() -> None:
    goal = GameGenerator.solved(3)
    for _ in range(20):
        board = GameGenerator.generate(3, moves=15)
        assert manhattan_distance(board.tiles, 3) > 0 or board.tiles == goal.tiles


def test_known_values() -> None:
    assert manhattan_distance([[1, 2, 3], [4, 5, 6], [7, 0, 8]], 3) == 1
    # 8, 3 and 6 are three steps from home, the other five tiles one step.
    assert manhattan_distance([[8, 1, 2], [3, 4, 5], [6, 7, 0]], 3) == 14


def test_custom_goal_mapping() -> None:
    goal = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    assert manhattan_distance(goal, 3, goal) == 0
    assert manhattan_distance([[1, 0, 2], [3, 4, 5], [6, 7, 8]], 3, goal) == 1
    # Under the canonical layout the same goal is far from zero.
    assert manhattan_distance(goal, 3) > 0


def test_single_move_changes_estimate_by_one() -> None:
    goal = GameGenerator.solved(3)
    heuristic = ManhattanHeuristic(goal.flat(), 3)

    for _ in range(10):
        board = GameGenerator.generate(3, moves=25)
        tiles = board.flat()
        state = SearchState(tiles=tiles, n=3, blank=board.blank_pos, h=heuristic(tiles))
        for child in state.successors(heuristic):
            assert abs(child.h - state.h) == 1


def test_callable_matches_canonical_formula() -> None:
    goal = GameGenerator.solved(4)
    heuristic = ManhattanHeuristic(goal.flat(), 4)

    for _ in range(10):
        board = GameGenerator.generate(4, moves=40)
        assert heuristic(board.flat()) == manhattan_distance(board.tiles, 4)


def test_blank_position_does_not_count() -> None:
    state_tiles = (0, 1, 2, 3)
    heuristic = ManhattanHeuristic((1, 2, 3, 0), 2)

    # 1: (0,1)->(0,0) = 1, 2: (1,0)->(0,1) = 2, 3: (1,1)->(1,0) = 1
    assert heuristic(state_tiles) == 4

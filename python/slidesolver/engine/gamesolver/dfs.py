"""Depth-limited depth-first search.

``solve_dfs`` keeps one visited set for the whole search, shared by every
branch.  A board first reached through a deep branch is never revisited
through a shallower one, so the search can miss solutions that lie within
``max_depth`` and the path it returns is not necessarily the shortest.

``solve_iddfs`` is the complete alternative: iterative deepening with
cycle checks against the current path only.  It finds a shortest path of at
most ``max_depth`` moves whenever one exists, at the price of re-expanding
boards on every iteration.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from slidesolver.engine.gamesolver.heuristic import Tiles
from slidesolver.engine.gamesolver.state import Heuristic, SearchState, prepare
from slidesolver.models.board import Direction

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 20


def solve_dfs(
    start_board: Sequence[Sequence[int]],
    start_blank: Sequence[int],
    goal_board: Sequence[Sequence[int]],
    max_depth: int = DEFAULT_MAX_DEPTH,
    n: int | None = None,
) -> list[Direction] | None:
    """Stack-based DFS bounded by *max_depth* moves.

    States at the depth bound are still compared with the goal but their
    children are skipped.
    """
    problem = prepare(start_board, start_blank, goal_board, n)
    heuristic = problem.heuristic

    stack: list[SearchState] = [problem.start]
    visited: set[Tiles] = {problem.start.tiles}
    expanded = 0

    while stack:
        current = stack.pop()
        if current.tiles == problem.goal:
            _LOGGER.debug("DFS reached goal at depth %d after %d expansions", current.g, expanded)
            return list(current.moves)
        if current.g >= max_depth:
            continue
        expanded += 1
        for child in current.successors(heuristic):
            if child.tiles in visited:
                continue
            visited.add(child.tiles)
            stack.append(child)

    _LOGGER.debug("DFS found no goal within depth %d (%d states seen)", max_depth, len(visited))
    return None


def solve_iddfs(
    start_board: Sequence[Sequence[int]],
    start_blank: Sequence[int],
    goal_board: Sequence[Sequence[int]],
    max_depth: int = DEFAULT_MAX_DEPTH,
    n: int | None = None,
) -> list[Direction] | None:
    """Iterative-deepening DFS with path-local visited tracking."""
    problem = prepare(start_board, start_blank, goal_board, n)

    for bound in range(max_depth + 1):
        found = _bounded(problem.start, problem.goal, problem.heuristic, bound)
        if found is not None:
            _LOGGER.debug("IDDFS reached goal at depth %d", found.g)
            return list(found.moves)

    _LOGGER.debug("IDDFS found no goal within depth %d", max_depth)
    return None


def _bounded(
    start: SearchState, goal: Tiles, heuristic: Heuristic, bound: int
) -> SearchState | None:
    if start.tiles == goal:
        return start

    # Each frame holds a state and the iterator over its remaining children.
    stack: list[tuple[SearchState, Iterator[SearchState]]] = [
        (start, start.successors(heuristic))
    ]
    on_path: set[Tiles] = {start.tiles}

    while stack:
        state, children = stack[-1]
        child = next(children, None)
        if child is None:
            on_path.discard(state.tiles)
            stack.pop()
            continue
        if child.tiles in on_path:
            continue
        if child.tiles == goal:
            return child
        if child.g < bound:
            on_path.add(child.tiles)
            stack.append((child, child.successors(heuristic)))

    return None

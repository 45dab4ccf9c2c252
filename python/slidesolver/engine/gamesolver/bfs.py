from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from slidesolver.engine.gamesolver.heuristic import Tiles
from slidesolver.engine.gamesolver.state import SearchState, prepare
from slidesolver.models.board import Direction

_LOGGER = logging.getLogger(__name__)


def solve_bfs(
    start_board: Sequence[Sequence[int]],
    start_blank: Sequence[int],
    goal_board: Sequence[Sequence[int]],
    n: int | None = None,
) -> list[Direction] | None:
    """Breadth-first search; returns a shortest move list or ``None``.

    The whole reachable half of the state space ((N²)!/2 boards) may be
    visited, so this is only practical for 3×3 and smaller.  No node or
    time cap is applied.
    """
    problem = prepare(start_board, start_blank, goal_board, n)
    heuristic = problem.heuristic

    queue: deque[SearchState] = deque([problem.start])
    visited: set[Tiles] = {problem.start.tiles}
    expanded = 0

    while queue:
        current = queue.popleft()
        if current.tiles == problem.goal:
            _LOGGER.debug("BFS reached goal at depth %d after %d expansions", current.g, expanded)
            return list(current.moves)
        expanded += 1
        for child in current.successors(heuristic):
            if child.tiles in visited:
                continue
            visited.add(child.tiles)
            queue.append(child)

    _LOGGER.debug("BFS exhausted %d states without reaching goal", len(visited))
    return None

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Sequence

from slidesolver.engine.gamesolver.heuristic import Tiles
from slidesolver.engine.gamesolver.state import SearchState, prepare
from slidesolver.models.board import Direction

_LOGGER = logging.getLogger(__name__)


def solve_astar(
    start_board: Sequence[Sequence[int]],
    start_blank: Sequence[int],
    goal_board: Sequence[Sequence[int]],
    n: int | None = None,
) -> list[Direction] | None:
    """A* over the board graph with the Manhattan heuristic.

    The open set is a binary heap ordered by ``(f, insertion order)``.
    ``open_best`` maps each queued board to the lowest ``f`` queued for it;
    a successor is only pushed when it beats that value.  Entries that were
    beaten after being pushed are dropped when they surface, because their
    board is already closed by then.
    """
    problem = prepare(start_board, start_blank, goal_board, n)
    heuristic = problem.heuristic
    start = problem.start

    counter = itertools.count()
    open_heap: list[tuple[int, int, SearchState]] = [(start.f, next(counter), start)]
    open_best: dict[Tiles, int] = {start.tiles: start.f}
    closed: set[Tiles] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current.tiles in closed:
            continue
        if current.tiles == problem.goal:
            _LOGGER.debug("A* reached goal at depth %d after %d expansions", current.g, len(closed))
            return list(current.moves)

        closed.add(current.tiles)
        open_best.pop(current.tiles, None)

        for child in current.successors(heuristic):
            if child.tiles in closed:
                continue
            best = open_best.get(child.tiles)
            if best is not None and best <= child.f:
                continue
            open_best[child.tiles] = child.f
            heapq.heappush(open_heap, (child.f, next(counter), child))

    _LOGGER.debug("A* exhausted open set after %d expansions", len(closed))
    return None

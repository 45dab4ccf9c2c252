"""Immutable search states and neighbour generation shared by all strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence

from slidesolver.engine.gamesolver.heuristic import ManhattanHeuristic, Tiles
from slidesolver.models.board import Direction, Position

Heuristic = Callable[[Tiles], int]


@dataclass(frozen=True)
class SearchState:
    """A board snapshot plus the path that reached it.

    Only ``tiles`` takes part in equality and hashing, so visited and closed
    sets deduplicate by board contents regardless of how a board was reached.
    """

    tiles: Tiles
    n: int = field(compare=False)
    blank: Position = field(compare=False)
    g: int = field(default=0, compare=False)
    h: int = field(default=0, compare=False)
    move: Direction | None = field(default=None, compare=False)
    parent: SearchState | None = field(default=None, compare=False, repr=False)

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def board(self) -> tuple[tuple[int, ...], ...]:
        n = self.n
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    @property
    def moves(self) -> tuple[Direction, ...]:
        """Directions taken from the start state, oldest first."""
        path: list[Direction] = []
        node: SearchState | None = self
        while node is not None and node.move is not None:
            path.append(node.move)
            node = node.parent
        path.reverse()
        return tuple(path)

    def successors(self, heuristic: Heuristic) -> Iterator[SearchState]:
        """Yield the states one blank move away, in Up, Down, Left, Right order."""
        n = self.n
        col, row = self.blank
        src = row * n + col
        for direction in Direction:
            dc, dr = direction.delta
            nc, nr = col + dc, row + dr
            if not (0 <= nc < n and 0 <= nr < n):
                continue
            dst = nr * n + nc
            lst = list(self.tiles)
            lst[src] = lst[dst]
            lst[dst] = 0
            tiles = tuple(lst)
            yield SearchState(
                tiles=tiles,
                n=n,
                blank=Position(nc, nr),
                g=self.g + 1,
                h=heuristic(tiles),
                move=direction,
                parent=self,
            )


@dataclass(frozen=True)
class SearchProblem:
    """Start state, goal tiles and heuristic prepared for one search call."""

    start: SearchState
    goal: Tiles
    heuristic: Heuristic


def prepare(
    start_board: Sequence[Sequence[int]],
    start_blank: Sequence[int],
    goal_board: Sequence[Sequence[int]],
    n: int | None = None,
) -> SearchProblem:
    """Snapshot the caller's boards into tuples and build the start state.

    Preconditions (not checked): both boards are N×N permutations of
    ``0..N²-1`` with exactly one blank, and *start_blank* is the ``(col, row)``
    of the blank in *start_board*.
    """
    if n is None:
        n = len(start_board)
    tiles = tuple(start_board[r][c] for r in range(n) for c in range(n))
    goal = tuple(goal_board[r][c] for r in range(n) for c in range(n))
    heuristic = ManhattanHeuristic(goal, n)
    col, row = start_blank
    start = SearchState(tiles=tiles, n=n, blank=Position(col, row), h=heuristic(tiles))
    return SearchProblem(start=start, goal=goal, heuristic=heuristic)

"""Manhattan-distance heuristic."""

from __future__ import annotations

from typing import Sequence

Tiles = tuple[int, ...]


def manhattan_distance(
    board: Sequence[Sequence[int]],
    n: int,
    goal: Sequence[Sequence[int]] | None = None,
) -> int:
    """Sum of grid distances from each tile to its goal cell (blank ignored).

    Without *goal* the canonical layout is assumed: values ``1..n²-1`` in
    row-major order with the blank last, so value ``v`` belongs at column
    ``(v - 1) % n`` and row ``(v - 1) // n``.
    """
    tiles = tuple(v for row in board for v in row)
    if goal is None:
        return _canonical(tiles, n)
    return ManhattanHeuristic(tuple(v for row in goal for v in row), n)(tiles)


def _canonical(tiles: Tiles, n: int) -> int:
    dist = 0
    for idx, value in enumerate(tiles):
        if value == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(value - 1, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist


class ManhattanHeuristic:
    """Manhattan distance to an arbitrary goal layout.

    Targets are taken from the goal board itself, so the estimate stays
    admissible when the goal is not the canonical row-major layout.
    """

    __slots__ = ("n", "_targets")

    def __init__(self, goal: Tiles, n: int) -> None:
        self.n = n
        targets: list[tuple[int, int]] = [(0, 0)] * len(goal)
        for idx, value in enumerate(goal):
            targets[value] = divmod(idx, n)
        self._targets = targets

    def __call__(self, tiles: Tiles) -> int:
        n = self.n
        targets = self._targets
        dist = 0
        for idx, value in enumerate(tiles):
            if value == 0:
                continue
            gr, gc = targets[value]
            dist += abs(idx // n - gr) + abs(idx % n - gc)
        return dist

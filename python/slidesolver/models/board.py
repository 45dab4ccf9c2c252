"""Board model for the sliding puzzle solver."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple, Sequence


class Direction(StrEnum):
    """Direction the *blank* moves.

    ``Direction.UP`` swaps the blank with the tile above it, which is the
    same as that tile sliding down into the hole.
    """

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def delta(self) -> tuple[int, int]:
        """``(dcol, drow)`` offset of the blank for this move."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Rows grow downward: UP decreases the row index.
_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    col: int
    row: int


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints indexed ``tiles[row][col]``.
    0 represents the blank space.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        _check_values(size, flat)
        tiles: list[list[int]] = []
        blank_pos = Position(0, 0)
        for r in range(size):
            row = list(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = Position(col=c, row=r)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {r} has {len(row)} values; a {size}-row board "
                    f"needs {size} per row."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse a board from text.

        Rows may be separated by ``/`` or ``;`` and values by spaces or
        commas, e.g. ``"1 2 3/4 5 6/7 0 8"``.  Without row separators the
        values are read as a flat list of N² tiles.
        """
        chunks = [c for c in re.split(r"[/;]", text) if c.strip()]
        try:
            rows = [[int(tok) for tok in re.split(r"[\s,]+", c.strip())] for c in chunks]
        except ValueError:
            raise ValueError(f"Board {text!r} contains a non-integer value.") from None

        if len(rows) == 1:
            flat = rows[0]
            size = math.isqrt(len(flat))
            if size * size != len(flat):
                raise ValueError(
                    f"{len(flat)} values do not form a square board."
                )
            return cls.from_flat(size, flat)
        return cls.from_rows(rows)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def is_solved(self) -> bool:
        """Check if all tiles are in their canonical goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    def __str__(self) -> str:
        return "/".join(" ".join(str(v) for v in row) for row in self.tiles)


def _check_values(size: int, flat: Sequence[int]) -> None:
    expected = set(range(size * size))
    seen = set(flat)
    if seen == expected and len(seen) == len(flat):
        return
    missing = sorted(expected - seen)
    if missing:
        raise ValueError(f"Board is missing value(s) {missing}.")
    extra = sorted(seen - expected)
    if extra:
        raise ValueError(
            f"Value(s) {extra} out of range 0..{size * size - 1}."
        )
    raise ValueError("Board contains duplicate values.")

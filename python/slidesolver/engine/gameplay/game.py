"""Applies solver moves to a live board one swap at a time."""

from __future__ import annotations

from typing import Iterable

from slidesolver.models.board import Board, Direction, Position


class GamePlay:
    """Owns a board and replays blank moves against it."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Wrap an existing board; moves are applied to it in place."""
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Swap the blank with its neighbour in *direction*.

        E.g. ``Direction.UP`` moves the blank up, so the tile **above** it
        slides down.  Returns True if the move was valid.
        """
        board = self.board
        col, row = board.blank_pos
        dc, dr = direction.delta
        tc, tr = col + dc, row + dr

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False

        self._swap(board, Position(tc, tr))
        self.moves += 1
        return True

    def play(self, directions: Iterable[Direction]) -> int:
        """Apply *directions* in order, stopping at the first invalid one.

        Returns the number of moves applied.
        """
        applied = 0
        for direction in directions:
            if not self.move(direction):
                break
            applied += 1
        return applied

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

    def matches(self, goal: Board) -> bool:
        return self.board.tiles == goal.tiles

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: Position) -> None:
        bc, br = board.blank_pos
        tc, tr = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = target

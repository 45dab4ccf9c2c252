"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from slidesolver.engine.gameplay import GamePlay
from slidesolver.models.board import Board, Direction, Position


class GameGenerator:
    """Creates solvable puzzles by walking the blank from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        tiles: list[list[int]] = []
        num = 1
        for r in range(size):
            row: list[int] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(0)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return Board(size=size, tiles=tiles, blank_pos=Position(size - 1, size - 1))

    @staticmethod
    def scramble(board: Board, moves: int | None = None) -> list[Direction]:
        """Scramble *board* in-place with random blank moves.

        Never immediately undoes the previous move.  Defaults to
        ``size² × 100`` moves.  Returns the walk that was applied.
        """
        if moves is None:
            moves = board.size * board.size * 100

        game = GamePlay.from_board(board)
        walk: list[Direction] = []
        for _ in range(moves):
            options = GameGenerator._legal_moves(board)
            if walk and walk[-1].opposite in options and len(options) > 1:
                options.remove(walk[-1].opposite)
            direction = random.choice(options)
            game.move(direction)
            walk.append(direction)
        return walk

    @staticmethod
    def generate(size: int, moves: int | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, moves)

        # Some walks cycle back to the solved board (every 12 moves on 2x2);
        # any single move leaves it.
        if board.is_solved():
            direction = random.choice(GameGenerator._legal_moves(board))
            GamePlay.from_board(board).move(direction)

        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _legal_moves(board: Board) -> list[Direction]:
        col, row = board.blank_pos
        legal: list[Direction] = []
        for direction in Direction:
            dc, dr = direction.delta
            if 0 <= col + dc < board.size and 0 <= row + dr < board.size:
                legal.append(direction)
        return legal

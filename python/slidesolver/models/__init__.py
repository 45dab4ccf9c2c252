from slidesolver.models.board import Board, Direction, Position

__all__ = ["Board", "Direction", "Position"]

from backend.models.board import Board, Direction
from backend.models.move import Move

__all__ = ["Board", "Direction", "Move"]

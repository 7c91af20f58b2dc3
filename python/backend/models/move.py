"""A single tile displacement on a sliding puzzle board."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Direction

# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up
# DOWN → tile at (br-1, bc) moves down
# RIGHT→ tile at (br, bc-1) moves right
# LEFT → tile at (br, bc+1) moves left
_TARGET_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.RIGHT: (0, -1),
    Direction.LEFT: (0, 1),
}

_RESULT_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Move:
    """The tile at *position* holding *tile_value* slides in *direction*.

    No bounds checking happens here; callers only build moves for
    directions the board reported as possible.
    """

    position: tuple[int, int]
    tile_value: int
    direction: Direction

    def describe(self) -> str:
        """Render as e.g. ``"Move 7 down"``."""
        return f"Move {self.tile_value} {self.direction.value}"

    def __str__(self) -> str:
        return self.describe()

    def resulting_position(self) -> tuple[int, int]:
        """New indexes of the tile, offset from its current *position*.

        Vertical moves offset the row by +1 for UP and -1 for DOWN.
        """
        dr, dc = _RESULT_OFFSETS[self.direction]
        return self.position[0] + dr, self.position[1] + dc

    def inverse(self) -> Move:
        """The move that slides the same tile back on the resulting board."""
        back = self.direction.opposite()
        # After this move the blank sits where the tile used to be.
        return Move(
            position=Move.empty_slot_to_target_tile(self.position, back),
            tile_value=self.tile_value,
            direction=back,
        )

    @staticmethod
    def empty_slot_to_target_tile(
        empty_pos: tuple[int, int], direction: Direction
    ) -> tuple[int, int]:
        """Position of the tile that would slide into the blank at *empty_pos*."""
        dr, dc = _TARGET_OFFSETS[direction]
        return empty_pos[0] + dr, empty_pos[1] + dc

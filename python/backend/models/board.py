"""Board model for rectangular sliding-tile puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.move import Move


class Direction(StrEnum):
    """Direction the tile slides into the blank (the blank shifts the other way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(eq=False)
class Board:
    """Represents a ``rows × cols`` sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    Boards handed to search nodes are never mutated; ``apply_move``
    always returns a fresh board.
    """

    rows: int
    cols: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int] = field(default=(-1, -1))

    def __post_init__(self) -> None:
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * cols : (r + 1) * cols]) for r in range(rows)]
        return cls(rows=rows, cols=cols, tiles=tiles)

    @classmethod
    def from_rows(cls, tiles: list[list[int]]) -> Board:
        """Create a board from nested rows, e.g. ``[[1, 2], [3, 0]]``."""
        if not tiles:
            raise ValueError("Board needs at least one row.")
        return cls(rows=len(tiles), cols=len(tiles[0]), tiles=[list(r) for r in tiles])

    @classmethod
    def goal(cls, rows: int, cols: int) -> Board:
        """Return the goal configuration (tiles in order, blank bottom-right)."""
        return cls.from_flat(rows, cols, list(range(1, rows * cols)) + [0])

    # -- queries --------------------------------------------------------------

    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.cols

    def empty_slot_position(self) -> tuple[int, int]:
        return self.blank_pos

    def tile_value_at(self, row: int, col: int) -> int:
        if not self._in_bounds(row, col):
            raise ValueError(f"({row}, {col}) is outside the {self.rows}×{self.cols} board.")
        return self.tiles[row][col]

    def goal_position_for(self, value: int) -> tuple[int, int]:
        """Return the ``(row, col)`` where *value* sits in the goal configuration."""
        if not 0 <= value < self.rows * self.cols:
            raise ValueError(
                f"No goal position for value {value} on a {self.rows}×{self.cols} board."
            )
        if value == 0:
            return self.rows - 1, self.cols - 1
        return (value - 1) // self.cols, (value - 1) % self.cols

    def possible_directions(self) -> list[Direction]:
        """Directions whose target tile exists, in ``Direction`` declaration order."""
        # Imported lazily: move.py depends on Direction from this module.
        from backend.models.move import Move

        directions: list[Direction] = []
        for direction in Direction:
            tr, tc = Move.empty_slot_to_target_tile(self.blank_pos, direction)
            if self._in_bounds(tr, tc):
                directions.append(direction)
        return directions

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.rows):
            for c in range(self.cols):
                if r == self.rows - 1 and c == self.cols - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.goal_position_for(self.tiles[row][col]) == (row, col)

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    # -- transitions ----------------------------------------------------------

    def apply_move(self, move: Move) -> Board:
        """Return a new board with ``move.tile_value`` slid into the blank."""
        from backend.models.move import Move

        tr, tc = move.position
        expected = Move.empty_slot_to_target_tile(self.blank_pos, move.direction)
        if (tr, tc) != expected:
            raise ValueError(
                f"{move} expects the tile at {expected}, got position {move.position}."
            )
        if not self._in_bounds(tr, tc):
            raise ValueError(f"{move} targets {move.position}, outside the board.")
        if self.tiles[tr][tc] != move.tile_value:
            raise ValueError(
                f"{move} names tile {move.tile_value}, board holds "
                f"{self.tiles[tr][tc]} at {move.position}."
            )

        result = self.copy()
        result._swap((tr, tc))
        return result

    def copy(self) -> Board:
        return Board(
            rows=self.rows,
            cols=self.cols,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash((self.rows, self.cols, self.flat()))

    # -- helpers --------------------------------------------------------------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _swap(self, target: tuple[int, int]) -> None:
        br, bc = self.blank_pos
        tr, tc = target
        self.tiles[br][bc], self.tiles[tr][tc] = (
            self.tiles[tr][tc],
            self.tiles[br][bc],
        )
        self.blank_pos = (tr, tc)

    def _validate(self) -> None:
        if self.rows < 2 or self.cols < 2:
            raise ValueError(f"Board must be at least 2×2, got {self.rows}×{self.cols}.")
        if len(self.tiles) != self.rows or any(len(r) != self.cols for r in self.tiles):
            raise ValueError(f"Tiles do not form a {self.rows}×{self.cols} grid.")

        values = sorted(v for row in self.tiles for v in row)
        if values != list(range(self.rows * self.cols)):
            raise ValueError(
                f"Tiles must be exactly 0..{self.rows * self.cols - 1} "
                "with a single blank (0)."
            )

        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    self.blank_pos = (r, c)

"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board
from backend.models.move import Move


class GameGenerator:
    """Creates solvable puzzles by walking away from the solved state."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(rows, cols)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random slides, never undoing the last one."""
        prev: Move | None = None
        for _ in range(moves):
            directions = board.possible_directions()
            if prev is not None and len(directions) > 1:
                directions.remove(prev.direction.opposite())
            direction = rng.choice(directions)
            tr, tc = Move.empty_slot_to_target_tile(board.blank_pos, direction)
            prev = Move((tr, tc), board.tiles[tr][tc], direction)
            board = board.apply_move(prev)
        return board

    @staticmethod
    def generate(rows: int, cols: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable*, unsolved board of the given shape."""
        if moves is None:
            moves = rows * cols * 100
        if moves < 1:
            raise ValueError(f"Need at least one scramble move, got {moves}.")
        rng = random.Random(seed)
        board = GameGenerator.scramble(GameGenerator.solved(rows, cols), moves, rng)

        # Walks of even length can land back on the goal; one slide leaves it.
        if board.is_solved():
            board = GameGenerator.scramble(board, 1, rng)

        return board

"""Solvability checks for sliding puzzle boards."""

from __future__ import annotations

from bisect import bisect_left, insort

from backend.models.board import Board


class Solver:
    """Stateless helpers; the search loop itself lives with the caller."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Number of tile pairs out of order in row-major reading, blank skipped."""
        inv = 0
        seen: list[int] = []
        for v in board.flat():
            if v == 0:
                continue
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        inv = Solver.inversions(board)
        if board.cols % 2 == 1:
            return inv % 2 == 0
        blank_from_bottom = board.rows - 1 - board.blank_pos[0]
        return (inv + blank_from_bottom) % 2 == 0

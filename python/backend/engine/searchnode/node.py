"""Search-tree nodes for informed sliding puzzle search."""

from __future__ import annotations

import logging

from backend.engine.searchnode.config import DEFAULT_SETTINGS, HeuristicSettings
from backend.models.board import Board
from backend.models.move import Move

logger = logging.getLogger(__name__)

# Marks a cell whose tile is not in its goal row/column for the line.
_OUTSIDE_LINE = -1


class SearchNode:
    """A board plus the parent node and move that produced it.

    The root has neither parent nor move; every other node has both.
    Nodes never change after construction, so siblings can share one
    parent and the path back to the root is just the parent chain.
    """

    __slots__ = ("_board", "_parent", "_move", "_depth")

    def __init__(
        self,
        board: Board,
        parent: SearchNode | None = None,
        move_taken: Move | None = None,
    ) -> None:
        if (parent is None) != (move_taken is None):
            raise ValueError("A node needs both a parent and a move, or neither.")
        self._board = board
        self._parent = parent
        self._move = move_taken
        self._depth = 0 if parent is None else parent.depth + 1

    # -- accessors ------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def parent(self) -> SearchNode | None:
        return self._parent

    @property
    def move_taken(self) -> Move | None:
        return self._move

    @property
    def depth(self) -> int:
        return self._depth

    def has_parent(self) -> bool:
        return self._parent is not None

    def is_goal(self) -> bool:
        return self._board.is_solved()

    def path(self) -> list[Move]:
        """Moves from the root down to this node."""
        moves: list[Move] = []
        node: SearchNode | None = self
        while node is not None and node._move is not None:
            moves.append(node._move)
            node = node._parent
        moves.reverse()
        return moves

    # -- expansion ------------------------------------------------------------

    def expand(self) -> list[SearchNode]:
        """Return one child per legal move, minus the one undoing our own move."""
        board = self._board
        directions = board.possible_directions()

        if self._move is not None:
            undo = self._move.direction.opposite()
            directions = [d for d in directions if d != undo]
            logger.debug("pruned %s after %s", undo.value, self._move)

        children: list[SearchNode] = []
        for direction in directions:
            tr, tc = Move.empty_slot_to_target_tile(board.empty_slot_position(), direction)
            move = Move((tr, tc), board.tile_value_at(tr, tc), direction)
            children.append(SearchNode(board.apply_move(move), self, move))

        logger.debug("expanded depth %d into %d children", self._depth, len(children))
        return children

    # -- heuristic ------------------------------------------------------------

    def heuristic_value(self, settings: HeuristicSettings = DEFAULT_SETTINGS) -> int:
        """Manhattan distance plus the weighted linear-conflict bonus."""
        rows, cols = self._board.dimensions()
        manhattan = self.manhattan_distance()

        if settings.counts_conflicts(rows, cols):
            conflicts = self.linear_conflicts()
        else:
            conflicts = 0

        return manhattan + settings.conflict_weight(rows, cols) * conflicts

    def manhattan_distance(self) -> int:
        """Sum over non-blank tiles of row plus column distance to the goal cell."""
        board = self._board
        total = 0
        for r, row in enumerate(board.tiles):
            for c, value in enumerate(row):
                if value == 0:
                    continue
                gr, gc = board.goal_position_for(value)
                total += abs(r - gr) + abs(c - gc)
        return total

    def linear_conflicts(self) -> int:
        """Count reversed pairs among tiles already in their goal row or column.

        The blank takes the value ``rows * cols`` so it orders last within
        its own goal line.
        """
        board = self._board
        rows, cols = board.dimensions()
        blank_value = rows * cols

        def line_value(value: int, in_goal_line: bool) -> int:
            if not in_goal_line:
                return _OUTSIDE_LINE
            return blank_value if value == 0 else value

        total = 0
        for i in range(rows):
            line = []
            for j in range(cols):
                value = board.tiles[i][j]
                line.append(line_value(value, board.goal_position_for(value)[0] == i))
            total += _count_conflicts(line)

        for j in range(cols):
            line = []
            for i in range(rows):
                value = board.tiles[i][j]
                line.append(line_value(value, board.goal_position_for(value)[1] == j))
            total += _count_conflicts(line)

        return total

    def __repr__(self) -> str:
        return f"SearchNode(depth={self._depth}, move={self._move}, board={self._board.flat()})"


def _count_conflicts(values: list[int]) -> int:
    conflicts = 0
    for j1 in range(len(values) - 1):
        if values[j1] == _OUTSIDE_LINE:
            continue
        for j2 in range(j1 + 1, len(values)):
            if values[j2] != _OUTSIDE_LINE and values[j1] > values[j2]:
                conflicts += 1
    return conflicts

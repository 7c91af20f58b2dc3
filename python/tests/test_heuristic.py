"""Heuristic tests: Manhattan distance plus the gated linear-conflict bonus."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.searchnode import DEFAULT_SETTINGS, HeuristicSettings, SearchNode
from backend.models.board import Board


def _node(rows: int, cols: int, flat: list[int]) -> SearchNode:
    return SearchNode(Board.from_flat(rows, cols, flat))


def _goal_with_first_two_swapped(rows: int, cols: int) -> SearchNode:
    flat = list(range(1, rows * cols)) + [0]
    flat[0], flat[1] = flat[1], flat[0]
    return _node(rows, cols, flat)


# -- zero exactly at the goal -------------------------------------------------


@pytest.mark.parametrize("shape", [(2, 2), (3, 3), (3, 4), (4, 4), (5, 5)])
def test_goal_scores_zero(shape: tuple[int, int]) -> None:
    node = SearchNode(Board.goal(*shape))
    assert node.manhattan_distance() == 0
    assert node.linear_conflicts() == 0
    assert node.heuristic_value() == 0


def test_zero_only_at_goal_for_every_2x2_arrangement() -> None:
    for perm in itertools.permutations(range(4)):
        node = _node(2, 2, list(perm))
        h = node.heuristic_value()
        assert h >= 0
        assert (h == 0) == node.board.is_solved(), f"h={h} for {perm}"


@pytest.mark.parametrize("seed", range(10))
def test_scrambled_boards_score_positive(seed: int) -> None:
    node = SearchNode(GameGenerator.generate(4, 4, moves=80, seed=seed))
    assert node.heuristic_value() > 0


# -- concrete 3×3 boards ------------------------------------------------------


def test_blank_swapped_with_eight() -> None:
    # Tile 8 is one column from home. The blank, valued 9 within its own
    # goal row, sits ahead of 8 and counts as one conflict.
    node = _node(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert node.manhattan_distance() == 1
    assert node.linear_conflicts() == 1
    assert node.heuristic_value() == 3


def test_row_conflict() -> None:
    node = _goal_with_first_two_swapped(3, 3)
    assert node.manhattan_distance() == 2
    assert node.linear_conflicts() == 1
    assert node.heuristic_value() == 4


def test_column_conflict() -> None:
    node = _node(3, 3, [4, 2, 3, 1, 5, 6, 7, 8, 0])
    assert node.manhattan_distance() == 2
    assert node.linear_conflicts() == 1
    assert node.heuristic_value() == 4


def test_tiles_outside_their_goal_line_are_ignored() -> None:
    # 5 and 2 are outside their goal lines; what remains is in order.
    node = _node(3, 3, [5, 1, 3, 4, 2, 6, 7, 8, 0])
    assert node.linear_conflicts() == 0
    assert node.heuristic_value() == node.manhattan_distance() == 4


def test_reversed_row_counts_every_pair() -> None:
    node = _node(3, 3, [3, 2, 1, 4, 5, 6, 7, 8, 0])
    assert node.linear_conflicts() == 3
    assert node.heuristic_value() == 4 + 2 * 3


# -- gating -------------------------------------------------------------------


def test_fifteen_puzzle_weights_conflicts() -> None:
    node = _goal_with_first_two_swapped(4, 4)
    assert node.linear_conflicts() == 1
    assert node.heuristic_value() == 2 + 2


def test_tall_board_counts_conflicts_but_weights_them_zero() -> None:
    node = _goal_with_first_two_swapped(5, 3)
    assert node.board.rows * node.board.cols < DEFAULT_SETTINGS.size_threshold
    assert node.linear_conflicts() == 1
    assert node.heuristic_value() == node.manhattan_distance() == 2


@pytest.mark.parametrize("shape", [(4, 5), (5, 4), (5, 5), (6, 6)])
def test_large_boards_are_pure_manhattan(shape: tuple[int, int]) -> None:
    node = _goal_with_first_two_swapped(*shape)
    assert node.heuristic_value() == node.manhattan_distance() == 2


@pytest.mark.parametrize("seed", range(5))
def test_large_scrambles_are_pure_manhattan(seed: int) -> None:
    node = SearchNode(GameGenerator.generate(5, 5, moves=80, seed=seed))
    assert node.heuristic_value() == node.manhattan_distance()


def test_size_gate_alone_can_skip_conflicts() -> None:
    node = _goal_with_first_two_swapped(3, 3)
    settings = HeuristicSettings(size_threshold=9)
    assert not settings.counts_conflicts(3, 3)
    assert settings.conflict_weight(3, 3) == 2
    assert node.heuristic_value(settings) == 2


def test_custom_weight() -> None:
    node = _node(3, 3, [3, 2, 1, 4, 5, 6, 7, 8, 0])
    assert node.heuristic_value(HeuristicSettings(weight=1)) == 4 + 3
    assert node.heuristic_value(HeuristicSettings(dimension_threshold=2)) == 4

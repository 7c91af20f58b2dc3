"""Solvability and board generation tests.

Generated boards come from seeded random walks, so every case is
reproducible. Each generated board must pass the parity check and still
be a valid, unsolved configuration.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.models.board import Board

SHAPES = [(2, 2), (2, 3), (3, 3), (3, 4), (4, 4), (5, 3), (5, 5)]


def _ids(shape: tuple[int, int]) -> str:
    return f"{shape[0]}x{shape[1]}"


# -- parity -------------------------------------------------------------------


@pytest.mark.parametrize("shape", SHAPES, ids=_ids)
def test_goal_is_solvable(shape: tuple[int, int]) -> None:
    assert Solver.is_solvable(Board.goal(*shape))


@pytest.mark.parametrize("shape", SHAPES, ids=_ids)
def test_swapping_two_tiles_breaks_solvability(shape: tuple[int, int]) -> None:
    rows, cols = shape
    flat = list(range(1, rows * cols)) + [0]
    flat[0], flat[1] = flat[1], flat[0]
    board = Board.from_flat(rows, cols, flat)

    assert Solver.inversions(board) == 1
    assert not Solver.is_solvable(board)


def test_inversions_ignore_the_blank() -> None:
    board = Board.from_flat(3, 3, [0, 8, 7, 6, 5, 4, 3, 2, 1])
    assert Solver.inversions(board) == 28


# -- generator ----------------------------------------------------------------


@pytest.mark.parametrize("shape", SHAPES, ids=_ids)
def test_generate_gives_solvable_unsolved_board(shape: tuple[int, int]) -> None:
    board = GameGenerator.generate(*shape, moves=40, seed=3)

    assert board.dimensions() == shape
    assert not board.is_solved()
    assert Solver.is_solvable(board), f"Unsolvable board generated: {board.flat()}"


def test_generate_is_reproducible_with_a_seed() -> None:
    a = GameGenerator.generate(4, 4, moves=50, seed=11)
    b = GameGenerator.generate(4, 4, moves=50, seed=11)
    assert a == b


def test_generate_rejects_empty_walk() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(3, 3, moves=0)


def test_scramble_leaves_the_input_board_alone() -> None:
    start = GameGenerator.solved(3, 3)
    scrambled = GameGenerator.scramble(start, 25, random.Random(5))

    assert start.is_solved()
    assert scrambled is not start

#!/usr/bin/env python3
"""Sliding puzzle search-node inspector.

Usage::

    python main.py inspect 1 2 3 4 5 6 7 0 8          # 3×3 board
    python main.py expand -r 2 -c 3 1 2 3 4 0 5       # children of a 2×3 board
    python main.py scramble -r 4 -c 4 --moves 30 --seed 7
    python main.py -v expand 1 2 3 4 5 6 7 0 8        # with debug logging
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.searchnode import (  # noqa: E402
    DIM_THRESHOLD,
    LC_WEIGHT,
    SIZE_THRESHOLD,
    HeuristicSettings,
    SearchNode,
)
from backend.models.board import Board  # noqa: E402
from frontend.cli.rich import app as rich_app  # noqa: E402

app = typer.Typer(add_completion=False, no_args_is_help=True)


# -- shared options -----------------------------------------------------------

RowsOption = typer.Option(3, "-r", "--rows", min=2, help="Board rows.")
ColsOption = typer.Option(3, "-c", "--cols", min=2, help="Board columns.")
SizeThresholdOption = typer.Option(
    SIZE_THRESHOLD, "--size-threshold",
    help="Count linear conflicts only when rows*cols is below this.",
)
DimThresholdOption = typer.Option(
    DIM_THRESHOLD, "--dim-threshold",
    help="Weight conflicts only when both dimensions are at most this.",
)
WeightOption = typer.Option(LC_WEIGHT, "--weight", min=0, help="Linear-conflict weight.")


# -- helpers ------------------------------------------------------------------


def _root(rows: int, cols: int, tiles: list[int]) -> SearchNode:
    try:
        board = Board.from_flat(rows, cols, tiles)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="TILES") from exc
    return SearchNode(board)


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
) -> None:
    """Sliding puzzle search-node inspector."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=rich_app.console, show_path=False)],
    )


@app.command()
def inspect(
    tiles: list[int] = typer.Argument(..., help="Row-major tiles, 0 is the blank."),
    rows: int = RowsOption,
    cols: int = ColsOption,
    size_threshold: int = SizeThresholdOption,
    dim_threshold: int = DimThresholdOption,
    weight: int = WeightOption,
) -> None:
    """Show a board with its heuristic breakdown."""
    settings = HeuristicSettings(size_threshold, dim_threshold, weight)
    rich_app.show_node(_root(rows, cols, tiles), settings)


@app.command()
def expand(
    tiles: list[int] = typer.Argument(..., help="Row-major tiles, 0 is the blank."),
    rows: int = RowsOption,
    cols: int = ColsOption,
    size_threshold: int = SizeThresholdOption,
    dim_threshold: int = DimThresholdOption,
    weight: int = WeightOption,
) -> None:
    """Show every child of a board and its heuristic value."""
    settings = HeuristicSettings(size_threshold, dim_threshold, weight)
    rich_app.show_expansion(_root(rows, cols, tiles), settings)


@app.command()
def scramble(
    rows: int = RowsOption,
    cols: int = ColsOption,
    moves: Optional[int] = typer.Option(None, "-m", "--moves", min=1, help="Random slides."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a random solvable board (tiles usable with inspect/expand)."""
    board = GameGenerator.generate(rows, cols, moves=moves, seed=seed)
    rich_app.show_node(SearchNode(board))
    rich_app.console.print(" ".join(str(v) for v in board.flat()))


if __name__ == "__main__":
    app()

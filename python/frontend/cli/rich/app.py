"""Rich terminal frontend: boards, heuristic breakdowns and expansions.

Uses the ``rich`` library for styled output. Everything here only reads
search nodes; nothing is mutated.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.engine.searchnode import DEFAULT_SETTINGS, HeuristicSettings, SearchNode
from backend.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.rows * board.cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(node: SearchNode, settings: HeuristicSettings) -> Text:
    rows, cols = node.board.dimensions()
    stats = Text()
    stats.append("  Manhattan: ", style="dim")
    stats.append(str(node.manhattan_distance()), style="bold yellow")
    stats.append("    Conflicts: ", style="dim")
    if settings.counts_conflicts(rows, cols):
        stats.append(str(node.linear_conflicts()), style="bold yellow")
        stats.append(f" ×{settings.conflict_weight(rows, cols)}", style="dim")
    else:
        stats.append("skipped", style="dim italic")
    stats.append("    h: ", style="dim")
    stats.append(str(node.heuristic_value(settings)), style="bold cyan")
    return stats


# -- screens ------------------------------------------------------------------


def show_node(
    node: SearchNode,
    settings: HeuristicSettings = DEFAULT_SETTINGS,
    out: Console | None = None,
) -> None:
    """Print one board with its heuristic breakdown and solvability."""
    out = out or console
    board = node.board

    solvable = Text()
    if board.is_solved():
        solvable.append("  Goal configuration", style="bold green")
    elif Solver.is_solvable(board):
        solvable.append("  Solvable", style="green")
    else:
        solvable.append("  Unsolvable", style="bold red")

    title = f"[bold cyan]{board.rows}×{board.cols}[/bold cyan]"
    if node.move_taken is not None:
        title += f"  [dim]{node.move_taken}[/dim]"

    panel = Panel(
        Group(Align.center(_render_board(board)), _render_stats(node, settings), solvable),
        title=title,
        border_style="bright_blue",
        padding=(1, 2),
    )
    out.print(panel)


def show_expansion(
    node: SearchNode,
    settings: HeuristicSettings = DEFAULT_SETTINGS,
    out: Console | None = None,
) -> list[SearchNode]:
    """Print every child of *node* side by side and return them."""
    out = out or console
    children = node.expand()

    table = Table(box=rich.box.SIMPLE_HEAVY, header_style="bold cyan")
    for child in children:
        table.add_column(str(child.move_taken), justify="center")
    table.add_row(*(_render_board(child.board) for child in children))
    table.add_row(
        *(f"h = [bold yellow]{child.heuristic_value(settings)}[/bold yellow]" for child in children)
    )

    out.print(Text(f"  {len(children)} children", style="dim"))
    out.print(table)
    return children

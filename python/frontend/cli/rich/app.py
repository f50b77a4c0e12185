"""Rich terminal reporter — tables, colours, and panels.

Same report functions as the vanilla reporter, rendered with ``rich``.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SearchOutcome, SearchResult
from backend.engine.heuristics import misplaced_count
from backend.models.board import BLANK, Board

console = Console()
err_console = Console(stderr=True)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 2))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str, footer: Text) -> Panel:
    return Panel(
        Group(Align.center(_render_board(board)), Align.center(footer)),
        title=f"[bold {style}]{title}[/bold {style}]",
        border_style=style,
        padding=(1, 2),
    )


def _stat(text: Text, label: str, value: object) -> None:
    text.append(f"  {label}: ", style="dim")
    text.append(str(value), style="bold yellow")


# -- reports --------------------------------------------------------------------


def report_replay(board: Board, move_path: Path, moves: int) -> None:
    stats = Text()
    _stat(stats, "Moves", moves)
    _stat(stats, "Tiles out of place", misplaced_count(board.tiles))
    size = board.size
    console.print(
        _board_panel(board, f"After {move_path.name}  {size}×{size}", "cyan", stats)
    )


def report_solve_start(board: Board, engine: str, move_path: Path) -> None:
    stats = Text()
    _stat(stats, "Initial tiles out of place", misplaced_count(board.tiles))
    console.print(
        _board_panel(board, f"Solving with {engine}", "yellow", stats)
    )
    console.print(f"[dim]{move_path.name} empty or missing.[/dim]")


def report_solve_result(result: SearchResult, final: Board, max_bound: int) -> None:
    ctx = result.context
    stats = Text()
    _stat(stats, "States expanded", ctx.expanded)
    _stat(stats, "Time", f"{ctx.elapsed_time:.3f}s")

    if result.outcome is SearchOutcome.solved:
        _stat(stats, "Tiles out of place", misplaced_count(final.tiles))
        console.print(
            _board_panel(
                final, f"Shortest solution length: {result.length} moves",
                "green", stats,
            )
        )
        return

    if result.outcome is SearchOutcome.bound_exceeded:
        message = f"Search bound exceeded {max_bound}. No solution found."
    else:
        message = "No solution found."
    console.print(Align.center(Text(message, style="bold red")))
    console.print(Align.center(stats))


def report_generated(board: Board, path: Path) -> None:
    size = board.size
    stats = Text()
    _stat(stats, "Tiles out of place", misplaced_count(board.tiles))
    console.print(
        _board_panel(board, f"Generated {path.name}  {size}×{size}", "bright_blue", stats)
    )


def report_error(message: str) -> None:
    err_console.print(Text(message, style="bold red"), soft_wrap=True)

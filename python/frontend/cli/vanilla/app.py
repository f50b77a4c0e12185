"""Vanilla terminal reporter — no third-party dependencies.

Plain ``print`` output, one fact per line, easy to grep or diff.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.engine.gamesolver import SearchOutcome, SearchResult
from backend.engine.heuristics import misplaced_count
from backend.models.board import Board


def _render_board(board: Board) -> str:
    return "\n".join(",".join(str(v) for v in row) for row in board.rows())


# -- reports --------------------------------------------------------------------


def report_replay(board: Board, move_path: Path, moves: int) -> None:
    print(f"Final state after applying {move_path.name} ({moves} moves):")
    print(_render_board(board))
    print(f"Tiles out of place: {misplaced_count(board.tiles)}")


def report_solve_start(board: Board, engine: str, move_path: Path) -> None:
    print(f"{move_path.name} empty or missing. Solving with {engine}.")
    print(f"Initial tiles out of place: {misplaced_count(board.tiles)}")


def report_solve_result(result: SearchResult, final: Board, max_bound: int) -> None:
    if result.outcome is SearchOutcome.solved:
        print(f"Shortest solution length: {result.length} moves")
        print(f"Tiles out of place: {misplaced_count(final.tiles)}")
    elif result.outcome is SearchOutcome.bound_exceeded:
        print(f"Search bound exceeded {max_bound}. No solution found.")
    else:
        print("No solution found.")
    print(f"States expanded: {result.context.expanded}")
    print(f"Elapsed: {result.context.elapsed_time:.3f}s")


def report_generated(board: Board, path: Path) -> None:
    print(f"Generated {path.name} for {board.size}x{board.size} puzzle.")


def report_error(message: str) -> None:
    print(message, file=sys.stderr)

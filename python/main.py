#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    python main.py                     # replay move.txt, or solve ini.txt
    python main.py -e astar -f rich    # best-first engine, Rich output
    python main.py generate 4          # write a random solvable 4×4 ini.txt
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import Engine, Solver, SolverConfig  # noqa: E402
from backend.engine.gamesolver.idastar import MAX_ITERATION_BOUND  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from backend.models import BoardFile, MoveFile  # noqa: E402

DEFAULT_BOARD = Path("ini.txt")
DEFAULT_MOVES = Path("move.txt")

logger = logging.getLogger("npuzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_REPORTERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _reporter(frontend: Frontend) -> ModuleType:
    return importlib.import_module(_REPORTERS[frontend])


def _solve_or_replay(
    board_path: Path,
    move_path: Path,
    engine: Engine,
    config: SolverConfig,
    reporter: ModuleType,
) -> None:
    board = BoardFile(board_path).load()
    entries = MoveFile(move_path).load()

    if entries:
        game = GamePlay.from_board(board)
        game.replay(entries)
        reporter.report_replay(game.board, move_path, game.moves)
        return

    reporter.report_solve_start(board, engine.value, move_path)
    result = Solver.solve(board, engine, config)

    final = GamePlay.from_board(board)
    if result.solved:
        MoveFile(move_path).save(result.moves)
        final.replay(enumerate(result.moves, start=1))
        logger.info("wrote %d moves to %s", result.length, move_path)
    reporter.report_solve_result(result, final.board, config.max_bound)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    board: Path = typer.Option(
        DEFAULT_BOARD, "-b", "--board",
        help="Initial board file.",
    ),
    moves: Path = typer.Option(
        DEFAULT_MOVES, "-m", "--moves",
        help="Move file to replay, or to write the solution to.",
    ),
    engine: Engine = typer.Option(
        Engine.idastar, "-e", "--engine",
        envvar="NPUZZLE_ENGINE",
        help="Search engine used when there is nothing to replay.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="NPUZZLE_FRONTEND",
        help="Console output style.",
    ),
    max_bound: int = typer.Option(
        MAX_ITERATION_BOUND, "--max-bound",
        min=0,
        help="Give up once the IDA* bound passes this value.",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes",
        min=1,
        help="Abort A* once this many nodes have been created.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Sliding puzzle solver."""
    _configure_logging(verbose)
    ctx.obj = frontend
    if ctx.invoked_subcommand is not None:
        return

    reporter = _reporter(frontend)
    config = SolverConfig(max_bound=max_bound, max_nodes=max_nodes)
    try:
        _solve_or_replay(board, moves, engine, config, reporter)
    except PuzzleError as exc:
        reporter.report_error(str(exc))
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        reporter.report_error(f"Failed to access {exc.filename}: {exc.strerror}")
        raise typer.Exit(code=1) from exc


@app.command()
def generate(
    ctx: typer.Context,
    size: int = typer.Argument(..., help="Side length of the puzzle (> 1)."),
    board: Path = typer.Option(
        DEFAULT_BOARD, "-b", "--board",
        help="Where to write the generated board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
    walk: Optional[int] = typer.Option(
        None, "--walk",
        min=0,
        help="Scramble by this many random moves instead of a full shuffle.",
    ),
) -> None:
    """Write a random solvable board."""
    reporter = _reporter(ctx.obj or Frontend.vanilla)
    rng = random.Random(seed)
    try:
        if walk is None:
            generated = GameGenerator.generate(size, rng)
        else:
            generated = GameGenerator.walk(size, walk, rng)
        BoardFile(board).save(generated)
    except PuzzleError as exc:
        reporter.report_error(str(exc))
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        reporter.report_error(f"Failed to write {board}: {exc.strerror}")
        raise typer.Exit(code=1) from exc
    reporter.report_generated(generated, board)


if __name__ == "__main__":
    app()

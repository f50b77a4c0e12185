"""Sliding puzzle solver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gamegenerator import is_solvable
from backend.engine.gamesolver.astar import astar
from backend.engine.gamesolver.idastar import MAX_ITERATION_BOUND, idastar
from backend.engine.gamestate import ExpandHook, SearchContext
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Engine(StrEnum):
    astar = "astar"
    idastar = "idastar"


class SearchOutcome(StrEnum):
    solved = "solved"
    no_solution = "no_solution"
    bound_exceeded = "bound_exceeded"


@dataclass(frozen=True)
class SolverConfig:
    max_bound: int = MAX_ITERATION_BOUND
    visited_capacity: int = 1 << 16
    max_nodes: int | None = None
    check_solvable: bool = True


@dataclass
class SearchResult:
    outcome: SearchOutcome
    engine: Engine
    context: SearchContext
    moves: list[Direction] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.outcome is SearchOutcome.solved

    @property
    def length(self) -> int:
        return len(self.moves)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        engine: Engine = Engine.idastar,
        config: SolverConfig | None = None,
        on_expand: ExpandHook | None = None,
    ) -> SearchResult:
        """Search for a shortest move sequence that solves *board*.

        *board* is left untouched.  ``SearchResourceError`` propagates
        when the chosen engine runs out of resources.
        """
        engine = Engine(engine)
        config = config or SolverConfig()
        ctx = SearchContext(board.size, on_expand=on_expand)

        def finish(outcome: SearchOutcome, moves: list[Direction] | None = None) -> SearchResult:
            ctx.stop()
            return SearchResult(outcome, engine, ctx, moves or [])

        if board.is_goal():
            return finish(SearchOutcome.solved)

        if config.check_solvable and not Solver.is_solvable(board):
            logger.info("board fails the parity check, skipping search")
            return finish(SearchOutcome.no_solution)

        work = board.copy()
        try:
            if engine is Engine.astar:
                moves = astar(
                    work.tiles, work.size, work.blank, ctx,
                    visited_capacity=config.visited_capacity,
                    max_nodes=config.max_nodes,
                )
                if moves is None:
                    return finish(SearchOutcome.no_solution)
                return finish(SearchOutcome.solved, moves)

            result = idastar(work.tiles, work.size, work.blank, ctx, max_bound=config.max_bound)
            if result.bound_exceeded:
                return finish(SearchOutcome.bound_exceeded)
            if result.moves is None:
                return finish(SearchOutcome.no_solution)
            return finish(SearchOutcome.solved, result.moves)
        finally:
            ctx.stop()

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board.tiles, board.size, board.blank)

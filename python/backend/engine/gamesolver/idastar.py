"""Bounded iterative-deepening (IDA*) search.

One board buffer is shared by the whole search: every move is applied in
place before recursing and undone afterwards, whatever the outcome.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from backend.engine.gamestate import SearchContext
from backend.engine.heuristics import manhattan_distance
from backend.errors import SearchResourceError
from backend.models.board import SEARCH_ORDER, Direction, apply_move, is_goal

logger = logging.getLogger(__name__)

MAX_ITERATION_BOUND = 1_000_000
FOUND = -1


@dataclass
class BoundedResult:
    """``moves`` is set on success; ``bound_exceeded`` when the cap was hit."""

    moves: list[Direction] | None
    bound: int
    bound_exceeded: bool = False
    iterations: int = 0


class _BoundedSearch:
    __slots__ = ("tiles", "size", "blank", "path", "ctx", "solution")

    def __init__(self, tiles: list[int], size: int, blank: int, ctx: SearchContext) -> None:
        self.tiles = tiles
        self.size = size
        self.blank = blank
        self.path: list[Direction] = []
        self.ctx = ctx
        self.solution: list[Direction] | None = None

    def search(self, g: int, bound: int, prev: Direction | None) -> float:
        """Return FOUND, or the smallest f above *bound* seen in this subtree."""
        f = g + manhattan_distance(self.tiles, self.size)
        if f > bound:
            return f
        if is_goal(self.tiles):
            self.solution = self.path[:]
            return FOUND

        self.ctx.record_expansion(self.tiles, g, bound)

        smallest = math.inf
        for direction in SEARCH_ORDER:
            if prev is not None and direction is prev.opposite:
                continue
            prior_blank = self.blank
            new_blank = apply_move(self.tiles, self.size, prior_blank, direction)
            if new_blank is None:
                continue
            self.ctx.record_generated()
            self.blank = new_blank
            self.path.append(direction)
            try:
                result = self.search(g + 1, bound, direction)
            finally:
                self.path.pop()
                apply_move(self.tiles, self.size, new_blank, direction.opposite)
                self.blank = prior_blank
            if result == FOUND:
                return FOUND
            if result < smallest:
                smallest = result
        return smallest


def idastar(
    tiles: list[int],
    size: int,
    blank: int,
    ctx: SearchContext,
    max_bound: int = MAX_ITERATION_BOUND,
) -> BoundedResult:
    """Search *tiles* in place; the buffer is restored before returning."""
    bounded = _BoundedSearch(tiles, size, blank, ctx)
    bound = manhattan_distance(tiles, size)
    iterations = 0

    while True:
        if bound > max_bound:
            logger.info("IDA* bound %d exceeds ceiling %d", bound, max_bound)
            return BoundedResult(None, bound, bound_exceeded=True, iterations=iterations)

        iterations += 1
        logger.debug("IDA* iteration %d, bound %d, expanded %d", iterations, bound, ctx.expanded)
        try:
            result = bounded.search(0, bound, None)
        except RecursionError as exc:
            raise SearchResourceError(f"recursion depth exhausted at bound {bound}") from exc

        if result == FOUND:
            logger.info("IDA* solved at bound %d after %d iterations", bound, iterations)
            return BoundedResult(bounded.solution, bound, iterations=iterations)
        if result == math.inf:
            logger.info("IDA* found no successors within any bound")
            return BoundedResult(None, bound, iterations=iterations)
        bound = int(result)

"""Best-first (A*) search over board permutations.

Nodes live in an arena and refer to their parent by integer handle.  The
open list is a binary heap of nodes ordered by ``(g + h, h)``; a visited
table suppresses boards already queued at an equal or lower cost.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from types import TracebackType

from backend.engine.gamestate import SearchContext
from backend.engine.gamesolver.visited import VisitedTable
from backend.engine.heuristics import manhattan_distance
from backend.errors import SearchResourceError
from backend.models.board import SEARCH_ORDER, Direction, apply_move, is_goal

logger = logging.getLogger(__name__)

ROOT = -1
_REPORT_EVERY = 100_000


@dataclass(slots=True, eq=False)
class SearchNode:
    tiles: tuple[int, ...]
    blank: int
    g: int
    h: int
    parent: int
    move: Direction | None
    handle: int = ROOT

    @property
    def f(self) -> int:
        return self.g + self.h

    def __lt__(self, other: SearchNode) -> bool:
        # Equal f: prefer the node the heuristic thinks is closer.
        return (self.g + self.h, self.h) < (other.g + other.h, other.h)


class SearchSpace:
    """Node arena, open heap and visited table for one search.

    Used as a context manager so everything is released together on
    every exit path.
    """

    def __init__(self, visited_capacity: int, max_nodes: int | None = None) -> None:
        self.nodes: list[SearchNode] = []
        self.open: list[SearchNode] = []
        self.visited = VisitedTable(visited_capacity)
        self.max_nodes = max_nodes

    def __enter__(self) -> SearchSpace:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def release(self) -> None:
        self.nodes.clear()
        self.open.clear()
        self.visited.clear()

    def add(self, node: SearchNode) -> SearchNode:
        if self.max_nodes is not None and len(self.nodes) >= self.max_nodes:
            raise SearchResourceError(f"node limit of {self.max_nodes} reached")
        node.handle = len(self.nodes)
        self.nodes.append(node)
        heapq.heappush(self.open, node)
        return node

    def path_to(self, node: SearchNode) -> list[Direction]:
        """Walk parent handles back to the root and return moves in order."""
        moves: list[Direction] = []
        # Only the root has no move.
        while node.move is not None:
            moves.append(node.move)
            node = self.nodes[node.parent]
        moves.reverse()
        return moves


def astar(
    tiles: list[int],
    size: int,
    blank: int,
    ctx: SearchContext,
    visited_capacity: int = 1 << 16,
    max_nodes: int | None = None,
) -> list[Direction] | None:
    """Return an optimal move list, or ``None`` if the state graph runs out.

    Raises ``SearchResourceError`` when ``max_nodes`` is exceeded or
    memory runs out.
    """
    try:
        with SearchSpace(visited_capacity, max_nodes) as space:
            return _search(space, tuple(tiles), size, blank, ctx)
    except MemoryError as exc:
        raise SearchResourceError("out of memory") from exc


def _search(
    space: SearchSpace,
    start: tuple[int, ...],
    size: int,
    blank: int,
    ctx: SearchContext,
) -> list[Direction] | None:
    next_report = _REPORT_EVERY
    space.visited.offer(start, 0)
    space.add(SearchNode(start, blank, 0, manhattan_distance(start, size), ROOT, None))

    while space.open:
        node = heapq.heappop(space.open)

        # A cheaper copy of this board was queued after this entry.
        best = space.visited.best_g(node.tiles)
        if best is not None and best < node.g:
            continue

        if is_goal(node.tiles):
            logger.info(
                "A* reached goal at depth %d (%d expanded, %d nodes)",
                node.g, ctx.expanded, len(space.nodes),
            )
            return space.path_to(node)

        ctx.record_expansion(node.tiles, node.g, node.f)
        g = node.g + 1
        for direction in SEARCH_ORDER:
            if node.move is not None and direction is node.move.opposite:
                continue
            child = list(node.tiles)
            child_blank = apply_move(child, size, node.blank, direction)
            if child_blank is None:
                continue
            ctx.record_generated()
            key = tuple(child)
            if not space.visited.offer(key, g):
                continue
            space.add(
                SearchNode(
                    key, child_blank, g, manhattan_distance(key, size),
                    node.handle, direction,
                )
            )

        if len(space.nodes) >= next_report:
            logger.debug("A* node pool at %d, open %d", len(space.nodes), len(space.open))
            next_report += _REPORT_EVERY

    logger.info("A* exhausted the state graph after %d expansions", ctx.expanded)
    return None

"""Per-search bookkeeping threaded through both engines."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

ExpandHook = Callable[[Sequence[int], int, int], None]


class SearchContext:
    """Holds the puzzle geometry, counters and timing for one search.

    A fresh context is created for every ``solve`` call so repeated runs
    never share counters.
    """

    def __init__(self, size: int, on_expand: ExpandHook | None = None) -> None:
        self.size = size
        self.length = size * size
        self.expanded: int = 0
        self.generated: int = 0
        # Called as on_expand(tiles, g, bound) by the bounded engine.
        self.on_expand = on_expand
        self._start_time: float = time.perf_counter()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.perf_counter() - self._start_time)
        return self._elapsed_banked

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        if self._running:
            self._elapsed_banked += time.perf_counter() - self._start_time
            self._running = False

    # -- counters -------------------------------------------------------------

    def record_expansion(self, tiles: Sequence[int], g: int, bound: int) -> None:
        self.expanded += 1
        if self.on_expand is not None:
            self.on_expand(tiles, g, bound)

    def record_generated(self) -> None:
        self.generated += 1

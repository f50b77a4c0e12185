"""Visited-state table for the best-first engine.

A bucketed hash map keyed by a 64-bit content hash of the board.  Each
record remembers the cheapest ``g`` at which its board has been queued.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def board_hash(tiles: Sequence[int]) -> int:
    """FNV-1a over the tile values, finished with a 64-bit avalanche."""
    h = _FNV_OFFSET
    for value in tiles:
        h ^= (value + 1) & 0xFFFFFFFF
        h = (h * _FNV_PRIME) & _MASK64
    h ^= h >> 33
    h = (h * 0xFF51AFD7ED558CCD) & _MASK64
    h ^= h >> 33
    return h


@dataclass(slots=True)
class VisitedRecord:
    hash: int
    g: int
    tiles: tuple[int, ...]


class VisitedTable:
    """Hash map of board -> best known ``g``.

    ``capacity`` is the initial bucket count.  The table doubles its
    buckets whenever ``len / buckets`` exceeds ``load_factor``.
    """

    def __init__(self, capacity: int = 1 << 16, load_factor: float = 0.75) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.load_factor = load_factor
        self._buckets: list[list[VisitedRecord]] = [[] for _ in range(capacity)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    # -- queries --------------------------------------------------------------

    def lookup(self, tiles: tuple[int, ...], h: int | None = None) -> VisitedRecord | None:
        if h is None:
            h = board_hash(tiles)
        for record in self._buckets[h % len(self._buckets)]:
            if record.hash == h and record.tiles == tiles:
                return record
        return None

    def best_g(self, tiles: tuple[int, ...]) -> int | None:
        record = self.lookup(tiles)
        return None if record is None else record.g

    # -- updates --------------------------------------------------------------

    def offer(self, tiles: tuple[int, ...], g: int) -> bool:
        """Record *tiles* at cost *g*.

        Returns False when an equal board is already known at ``<= g``
        (dominated).  Otherwise stores or lowers the record and returns True.
        """
        h = board_hash(tiles)
        record = self.lookup(tiles, h)
        if record is not None:
            if record.g <= g:
                return False
            record.g = g
            return True
        self._buckets[h % len(self._buckets)].append(VisitedRecord(h, g, tiles))
        self._size += 1
        if self._size > self.load_factor * len(self._buckets):
            self._grow()
        return True

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def _grow(self) -> None:
        count = len(self._buckets) * 2
        buckets: list[list[VisitedRecord]] = [[] for _ in range(count)]
        for bucket in self._buckets:
            for record in bucket:
                buckets[record.hash % count].append(record)
        self._buckets = buckets
        logger.debug("visited table grown to %d buckets (%d records)", count, self._size)

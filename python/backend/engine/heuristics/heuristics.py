"""Distance estimates used by the search engines and the reports."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.board import BLANK


def manhattan_distance(tiles: Sequence[int], size: int) -> int:
    """Sum of row + column distances of every tile from its goal cell."""
    distance = 0
    for idx, value in enumerate(tiles):
        if value == BLANK:
            continue
        gr, gc = divmod(value, size)
        r, c = divmod(idx, size)
        distance += abs(gr - r) + abs(gc - c)
    return distance


def misplaced_count(tiles: Sequence[int]) -> int:
    """Number of cells that differ from the goal, blank included.

    Reporting only; never used to guide a search.
    """
    last = len(tiles) - 1
    misplaced = 0
    for idx, value in enumerate(tiles):
        if value == BLANK:
            if idx != last:
                misplaced += 1
        elif idx == last or value != idx:
            misplaced += 1
    return misplaced

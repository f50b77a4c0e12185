"""Board model for the sliding puzzle solver.

Tiles are stored flat in row-major order.  Tile ``v`` belongs at index
``v``; the blank (``BLANK``) belongs in the last cell.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import PuzzleFormatError

BLANK = -1


class Direction(StrEnum):
    """Direction the *blank* travels."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @classmethod
    def parse(cls, char: str) -> Direction | None:
        """Return the direction for *char*, or ``None`` if it is not one."""
        try:
            return cls(char)
        except ValueError:
            return None


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Fixed expansion order shared by both engines.
SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# -- primitives over raw tile sequences ---------------------------------------


def goal_tiles(size: int) -> list[int]:
    return list(range(size * size - 1)) + [BLANK]


def is_goal(tiles: Sequence[int]) -> bool:
    last = len(tiles) - 1
    for i in range(last):
        if tiles[i] != i:
            return False
    return tiles[last] == BLANK


def apply_move(
    tiles: MutableSequence[int], size: int, blank: int, direction: Direction
) -> int | None:
    """Slide the blank one cell in *direction*.

    Returns the new blank index, or ``None`` (leaving *tiles* untouched)
    when the move would leave the grid.  Applying ``direction.opposite``
    from the returned index undoes the move exactly.
    """
    dr, dc = _OFFSETS[direction]
    row, col = divmod(blank, size)
    nr, nc = row + dr, col + dc
    if not (0 <= nr < size and 0 <= nc < size):
        return None
    target = nr * size + nc
    tiles[blank] = tiles[target]
    tiles[target] = BLANK
    return target


# -- board ----------------------------------------------------------------------


@dataclass
class Board:
    """A sliding puzzle of side ``size`` with one blank."""

    size: int
    tiles: list[int]
    blank: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, values: Sequence[int]) -> Board:
        """Create a board from a flat row-major value list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, -1, 4, 6, 7, 5])
        """
        if size <= 1:
            raise PuzzleFormatError(f"Puzzle size must be greater than 1, got {size}.")
        length = size * size
        if len(values) != length:
            raise PuzzleFormatError(
                f"Expected {length} values for a {size}×{size} board, "
                f"got {len(values)}."
            )
        blanks = [i for i, v in enumerate(values) if v == BLANK]
        if not blanks:
            raise PuzzleFormatError("Blank tile (-1) not found.")
        if len(blanks) > 1:
            raise PuzzleFormatError(f"Expected one blank tile, found {len(blanks)}.")
        if sorted(v for v in values if v != BLANK) != list(range(length - 1)):
            raise PuzzleFormatError(
                f"Tiles must be the numbers 0..{length - 2}, each exactly once."
            )
        return cls(size=size, tiles=list(values), blank=blanks[0])

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=goal_tiles(size), blank=size * size - 1)

    # -- queries --------------------------------------------------------------

    def is_goal(self) -> bool:
        return is_goal(self.tiles)

    def is_tile_correct(self, index: int) -> bool:
        value = self.tiles[index]
        if value == BLANK:
            return index == len(self.tiles) - 1
        return value == index

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def key(self) -> tuple[int, ...]:
        return tuple(self.tiles)

    # -- mutation -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank in place.  Returns False if the move is illegal."""
        new_blank = apply_move(self.tiles, self.size, self.blank, direction)
        if new_blank is None:
            return False
        self.blank = new_blank
        return True

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank=self.blank)

"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence

from backend.errors import PuzzleFormatError
from backend.models.board import BLANK, Board, Direction


# -- parity -------------------------------------------------------------------


def count_inversions(tiles: Sequence[int]) -> int:
    values = [v for v in tiles if v != BLANK]
    inversions = 0
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] > values[j]:
                inversions += 1
    return inversions


def is_solvable(tiles: Sequence[int], size: int, blank: int) -> bool:
    """Parity rule for reaching the goal (blank in the last cell).

    Odd sizes need an even inversion count.  Even sizes count the blank's
    row 1-based from the bottom: an even row needs odd inversions, an odd
    row needs even inversions.
    """
    inversions = count_inversions(tiles)
    if size % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = size - blank // size
    if blank_row_from_bottom % 2 == 0:
        return inversions % 2 == 1
    return inversions % 2 == 0


def make_solvable(tiles: MutableSequence[int], size: int, blank: int) -> bool:
    """Swap the first two tiles if needed.  Returns True if a swap happened."""
    if is_solvable(tiles, size, blank):
        return False
    first, second = [i for i, v in enumerate(tiles) if v != BLANK][:2]
    tiles[first], tiles[second] = tiles[second], tiles[first]
    return True


# -- generation -----------------------------------------------------------------


class GameGenerator:
    """Creates random solvable puzzles."""

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled, parity-corrected board."""
        if size <= 1:
            raise PuzzleFormatError(f"Puzzle size must be greater than 1, got {size}.")
        rng = rng or random.Random()
        board = Board.solved(size)
        tiles = board.tiles
        for i in range(len(tiles) - 1, 0, -1):
            j = rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]
        board.blank = tiles.index(BLANK)
        make_solvable(tiles, size, board.blank)
        return board

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> None:
        """Walk the blank *steps* random legal moves in-place.

        Never immediately undoes the previous move, so the result is at
        most *steps* moves from where it started.
        """
        rng = rng or random.Random()
        prev = None
        for _ in range(steps):
            choices = [d for d in GameGenerator._legal_moves(board) if d is not prev]
            direction = rng.choice(choices)
            board.move(direction)
            prev = direction.opposite

    @staticmethod
    def walk(size: int, steps: int, rng: random.Random | None = None) -> Board:
        """Return a board *steps* random moves away from the goal (or fewer)."""
        if size <= 1:
            raise PuzzleFormatError(f"Puzzle size must be greater than 1, got {size}.")
        board = Board.solved(size)
        GameGenerator.scramble(board, steps, rng)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _legal_moves(board: Board) -> list[Direction]:
        row, col = divmod(board.blank, board.size)
        last = board.size - 1
        moves: list[Direction] = []
        if row > 0:
            moves.append(Direction.UP)
        if row < last:
            moves.append(Direction.DOWN)
        if col > 0:
            moves.append(Direction.LEFT)
        if col < last:
            moves.append(Direction.RIGHT)
        return moves

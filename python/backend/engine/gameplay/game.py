"""Replays move lists against a board."""

from __future__ import annotations

from collections.abc import Iterable

from backend.errors import IllegalMoveError
from backend.models.board import Board, Direction


class GamePlay:
    """Applies moves to a single board and counts them."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Start from a copy of *board* so the caller's board is left alone."""
        return cls(board.copy())

    @property
    def size(self) -> int:
        return self.board.size

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Returns True if the move was valid."""
        if not self.board.move(direction):
            return False
        self.moves += 1
        return True

    def replay(self, entries: Iterable[tuple[int, Direction]]) -> Board:
        """Apply ``(line_number, direction)`` pairs in order.

        Stops at the first illegal move with ``IllegalMoveError``.
        """
        for line_number, direction in entries:
            if not self.move(direction):
                raise IllegalMoveError(line_number, direction.value)
        return self.board

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_goal()

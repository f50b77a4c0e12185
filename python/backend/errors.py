"""Exceptions raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the backend reports to its caller."""


class PuzzleFormatError(PuzzleError, ValueError):
    """A board or move file could not be turned into a valid puzzle."""


class IllegalMoveError(PuzzleError, ValueError):
    """A replayed move would push the blank off the grid."""

    def __init__(self, line_number: int, direction: str) -> None:
        super().__init__(f"Invalid move '{direction}' at line {line_number}.")
        self.line_number = line_number
        self.direction = direction


class SearchResourceError(PuzzleError, RuntimeError):
    """A search ran out of memory, node budget or stack depth."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"search aborted: resource limit ({detail})")
        self.detail = detail

"""Board and move file persistence.

Board file::

    3
    0,1,2
    3,-1,4
    6,7,5

Move file: one of ``U``/``D``/``L``/``R`` per line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.errors import PuzzleFormatError
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

MoveEntry = tuple[int, Direction]


class BoardFile:
    """Loads and saves the initial board."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = Path(filepath)

    def load(self) -> Board:
        try:
            text = self.filepath.read_text(encoding="utf-8")
        except OSError as exc:
            raise PuzzleFormatError(f"Failed to open {self.filepath}: {exc.strerror}") from exc
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(
                f"{self.filepath}: not valid text (byte {exc.start}: {exc.reason})."
            ) from exc

        lines = text.splitlines()
        if not lines or not lines[0].strip():
            raise PuzzleFormatError(f"{self.filepath} is empty.")

        size = self._parse_int(lines[0].strip(), 1)
        if size <= 1:
            raise PuzzleFormatError(f"Invalid puzzle size in {self.filepath}: {size}.")

        values: list[int] = []
        for line_number, line in enumerate(lines[1:], start=2):
            for token in line.split(","):
                token = token.strip()
                if token:
                    values.append(self._parse_int(token, line_number))

        try:
            board = Board.from_flat(size, values)
        except PuzzleFormatError as exc:
            raise PuzzleFormatError(f"{self.filepath}: {exc}") from exc
        logger.debug("loaded %d×%d board from %s", size, size, self.filepath)
        return board

    def save(self, board: Board) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        rows = [",".join(str(v) for v in row) for row in board.rows()]
        self.filepath.write_text(f"{board.size}\n" + "\n".join(rows) + "\n")

    def _parse_int(self, token: str, line_number: int) -> int:
        try:
            return int(token)
        except ValueError:
            raise PuzzleFormatError(
                f"{self.filepath}, line {line_number}: '{token}' is not an integer."
            ) from None


class MoveFile:
    """Loads and saves a move list.

    A missing file, or one without any valid move, loads as an empty list.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = Path(filepath)

    def load(self) -> list[MoveEntry]:
        if not self.filepath.exists():
            return []
        try:
            text = self.filepath.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise PuzzleFormatError(f"Failed to open {self.filepath}: {exc.strerror}") from exc

        # Undecodable bytes become U+FFFD and are skipped like any other junk.
        entries: list[MoveEntry] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            stripped = line.lstrip(" \t")
            if not stripped.strip():
                continue
            direction = Direction.parse(stripped[0])
            if direction is not None:
                entries.append((line_number, direction))
        logger.debug("read %d moves from %s", len(entries), self.filepath)
        return entries

    def save(self, moves: list[Direction]) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text("".join(f"{m.value}\n" for m in moves))

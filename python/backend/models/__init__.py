from backend.models.board import BLANK, Board, Direction
from backend.models.puzzlefile import BoardFile, MoveFile

__all__ = ["BLANK", "Board", "BoardFile", "Direction", "MoveFile"]

"""Replaying move lists."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.errors import IllegalMoveError
from backend.models.board import Board, Direction


def _two_move_board() -> Board:
    return Board.from_flat(3, [0, 1, 2, 3, -1, 4, 6, 7, 5])


def test_replay_reaches_goal() -> None:
    board = _two_move_board()
    game = GamePlay.from_board(board)
    final = game.replay([(1, Direction.RIGHT), (2, Direction.DOWN)])
    assert game.is_won
    assert final.is_goal()
    assert game.moves == 2
    assert not board.is_goal(), "replay works on a copy"


def test_illegal_move_reports_line_number() -> None:
    game = GamePlay.from_board(Board.solved(3))
    entries = [(1, Direction.UP), (3, Direction.UP), (4, Direction.UP)]
    with pytest.raises(IllegalMoveError, match="line 4") as info:
        game.replay(entries)
    assert info.value.line_number == 4
    assert info.value.direction == "U"
    assert game.moves == 2


def test_move_counts_only_legal_moves() -> None:
    game = GamePlay(Board.solved(2))
    assert not game.move(Direction.DOWN)
    assert game.move(Direction.LEFT)
    assert game.moves == 1
    assert game.size == 2

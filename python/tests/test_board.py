"""Board model and move primitives."""

from __future__ import annotations

import pytest

from backend.errors import PuzzleFormatError
from backend.models.board import (
    BLANK,
    SEARCH_ORDER,
    Board,
    Direction,
    apply_move,
    goal_tiles,
    is_goal,
)


def _board_with_blank_at(size: int, index: int) -> Board:
    tiles = list(range(size * size - 1))
    tiles.insert(index, BLANK)
    return Board(size=size, tiles=tiles, blank=index)


@pytest.mark.parametrize("size", [2, 3, 4])
@pytest.mark.parametrize("direction", SEARCH_ORDER)
def test_moves_are_invertible(size: int, direction: Direction) -> None:
    for index in range(size * size):
        board = _board_with_blank_at(size, index)
        tiles = board.tiles[:]
        moved = apply_move(tiles, size, index, direction)
        if moved is None:
            assert tiles == board.tiles, "illegal move must not mutate"
            continue
        assert tiles[moved] == BLANK
        back = apply_move(tiles, size, moved, direction.opposite)
        assert back == index
        assert tiles == board.tiles


def test_illegal_moves_at_edges() -> None:
    board = Board.solved(3)  # blank bottom-right
    assert not board.move(Direction.DOWN)
    assert not board.move(Direction.RIGHT)
    assert board.is_goal()
    assert board.move(Direction.UP)
    assert board.blank == 5
    assert board.tiles[8] == 5


def test_opposites() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.DOWN.opposite is Direction.UP
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.opposite is Direction.LEFT


@pytest.mark.parametrize(
    "char, expected",
    [("U", Direction.UP), ("R", Direction.RIGHT), ("u", None), ("X", None), ("", None)],
)
def test_parse(char: str, expected: Direction | None) -> None:
    assert Direction.parse(char) is expected


def test_goal() -> None:
    assert goal_tiles(2) == [0, 1, 2, BLANK]
    assert is_goal([0, 1, 2, 3, 4, 5, 6, 7, BLANK])
    assert not is_goal([0, 1, 2, 3, 4, 5, 6, BLANK, 7])
    assert Board.solved(4).is_goal()


def test_from_flat() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, -1, 4, 6, 7, 5])
    assert board.blank == 4
    assert board.rows() == [[0, 1, 2], [3, -1, 4], [6, 7, 5]]
    assert board.key() == (0, 1, 2, 3, -1, 4, 6, 7, 5)
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(4)
    assert not board.is_tile_correct(8)


@pytest.mark.parametrize(
    "size, values, message",
    [
        (1, [-1], "greater than 1"),
        (0, [], "greater than 1"),
        (2, [0, 1, -1], "Expected 4 values"),
        (2, [0, 1, 2, 3], "not found"),
        (2, [0, -1, -1, 1], "one blank"),
        (2, [0, 1, 1, -1], "each exactly once"),
        (3, [1, 2, 3, 4, -1, 5, 6, 7, 8], "each exactly once"),
    ],
)
def test_from_flat_rejects(size: int, values: list[int], message: str) -> None:
    with pytest.raises(PuzzleFormatError, match=message):
        Board.from_flat(size, values)


def test_copy_is_independent() -> None:
    board = Board.solved(3)
    clone = board.copy()
    clone.move(Direction.LEFT)
    assert board.is_goal()
    assert not clone.is_goal()

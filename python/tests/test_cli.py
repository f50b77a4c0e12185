"""End-to-end CLI behaviour through ``typer.testing.CliRunner``."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from backend.engine.gamegenerator import is_solvable
from backend.models import BoardFile, MoveFile
from main import app

runner = CliRunner()

TWO_MOVE_BOARD = "3\n0,1,2\n3,-1,4\n6,7,5\n"


@pytest.fixture
def files(tmp_path: Path) -> tuple[Path, Path]:
    board = tmp_path / "ini.txt"
    board.write_text(TWO_MOVE_BOARD)
    return board, tmp_path / "move.txt"


def _run(board: Path, moves: Path, *extra: str):
    return runner.invoke(app, ["--board", str(board), "--moves", str(moves), *extra])


@pytest.mark.parametrize("engine", ["astar", "idastar"])
def test_solve_writes_move_file(files, engine: str) -> None:
    board, moves = files
    result = _run(board, moves, "--engine", engine)
    assert result.exit_code == 0, result.output
    assert "Initial tiles out of place: 3" in result.output
    assert "Shortest solution length: 2 moves" in result.output
    assert "Tiles out of place: 0" in result.output
    assert "States expanded:" in result.output
    assert moves.read_text() == "R\nD\n"


def test_solution_replays_to_goal(files) -> None:
    board, moves = files
    assert _run(board, moves).exit_code == 0
    result = _run(board, moves)
    assert result.exit_code == 0, result.output
    assert "Final state after applying move.txt (2 moves):" in result.output
    assert "0,1,2\n3,4,5\n6,7,-1" in result.output
    assert "Tiles out of place: 0" in result.output


@pytest.mark.parametrize("content", ["\n\n", "x\ny\n", "  \n\t\n"])
def test_unusable_move_file_triggers_solve(files, content: str) -> None:
    board, moves = files
    moves.write_text(content)
    result = _run(board, moves)
    assert result.exit_code == 0, result.output
    assert "empty or missing" in result.output
    assert moves.read_text() == "R\nD\n"


def test_illegal_replay_fails(files) -> None:
    board, moves = files
    moves.write_text("R\n\nR\n")
    result = _run(board, moves)
    assert result.exit_code == 1
    assert "line 3" in result.output


def test_bad_board_fails_before_search(tmp_path: Path) -> None:
    board = tmp_path / "ini.txt"
    board.write_text("3\n0,1,2\n3,4,5\n6,7\n")
    moves = tmp_path / "move.txt"
    result = _run(board, moves)
    assert result.exit_code == 1
    assert "Expected 9 values" in result.output
    assert not moves.exists()


def test_missing_board_fails(tmp_path: Path) -> None:
    result = _run(tmp_path / "ini.txt", tmp_path / "move.txt")
    assert result.exit_code == 1
    assert "Failed to open" in result.output


def test_bound_exceeded_writes_nothing(files) -> None:
    board, moves = files
    result = _run(board, moves, "--max-bound", "1")
    assert result.exit_code == 0, result.output
    assert "Search bound exceeded 1. No solution found." in result.output
    assert not moves.exists()


def test_unsolvable_board_reports_no_solution(tmp_path: Path) -> None:
    board = tmp_path / "ini.txt"
    board.write_text("2\n1,0\n2,-1\n")
    moves = tmp_path / "move.txt"
    result = _run(board, moves, "-e", "astar")
    assert result.exit_code == 0, result.output
    assert "No solution found." in result.output
    assert not moves.exists()


def test_node_limit_is_a_resource_error(tmp_path: Path) -> None:
    board = tmp_path / "ini.txt"
    board.write_text("3\n0,1,2\n5,-1,7\n4,3,6\n")
    moves = tmp_path / "move.txt"
    result = _run(board, moves, "-e", "astar", "--max-nodes", "2")
    assert result.exit_code == 1
    assert "search aborted: resource limit" in result.output
    assert not moves.exists()


def test_rich_frontend(files) -> None:
    board, moves = files
    result = _run(board, moves, "-f", "rich", "-e", "astar")
    assert result.exit_code == 0, result.output
    assert "Shortest solution length: 2 moves" in result.output
    assert moves.read_text() == "R\nD\n"


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generate(tmp_path: Path, size: int) -> None:
    path = tmp_path / "ini.txt"
    result = runner.invoke(app, ["generate", str(size), "--board", str(path), "--seed", "5"])
    assert result.exit_code == 0, result.output
    assert f"for {size}x{size} puzzle" in result.output
    board = BoardFile(path).load()
    assert board.size == size
    assert is_solvable(board.tiles, board.size, board.blank)


def test_generate_walk_then_solve(tmp_path: Path) -> None:
    board, moves = tmp_path / "ini.txt", tmp_path / "move.txt"
    result = runner.invoke(
        app, ["generate", "3", "--board", str(board), "--seed", "1", "--walk", "12"]
    )
    assert result.exit_code == 0, result.output
    assert _run(board, moves).exit_code == 0
    assert len(MoveFile(moves).load()) <= 12


def test_generate_rejects_small_size(tmp_path: Path) -> None:
    path = tmp_path / "ini.txt"
    result = runner.invoke(app, ["generate", "1", "--board", str(path)])
    assert result.exit_code == 1
    assert "greater than 1" in result.output
    assert not path.exists()


def test_board_with_invalid_utf8_fails(tmp_path: Path) -> None:
    board = tmp_path / "ini.txt"
    board.write_bytes(b"3\n0,1,2\n3,\xff,4\n6,7,5\n")
    moves = tmp_path / "move.txt"
    result = _run(board, moves)
    assert result.exit_code == 1
    assert "not valid text" in result.output
    assert not moves.exists()


def test_undecodable_move_file_triggers_solve(files) -> None:
    board, moves = files
    moves.write_bytes(b"\xff\xfe\n")
    result = _run(board, moves)
    assert result.exit_code == 0, result.output
    assert "empty or missing" in result.output
    assert moves.read_text() == "R\nD\n"


def test_move_path_is_directory(files) -> None:
    board, moves = files
    moves.mkdir()
    result = _run(board, moves)
    assert result.exit_code == 1
    assert "Failed to open" in result.output


def test_rich_error_keeps_brackets(tmp_path: Path) -> None:
    folder = tmp_path / "[red]boards"
    folder.mkdir()
    result = _run(folder / "ini.txt", folder / "move.txt", "-f", "rich")
    assert result.exit_code == 1
    assert "[red]boards" in result.output

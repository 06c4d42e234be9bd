import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolab.puzzle import (
    DEFAULT_START,
    GOAL,
    format_board,
    main,
    manhattan_distance,
    solve,
)

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _find_blank(board):
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == 0:
                return r, c
    raise AssertionError("no blank")


def _is_single_move(before, after):
    diffs = [
        (r, c)
        for r in range(4)
        for c in range(4)
        if before[r][c] != after[r][c]
    ]
    if len(diffs) != 2:
        return False
    (r1, c1), (r2, c2) = diffs
    if abs(r1 - r2) + abs(c1 - c2) != 1:
        return False
    return before[r1][c1] == after[r2][c2] and before[r2][c2] == after[r1][c1] and (
        0 in (before[r1][c1], before[r2][c2])
    )


def _scramble(directions):
    cells = [list(row) for row in GOAL]
    r, c = 3, 3
    for index in directions:
        dr, dc = _MOVES[index]
        nr, nc = r + dr, c + dc
        if 0 <= nr < 4 and 0 <= nc < 4:
            cells[r][c], cells[nr][nc] = cells[nr][nc], 0
            r, c = nr, nc
    return tuple(tuple(row) for row in cells)


def _assert_valid_path(start, path):
    assert path[0] == tuple(tuple(row) for row in start)
    assert path[-1] == GOAL
    for before, after in zip(path, path[1:]):
        assert _is_single_move(before, after)


def test_goal_has_zero_heuristic():
    assert manhattan_distance(GOAL) == 0


def test_default_start_heuristic():
    assert manhattan_distance(DEFAULT_START) == 3


def test_goal_solves_immediately():
    assert solve(GOAL) == [GOAL]


def test_default_start_solution_is_optimal():
    path = solve(DEFAULT_START)
    _assert_valid_path(DEFAULT_START, path)
    assert len(path) - 1 == manhattan_distance(DEFAULT_START)


@settings(max_examples=30, deadline=None)
@given(st.lists(st.integers(0, 3), max_size=12))
def test_scrambled_boards_solve(directions):
    start = _scramble(directions)
    path = solve(start)
    _assert_valid_path(start, path)
    moves = len(path) - 1
    assert manhattan_distance(start) <= moves <= len(directions)


def test_unsolvable_board_rejected():
    board = [list(row) for row in GOAL]
    board[3][1], board[3][2] = board[3][2], board[3][1]
    with pytest.raises(ValueError):
        solve(board)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        manhattan_distance([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


def test_duplicate_tiles_rejected():
    board = [list(row) for row in GOAL]
    board[0][0] = 2
    with pytest.raises(ValueError):
        solve(board)


def test_format_board_layout():
    text = format_board(GOAL)
    lines = text.split("\n")
    assert lines[0] == " 1  2  3  4 "
    assert lines[3] == "13 14 15  0 "
    assert text.endswith("\n\n")


def test_main_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Initial State:\n")
    assert "Solution Found:" in out
    assert "Move Count: 3" in out
    assert out.rstrip().endswith("Move Count: 3")


def test_main_with_tiles(capsys):
    tiles = [str(value) for row in GOAL for value in row]
    assert main(tiles) == 0
    out = capsys.readouterr().out
    assert "Move Count: 0" in out
    assert "Move Count: 1" not in out


def test_main_rejects_wrong_tile_count(capsys):
    assert main(["1", "2", "3"]) == 1
    assert "16" in capsys.readouterr().err


def test_main_rejects_unsolvable(capsys):
    board = [list(row) for row in GOAL]
    board[3][1], board[3][2] = board[3][2], board[3][1]
    tiles = [str(value) for row in board for value in row]
    assert main(tiles) == 1
    assert "not solvable" in capsys.readouterr().err
"""Unit tests for board derivation and win detection."""

import pytest

from tictactoe.rules import (
    WIN_LINES, Mark, derive_board, detect_wins, format_board, rows,
)

E, X, O = Mark.EMPTY, Mark.FIRST, Mark.SECOND


def board_with(first=(), second=()):
    board = [E] * 9
    for i in first: board[i] = X
    for i in second: board[i] = O
    return tuple(board)


def test_win_table_order():
    assert WIN_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_empty_history_gives_empty_board():
    board, next_mark = derive_board([])
    assert board == (E,) * 9
    assert next_mark is X


def test_marks_alternate_by_history_position():
    board, next_mark = derive_board([4, 0, 8])
    assert board == board_with(first=(4, 8), second=(0,))
    assert next_mark is O


def test_next_mark_after_even_history():
    _, next_mark = derive_board([2, 6])
    assert next_mark is X


def test_no_lines_on_empty_board():
    result = detect_wins((E,) * 9)
    assert not result
    assert result.lines == ()
    assert result.cells == frozenset()
    assert result.winner is None


@pytest.mark.parametrize("line", WIN_LINES)
def test_each_line_detected(line):
    result = detect_wins(board_with(second=line))
    assert result.lines == (line,)
    assert result.cells == frozenset(line)
    assert result.winner is O


def test_mixed_line_is_not_a_win():
    result = detect_wins(board_with(first=(0, 1), second=(2,)))
    assert not result


def test_two_lines_share_cells():
    # X completes row 0 and column 0 with the corner
    result = detect_wins(board_with(first=(0, 1, 2, 3, 6), second=(4, 5, 7, 8)))
    assert result.lines == ((0, 1, 2), (0, 3, 6))
    assert result.cells == frozenset({0, 1, 2, 3, 6})
    assert result.winner is X


def test_winner_is_first_line_in_table_order():
    # not reachable through play, but the detector still picks table order
    result = detect_wins(board_with(first=(6, 7, 8), second=(0, 1, 2)))
    assert result.lines == ((0, 1, 2), (6, 7, 8))
    assert result.winner is O


def test_rows_shapes_flat_sequence():
    assert rows(range(1, 10)) == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_rows_drops_partial_row():
    assert rows([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]
    assert rows([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4]]


def test_format_board():
    board, _ = derive_board([0, 4, 8])
    assert format_board(board) == "X| | \n |O| \n | |X"

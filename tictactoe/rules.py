"""
board rules: win table, board derivation, win detection

everything here is a pure function of its arguments. the board is never
stored, it is rebuilt from the move history on each call.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

BOARD_SIZE = 3                      # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# row-major cell indices; order matters, first completed line decides the winner
WIN_LINES = (
    # rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # cols
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # diags
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    occupant of a cell
    """
    EMPTY = ''
    FIRST = 'X'
    SECOND = 'O'

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class WinResult:
    """
    completed lines (table order) and the cells they cover
    """
    lines: tuple = ()
    cells: frozenset = frozenset()
    winner: Optional[Mark] = None

    def __bool__(self):
        return bool(self.lines)


def mark_for_ply(ply):
    """
    mark that plays the given 0-based ply
    """
    return Mark.FIRST if ply % 2 == 0 else Mark.SECOND


def derive_board(history):
    """
    replay history onto an empty board
    returns: (board tuple of 9 marks, mark to move next)
    """
    board = [Mark.EMPTY] * CELL_COUNT
    for ply, cell in enumerate(history):
        board[cell] = mark_for_ply(ply)
    return tuple(board), mark_for_ply(len(history))


def detect_wins(board):
    """
    scan every win line for three equal non-empty marks
    """
    lines = []
    cells = set()
    for line in WIN_LINES:
        a, b, c = (board[i] for i in line)
        if a is not Mark.EMPTY and a == b == c:
            lines.append(line)
            cells.update(line)
    if not lines:
        return WinResult()
    return WinResult(tuple(lines), frozenset(cells), board[lines[0][0]])


def rows(cells, column_count=BOARD_SIZE):
    """
    split a flat sequence into rows of column_count items
    a trailing partial row is dropped
    """
    shaped, row = [], []
    for item in cells:
        row.append(item)
        if len(row) == column_count:
            shaped.append(row); row = []
    return shaped


def format_board(board):
    """
    plain text grid, one line per row
    """
    return "\n".join(
        "|".join(str(mark) or ' ' for mark in row) for row in rows(board)
    )

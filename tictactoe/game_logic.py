import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .rules import CELL_COUNT, Mark, derive_board, detect_wins, format_board

logger = logging.getLogger(__name__)


class InvalidCellError(ValueError):
    """
    cell index outside 0..8; a caller bug, not a rejected move
    """


class GameState(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    state plus its mark: next to move, winner, or None on a draw
    """
    state: GameState
    mark: Optional[Mark] = None

    @property
    def is_over(self):
        return self.state is not GameState.IN_PROGRESS


class GameLogic:
    """
    tic-tac-toe rules and state

    only the move history is stored; board and status are rebuilt from it
    on every query. illegal commands are no-ops that return False.
    """
    def __init__(self):
        """
        start with an empty history
        """
        self._moves = []                  # cell indices in play order

    @property
    def history(self):
        return tuple(self._moves)

    # -- commands --------------------------------------------------------

    def play(self, cell):
        """
        place the next mark on cell
        returns: True if accepted, False if the cell is taken or game is won
        """
        _check_cell(cell)
        if cell in self._moves:
            logger.debug("play %d rejected: cell taken", cell)
            return False
        if self.status().state is GameState.WON:
            logger.debug("play %d rejected: game already won", cell)
            return False
        mark = self.current_player()
        self._moves.append(cell)
        logger.info("%s plays %d", mark, cell)
        return True

    def undo(self):
        """
        take back the most recent move, whoever made it
        """
        if not self._moves:
            logger.debug("undo rejected: no moves")
            return False
        cell = self._moves.pop()
        logger.info("undo move at %d", cell)
        return True

    def reset(self):
        # always succeeds
        self._moves.clear()
        logger.info("game reset")
        return True

    # -- queries ---------------------------------------------------------

    def board(self):
        return derive_board(self._moves)[0]

    def current_player(self):
        return derive_board(self._moves)[1]

    def can_undo(self):
        return bool(self._moves)

    def status(self):
        """
        won if any line is complete, draw on a full board, else in progress
        """
        board, next_mark = derive_board(self._moves)
        wins = detect_wins(board)
        if wins:
            return GameStatus(GameState.WON, wins.winner)
        if len(self._moves) == CELL_COUNT:
            return GameStatus(GameState.DRAW)
        return GameStatus(GameState.IN_PROGRESS, next_mark)

    def winning_cells(self):
        # completed lines only exist when the game is won
        return detect_wins(self.board()).cells

    def display_message(self):
        status = self.status()
        if status.state is GameState.WON:
            return f"{status.mark} wins!"
        if status.state is GameState.DRAW:
            return "It's a draw!"
        return f"{status.mark} to play"

    def __str__(self):
        return format_board(self.board())


def _check_cell(cell):
    # bool is an int subclass but never a cell
    if isinstance(cell, bool) or not isinstance(cell, int) \
       or not 0 <= cell < CELL_COUNT:
        raise InvalidCellError(f"cell must be an int in 0..{CELL_COUNT - 1}, got {cell!r}")

import logging

from ..game_logic import GameLogic, GameState
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "TicTacToe"

# label style per game state
MESSAGE_STYLES = {
    GameState.IN_PROGRESS: "color: #8acaff; font-weight: bold;",
    GameState.WON: "color: lime; font-weight: bold;",
    GameState.DRAW: "color: #eee; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: forwards clicks to the engine, redraws from its queries
    """
    def __init__(self, game_logic=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic if game_logic is not None else GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_action = QAction("New Game", self)
        self.new_action.setShortcut(QKeySequence.StandardKey.New)
        self.new_action.triggered.connect(self.reset_game)
        self.undo_action = QAction("Undo", self)
        self.undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self.undo_action.triggered.connect(self.undo_move)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (self.new_action, self.undo_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + undo/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.undo_button = QPushButton("Undo"); self.undo_button.clicked.connect(self.undo_move)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        for w in (self.message_label, None, self.undo_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _refresh(self):
        # full redraw from engine queries, no incremental state kept here
        status = self.game_logic.status()
        self.message_label.setStyleSheet(MESSAGE_STYLES[status.state])
        self.message_label.setText(self.game_logic.display_message())
        can_undo = self.game_logic.can_undo()
        self.undo_button.setEnabled(can_undo); self.undo_action.setEnabled(can_undo)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, cell):
        logger.debug("cell %d clicked", cell)
        self.game_logic.play(cell)
        self._refresh()

    @Slot()
    def undo_move(self):
        logger.debug("undo requested")
        self.game_logic.undo()
        self._refresh()

    @Slot()
    def reset_game(self):
        logger.debug("reset requested")
        self.game_logic.reset()
        self._refresh()

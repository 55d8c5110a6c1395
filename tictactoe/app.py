import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(name):
    """
    level name -> logging level, unknown names fall back to WARNING
    """
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).strip().upper())
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)


LOG_LEVEL = resolve_log_level(os.environ.get("TICTACTOE_LOG_LEVEL"))

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

MID_GREY = QColor(53, 53, 53)
DISABLED_GREY = QColor(127, 127, 127)
ACCENT_BLUE = QColor(42, 130, 218)

# role -> colour for the active/inactive groups
DARK_PALETTE = {
    QPalette.Window: MID_GREY,
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: MID_GREY,
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT_BLUE,
    QPalette.Highlight: ACCENT_BLUE,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

# greyed out text for disabled widgets (undo on an empty board)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Apply the dark theme to the whole application.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_GREY)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()

import os

import pytest

# no display needed for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe.game_logic import GameLogic


@pytest.fixture
def game():
    return GameLogic()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..rules import BOARD_SIZE, Mark, rows

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_HIGHLIGHT_COLOR = QColor(50, 205, 50, 90)   # translucent lime
MIN_BOARD_SIZE = 150


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0..8 on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only: queries only
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_SIZE, MIN_BOARD_SIZE))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget: (x offset, y offset, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning cells
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            winning = self.game_logic.winning_cells()
            for r, row in enumerate(rows(self.game_logic.board())):
                for c, mark in enumerate(row):
                    x = offset_x + c*cell_size
                    y = offset_y + r*cell_size
                    if r*BOARD_SIZE + c in winning:
                        painter.fillRect(QRectF(x, y, cell_size, cell_size), WIN_HIGHLIGHT_COLOR)
                    if mark is Mark.EMPTY: continue
                    self._draw_mark(painter, mark, x + cell_size/2, y + cell_size/2, cell_size/2 * 0.7)
            # grid lines on top of the highlight
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
        finally:
            painter.end()

    def _draw_mark(self, painter, mark, cx, cy, rad):
        if mark is Mark.FIRST:
            painter.setPen(QPen(X_COLOR, 4))
            # two crossing lines
            painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
            painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
        else:
            painter.setPen(QPen(O_COLOR, 4))
            painter.drawEllipse(QPointF(cx, cy), rad, rad)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(cell)  # notify main window

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF, Slot
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Player, winning_line
from . import theme


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, store, parent=None, min_size=150):
        super().__init__(parent)
        self.store = store  # source of the current state
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(min_size, min_size))
        self.store.state_changed.connect(self._on_state_changed)

    @Slot(object)
    def _on_state_changed(self, state):
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # square grid centered in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        ox, oy, side = self._grid_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp float edge cases
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def is_cell_clickable(self, row, col):
        # game running and cell still empty
        state = self.store.current_state()
        return not state.status.is_over and state.cell(row, col) is None

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        state = self.store.current_state()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._grid_geometry()
            painter.fillRect(self.rect(), QColor(theme.BOARD_BACKGROUND))
            cell_size = side / BOARD_SIZE
            # winning cells underneath everything else
            line = winning_line(state.board)
            if line:
                for r, c in line:
                    painter.fillRect(
                        QRectF(ox + c * cell_size, oy + r * cell_size, cell_size, cell_size),
                        QColor(theme.WIN_CELL_COLOR),
                    )
            # grid lines
            painter.setPen(QPen(QColor(theme.GRID_LINE_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
                y = oy + i * cell_size
                painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
            # marks
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    player = state.cell(r, c)
                    if player is None:
                        continue
                    cx = ox + c * cell_size + cell_size / 2
                    cy = oy + r * cell_size + cell_size / 2
                    rad = cell_size / 2 * 0.6
                    painter.setPen(QPen(QColor(theme.mark_color(player)), 4))
                    if player is Player.X:
                        # two crossing lines
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is None or not self.is_cell_clickable(*cell):
            return
        self.cell_clicked.emit(*cell)  # notify main window

    def sizeHint(self):
        return QSize(300, 300)

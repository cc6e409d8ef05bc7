"""Widgets, driven headless through the offscreen Qt platform."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPalette

from tictactoe.config import AppConfig
from tictactoe.game_logic import GameStatus, Player, reset
from tictactoe.store import GameStore
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui.status_label import StatusLabel, status_message
from tictactoe.ui.theme import DARK_ROLES, DISABLED_ROLES, O_COLOR, X_COLOR, dark_palette, mark_color

WIN_FOR_X = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]


def _release(widget, x, y):
    event = QMouseEvent(
        QEvent.MouseButtonRelease, QPointF(x, y), QPointF(x, y),
        Qt.LeftButton, Qt.NoButton, Qt.NoModifier,
    )
    widget.mouseReleaseEvent(event)


@pytest.fixture
def board(qapp):
    store = GameStore()
    widget = BoardWidget(store)
    widget.resize(300, 300)
    widget.clicks = []
    widget.cell_clicked.connect(lambda r, c: widget.clicks.append((r, c)))
    yield widget
    widget.deleteLater()


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow(AppConfig())
    yield win
    win.close()
    win.deleteLater()


def test_status_message_texts(play):
    assert status_message(reset()) == "Player X's turn"
    assert status_message(play(reset(), [(0, 0)])) == "Player O's turn"
    assert status_message(play(reset(), WIN_FOR_X)) == "Player X wins!"
    draw = play(reset(), [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])
    assert status_message(draw) == "It's a draw!"


def test_status_label_shows_state(qapp, play):
    label = StatusLabel()
    label.show_state(play(reset(), WIN_FOR_X))
    assert label.text() == "Player X wins!"


def test_cell_at_maps_points_to_cells(board):
    assert board.cell_at(10, 10) == (0, 0)
    assert board.cell_at(150, 150) == (1, 1)
    assert board.cell_at(299, 5) == (0, 2)
    assert board.cell_at(5, 299) == (2, 0)
    assert board.cell_at(300, 300) is None


def test_cell_at_uses_centered_square(board):
    board.resize(400, 300)
    # grid spans x 50..350
    assert board.cell_at(20, 150) is None
    assert board.cell_at(60, 10) == (0, 0)
    assert board.cell_at(340, 290) == (2, 2)


def test_click_on_empty_cell_is_forwarded(board):
    _release(board, 250, 50)
    assert board.clicks == [(0, 2)]


def test_click_on_occupied_cell_is_dropped(board):
    board.store.place_mark(0, 0)
    _release(board, 10, 10)
    assert board.clicks == []


def test_click_after_game_over_is_dropped(board):
    for row, col in WIN_FOR_X:
        board.store.place_mark(row, col)
    _release(board, 250, 250)
    assert board.clicks == []


def test_board_paints_without_error(board):
    for row, col in WIN_FOR_X:
        board.store.place_mark(row, col)
    image = QImage(300, 300, QImage.Format_ARGB32)
    board.render(image)
    assert not image.isNull()


def test_window_plays_a_game(window):
    assert window.windowTitle() == "Tic-Tac-Toe"
    assert window.status_label.text() == "Player X's turn"
    for row, col in WIN_FOR_X:
        window.board_widget.cell_clicked.emit(row, col)
    assert window.store.current_state().status == GameStatus.won(Player.X)
    assert window.status_label.text() == "Player X wins!"


def test_window_ignores_illegal_click(window):
    window.board_widget.cell_clicked.emit(1, 1)
    before = window.store.current_state()
    window.board_widget.cell_clicked.emit(1, 1)
    assert window.store.current_state() is before
    assert window.status_label.text() == "Player O's turn"


def test_reset_button_starts_new_game(window):
    for row, col in WIN_FOR_X:
        window.board_widget.cell_clicked.emit(row, col)
    window.reset_button.click()
    assert window.store.current_state() == reset()
    assert window.status_label.text() == "Player X's turn"


def test_dark_palette_uses_role_tables(qapp):
    palette = dark_palette()
    for role, color in DARK_ROLES.items():
        assert palette.color(QPalette.Active, role) == QColor(color)
    for role, color in DISABLED_ROLES.items():
        assert palette.color(QPalette.Disabled, role) == QColor(color)


def test_mark_colors_differ_per_player():
    assert mark_color(Player.X) == X_COLOR
    assert mark_color(Player.O) == O_COLOR
